from typing import Any

from assertkit.converters.base import TypeConverter
from assertkit.converters.icon import Icon, IconConverter

_CONVERTERS: dict[type, type[TypeConverter]] = {
    Icon: IconConverter,
}


def get_converter(value_or_type: Any) -> TypeConverter:
    """Return a converter for a type, or for the type of an instance."""
    value_type = value_or_type if isinstance(value_or_type, type) else type(value_or_type)
    for registered, cls in _CONVERTERS.items():
        if issubclass(value_type, registered):
            return cls()
    raise ValueError(
        f"No converter registered for {value_type.__qualname__!r}. "
        f"Available: {', '.join(sorted(t.__qualname__ for t in _CONVERTERS))}"
    )


__all__ = [
    "Icon",
    "IconConverter",
    "TypeConverter",
    "get_converter",
]
