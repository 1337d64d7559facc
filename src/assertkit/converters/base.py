from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from assertkit.culture import Culture, current_culture
from assertkit.errors import ArgumentNullError, UnsupportedConversion

logger = logging.getLogger(__name__)


def _type_name(value_type: Any) -> str:
    if isinstance(value_type, type):
        return value_type.__qualname__
    return repr(value_type)


class TypeConverter(ABC):
    """Converts values of one type from and to other types.

    Subclasses override the ``can_*`` predicates and must implement the
    ``_convert_*`` hooks. The base hooks raise :class:`UnsupportedConversion`
    (``_convert_to`` also renders ``str``); subclasses defer to them through
    ``super()`` for anything they do not handle.
    """

    def can_convert_from(self, source_type: Any, context: Any = None) -> bool:
        return False

    def can_convert_to(self, destination_type: Any, context: Any = None) -> bool:
        return destination_type is str

    def convert_from(self, value: Any, *, context: Any = None, culture: Culture | None = None) -> Any:
        culture = culture if culture is not None else current_culture()
        logger.debug(f"{self.name()}: converting from {_type_name(type(value))} (culture={culture})")
        return self._convert_from(value, context, culture)

    def convert_to(
        self,
        value: Any,
        destination_type: Any,
        *,
        context: Any = None,
        culture: Culture | None = None,
    ) -> Any:
        if destination_type is None:
            raise ArgumentNullError("destination_type")
        culture = culture if culture is not None else current_culture()
        logger.debug(f"{self.name()}: converting to {_type_name(destination_type)} (culture={culture})")
        return self._convert_to(value, destination_type, context, culture)

    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def _convert_from(self, value: Any, context: Any, culture: Culture) -> Any:
        raise UnsupportedConversion(self.name(), "from", _type_name(type(value)))

    @abstractmethod
    def _convert_to(self, value: Any, destination_type: Any, context: Any, culture: Culture) -> Any:
        if destination_type is str:
            return "" if value is None else str(value)
        raise UnsupportedConversion(self.name(), "to", _type_name(destination_type))
