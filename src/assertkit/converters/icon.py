"""Icons backed by ICO bytes and their type converter."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Sequence

from PIL import Image, UnidentifiedImageError

from assertkit.converters.base import TypeConverter
from assertkit.culture import Culture

NONE_TEXT = "(none)"


class Icon:
    """An immutable icon holding the encoded ICO file."""

    def __init__(self, data: bytes | bytearray):
        self._data = bytes(data)
        try:
            with Image.open(io.BytesIO(self._data)) as image:
                if image.format != "ICO":
                    raise ValueError(f"Expected ICO data, got {image.format}")
                self.width, self.height = image.size
        except UnidentifiedImageError as exc:
            raise ValueError("Data is not a valid icon") from exc

    @classmethod
    def from_file(cls, path: str | Path) -> Icon:
        return cls(Path(path).read_bytes())

    @classmethod
    def from_image(cls, image: Image.Image, sizes: Sequence[tuple[int, int]] | None = None) -> Icon:
        buffer = io.BytesIO()
        if sizes is None:
            sizes = [image.size]
        image.save(buffer, format="ICO", sizes=list(sizes))
        return cls(buffer.getvalue())

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def to_bytes(self) -> bytes:
        return self._data

    def save(self, stream: io.BufferedIOBase) -> None:
        stream.write(self._data)

    def to_image(self) -> Image.Image:
        with Image.open(io.BytesIO(self._data)) as image:
            image.load()
            return image.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Icon):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __str__(self) -> str:
        return "(Icon)"

    def __repr__(self) -> str:
        return f"Icon({self.width}x{self.height})"


class IconConverter(TypeConverter):
    """Converts icons from ICO bytes and to text, bytes or Pillow images."""

    def can_convert_from(self, source_type: Any, context: Any = None) -> bool:
        return source_type in (bytes, bytearray)

    def can_convert_to(self, destination_type: Any, context: Any = None) -> bool:
        if destination_type in (str, bytes):
            return True
        return isinstance(destination_type, type) and issubclass(destination_type, Image.Image)

    def _convert_from(self, value: Any, context: Any, culture: Culture) -> Any:
        if isinstance(value, (bytes, bytearray)):
            return Icon(value)
        return super()._convert_from(value, context, culture)

    def _convert_to(self, value: Any, destination_type: Any, context: Any, culture: Culture) -> Any:
        if destination_type is str:
            return NONE_TEXT if value is None else str(value)
        if isinstance(value, Icon):
            if destination_type is bytes:
                return value.to_bytes()
            if isinstance(destination_type, type) and issubclass(destination_type, Image.Image):
                return value.to_image()
        return super()._convert_to(value, destination_type, context, culture)
