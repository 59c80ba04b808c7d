"""
Decoded EXIF values.
"""
import json
from typing import Dict, Iterator, Optional, Union

from .tags import ExifField

FieldKey = Union[ExifField, str]


def _field(key: FieldKey) -> ExifField:
    if isinstance(key, ExifField):
        return key
    return ExifField.from_name(key)


class ExifRecord:
    """
    Known EXIF fields and their printable values.

    Fields that were never set are absent, there is no placeholder value.
    """
    def __init__(self):
        self._values: Dict[ExifField, str] = {}

    def __str__(self) -> str:
        return ', '.join('{}={}'.format(name, value) for name, value in self.items())

    def __repr__(self) -> str:
        return '<{}.{} fields={} at {}>'.format(
            self.__class__.__module__,
            self.__class__.__name__,
            len(self._values),
            hex(id(self))
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, ExifRecord):
            return NotImplemented
        return self._values == other._values

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __iter__(self) -> Iterator[str]:
        for field in self._values:
            yield field.tag_name

    def __contains__(self, key: FieldKey) -> bool:
        try:
            return _field(key) in self._values
        except KeyError:
            return False

    def __getitem__(self, key: FieldKey) -> str:
        return self._values[_field(key)]

    def get(self, key: FieldKey, default: Optional[str] = None) -> Optional[str]:
        try:
            return self[key]
        except KeyError:
            return default

    def set(self, field: ExifField, value: str) -> None:
        """Store ``value`` under ``field``, replacing what was there."""
        self._values[field] = value

    def items(self) -> Iterator:
        for field, value in self._values.items():
            yield field.tag_name, value

    def as_dict(self) -> Dict[str, str]:
        """
        JSON view of the record, keyed by snake_case names.

        Keys come out in field declaration order, absent fields are left out.
        """
        return {
            field.json_key: self._values[field]
            for field in ExifField
            if self._values.get(field)
        }

    def to_json(self, indent: Optional[Union[int, str]] = ' ') -> str:
        return json.dumps(self.as_dict(), indent=indent, ensure_ascii=False)
