"""
Field Kind Classification

Every top-level value of a Firestore document is classified purely by its
shape into one of three kinds:

- ArrayField: an array value, described by its length
- MapField: a map value, described by its own keys in iteration order
- ScalarField: anything else, described by a Firestore-style type name

Classification is recomputed for each value; nothing is cached.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, List, NamedTuple, Union

from google.cloud.firestore_v1 import GeoPoint
from google.cloud.firestore_v1.base_document import BaseDocumentReference


class ScalarField(NamedTuple):
    """A non-container value, reported by type name"""
    type_name: str

    def describe(self) -> str:
        return self.type_name


class ArrayField(NamedTuple):
    """An array value, reported by element count"""
    length: int

    def describe(self) -> str:
        return f"{self.length} items (array)"


class MapField(NamedTuple):
    """A map value, reported by its keys"""
    keys: List[str]

    def describe(self) -> str:
        return "object with keys: " + ", ".join(self.keys)


FieldKind = Union[ScalarField, ArrayField, MapField]


def scalar_type_name(value: Any) -> str:
    """Infer a simple type string from a Firestore scalar value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, datetime):
        # DatetimeWithNanoseconds for Firestore timestamps
        return "timestamp"
    if isinstance(value, bytes):
        return "bytes"
    if isinstance(value, GeoPoint):
        return "geopoint"
    if isinstance(value, BaseDocumentReference):
        return "reference"
    return type(value).__name__


def classify(value: Any) -> FieldKind:
    """Classify a field value by structure: array, then map, then scalar."""
    if isinstance(value, (list, tuple)):
        return ArrayField(len(value))
    if isinstance(value, Mapping):
        return MapField([str(key) for key in value.keys()])
    return ScalarField(scalar_type_name(value))


def describe_field(name: str, value: Any) -> str:
    """Render one field report line body, e.g. ``tags: 2 items (array)``."""
    return f"{name}: {classify(value).describe()}"
