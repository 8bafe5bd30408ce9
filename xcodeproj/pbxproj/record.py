"""
Consuming record over a parsed pbxproj object.

A Record wraps one object dictionary during the construction of one domain
object. Keys are normalized from the file's lowerCamelCase to snake_case, and
every successful ``take_*`` call removes the field, so whatever is left once a
constructor returns is data the constructor did not understand.
"""

import re
from typing import Any, Dict, Iterator, List, Optional, Tuple

from xcodeproj.errors import MissingField, TypeMismatch
from xcodeproj.parser.grammar import REFERENCE_RE
from xcodeproj.parser.kind import Kind, ObjectKind, UnknownKind
from xcodeproj.parser.value import PBXObjectMap, Value, value_kind

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")

_MISSING = object()


def is_identifier(key: str) -> bool:
    return bool(REFERENCE_RE.match(key))


def normalize_key(key: str) -> str:
    """fileRef -> file_ref, repositoryURL -> repository_url; identifiers pass through."""
    if is_identifier(key):
        return key
    key = _ACRONYM_BOUNDARY.sub(r"\1_\2", key)
    key = _WORD_BOUNDARY.sub(r"\1_\2", key)
    return key.lower()


class Record:
    def __init__(self, values: PBXObjectMap):
        self._values: Dict[str, Value] = {}
        self._original_keys: Dict[str, str] = {}
        for key, value in values.items():
            normalized = normalize_key(key)
            self._values[normalized] = value
            self._original_keys[normalized] = key

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def original_key(self, key: str) -> str:
        return self._original_keys.get(key, key)

    def take_value(self, key: str) -> Value:
        if key not in self._values:
            raise MissingField(key)
        return self._values.pop(key)

    def take_optional_value(self, key: str) -> Optional[Value]:
        return self._values.pop(key, None)

    def _take_checked(self, key: str, expected: str, check, default: Any) -> Any:
        value = self._values.get(key, _MISSING)
        if value is _MISSING:
            if default is _MISSING:
                raise MissingField(key)
            return default
        converted = check(value)
        if converted is _MISSING:
            raise TypeMismatch(key, expected, value_kind(value))
        del self._values[key]
        return converted

    def take_string(self, key: str) -> str:
        return self._take_checked(key, "string", _as_string, _MISSING)

    def take_optional_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._take_checked(key, "string", _as_string, default)

    def take_number(self, key: str) -> int:
        return self._take_checked(key, "number", _as_number, _MISSING)

    def take_optional_number(self, key: str, default: Optional[int] = None) -> Optional[int]:
        return self._take_checked(key, "number", _as_number, default)

    def take_bool(self, key: str) -> bool:
        return self._take_checked(key, "bool", _as_bool, _MISSING)

    def take_optional_bool(self, key: str, default: Optional[bool] = None) -> Optional[bool]:
        return self._take_checked(key, "bool", _as_bool, default)

    def take_kind(self, key: str) -> Kind:
        return self._take_checked(key, "kind", _as_kind, _MISSING)

    def take_object(self, key: str) -> PBXObjectMap:
        return self._take_checked(key, "object", _as_object, _MISSING)

    def take_optional_object(
        self, key: str, default: Optional[PBXObjectMap] = None
    ) -> Optional[PBXObjectMap]:
        return self._take_checked(key, "object", _as_object, default)

    def take_array(self, key: str) -> List[Value]:
        return self._take_checked(key, "array", _as_array, _MISSING)

    def take_optional_array(
        self, key: str, default: Optional[List[Value]] = None
    ) -> Optional[List[Value]]:
        return self._take_checked(key, "array", _as_array, default)

    def take_string_list(self, key: str) -> List[str]:
        return self._take_checked(key, "array of strings", _as_string_list, _MISSING)

    def take_optional_string_list(self, key: str) -> List[str]:
        return self._take_checked(key, "array of strings", _as_string_list, [])

    def restore(self, key: str, value: Value) -> None:
        """Put a taken field back, e.g. when its value turned out to be unreadable."""
        self._values[key] = value
        self._original_keys.setdefault(key, key)

    def residue(self) -> Dict[str, Value]:
        """Fields nobody consumed, keyed by their original spelling."""
        return {self._original_keys[key]: value for key, value in self._values.items()}

    def items(self) -> Iterator[Tuple[str, Value]]:
        return iter(list(self._values.items()))


def _as_string(value: Value) -> Any:
    if isinstance(value, str):
        return value
    # Bare words overlap: an unquoted name can lex as a kind tag or an integer.
    if isinstance(value, (ObjectKind, UnknownKind)):
        return str(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return _MISSING


def _as_number(value: Value) -> Any:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return _MISSING


def _as_bool(value: Value) -> Any:
    if isinstance(value, bool):
        return value
    # Xcode writes most flags as 0/1 rather than YES/NO.
    if isinstance(value, int) and value in (0, 1):
        return value == 1
    return _MISSING


def _as_kind(value: Value) -> Any:
    if isinstance(value, (ObjectKind, UnknownKind)):
        return value
    if isinstance(value, str):
        return ObjectKind.from_tag(value)
    return _MISSING


def _as_object(value: Value) -> Any:
    if isinstance(value, dict):
        return value
    return _MISSING


def _as_array(value: Value) -> Any:
    if isinstance(value, list):
        return value
    return _MISSING


def _as_string_list(value: Value) -> Any:
    if not isinstance(value, list):
        return _MISSING
    strings = [_as_string(item) for item in value]
    if any(item is _MISSING for item in strings):
        return _MISSING
    return strings
