"""
Exceptions raised while reading and editing pbxproj documents.

Every fatal error carries enough context (a source position or a field path)
to locate the defect in the original text.
"""

from typing import Iterable, Optional


class XcodeProjError(Exception):
    """Base exception for all xcodeproj errors."""

    pass


class ParseError(XcodeProjError):
    """Raised when the text does not match the pbxproj grammar."""

    def __init__(
        self,
        position: int,
        expected: str,
        found: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.position = position
        self.expected = expected
        self.found = found
        self.line = line
        self.column = column
        where = f"offset {position}"
        if line is not None:
            where = f"line {line}, column {column}"
        super().__init__(f"expected {expected} at {where}, found {found!r}")


class ValueParseError(XcodeProjError):
    """Raised when a token cannot be reduced to a value."""

    def __init__(self, text: str, message: str):
        self.text = text
        super().__init__(message)


class InvalidBoolLiteral(ValueParseError):
    def __init__(self, text: str):
        super().__init__(text, f"{text!r} is not parseable as boolean")


class InvalidNumberLiteral(ValueParseError):
    def __init__(self, text: str):
        super().__init__(text, f"{text!r} is not parseable as number")


class MappingError(XcodeProjError):
    """Raised when a record does not satisfy an object's field contract."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(message)

    def within(self, prefix: str) -> "MappingError":
        """Return a copy of this error with the key nested under prefix."""
        raise NotImplementedError


class MissingField(MappingError):
    def __init__(self, key: str):
        super().__init__(key, f"missing required field {key!r}")

    def within(self, prefix: str) -> "MissingField":
        return MissingField(f"{prefix}.{self.key}")


class TypeMismatch(MappingError):
    def __init__(self, key: str, expected_kind: str, actual_kind: str):
        self.expected_kind = expected_kind
        self.actual_kind = actual_kind
        super().__init__(
            key, f"field {key!r}: expected {expected_kind}, got {actual_kind}"
        )

    def within(self, prefix: str) -> "TypeMismatch":
        return TypeMismatch(
            f"{prefix}.{self.key}", self.expected_kind, self.actual_kind
        )


class UnknownFieldsError(MappingError):
    """Raised in strict mode when a constructor leaves fields unconsumed."""

    def __init__(self, key: str, fields: Iterable[str]):
        self.fields = sorted(fields)
        super().__init__(key, f"{key}: unknown fields {', '.join(self.fields)}")

    def within(self, prefix: str) -> "UnknownFieldsError":
        return UnknownFieldsError(prefix, self.fields)


class DuplicateIdentifierError(XcodeProjError):
    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"object {identifier} already exists in the graph")
