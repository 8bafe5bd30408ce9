from xcodeproj.config import ParserConfig
from xcodeproj.errors import (
    DuplicateIdentifierError,
    InvalidBoolLiteral,
    InvalidNumberLiteral,
    MappingError,
    MissingField,
    ParseError,
    TypeMismatch,
    UnknownFieldsError,
    XcodeProjError,
)
from xcodeproj.parser import ObjectKind, UnknownKind, parse_file, parse_value
from xcodeproj.pbxproj import XcodeProject, ObjectGraph, WeakHandle
