from xcodeproj.parser.kind import Kind, ObjectKind, UnknownKind
from xcodeproj.parser.grammar import Node, parse
from xcodeproj.parser.value import (
    PBXObjectMap,
    Value,
    parse_field,
    parse_file,
    parse_value,
    value_kind,
)
