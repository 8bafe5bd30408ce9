"""
pbxproj formatter.

This module converts an XcodeProject back into pbxproj text. Objects are
rendered through their ``to_record`` method and grouped into the usual
``/* Begin <isa> section */`` blocks; every other value is formatted
recursively by type. Strings are written bare when the grammar would read them
back as the same string, and quoted otherwise.
"""

import re
from itertools import groupby
from typing import TYPE_CHECKING, List, Tuple

from xcodeproj.parser import grammar
from xcodeproj.parser.kind import ObjectKind, UnknownKind
from xcodeproj.parser.value import PBXObjectMap, Value
from xcodeproj.pbxproj.model import PBXObject

if TYPE_CHECKING:
    from xcodeproj.pbxproj.document import XcodeProject

HEADER = "// !$*UTF8*$!\n"

# Escape pairs pass through as written; a bare quote or a final lone backslash would
# end the literal early.
_QUOTED_PIECE = re.compile(r'\\.|\\\Z|"', re.DOTALL)


def format_document(project: "XcodeProject") -> str:
    """
    Convert an XcodeProject to its pbxproj text.

    Args:
        project: The XcodeProject to format.

    Returns:
        A string containing the complete pbxproj file content.
    """
    result = HEADER
    result += "{\n"
    result += f"\tarchiveVersion = {project.archive_version};\n"
    result += f"\tclasses = {format_dict(project.classes, 1)};\n"
    result += f"\tobjectVersion = {project.object_version};\n"
    result += f"\tobjects = {format_objects(list(project.objects.items()), 1)};\n"
    result += f"\trootObject = {format_string(project.root_object_reference)};\n"
    for key in sorted(project.extra):
        result += f"\t{format_key(key)} = {format_value(project.extra[key], 1)};\n"
    result += "}\n"
    return result


def format_objects(objects: List[Tuple[str, PBXObject]], indent_level: int) -> str:
    """
    Format the objects dictionary, one section per object kind.

    Args:
        objects: (identifier, object) pairs to format.
        indent_level: The current indentation level.

    Returns:
        A string representing the formatted objects dictionary.
    """
    indent = "\t" * indent_level
    inner_indent = "\t" * (indent_level + 1)

    if not objects:
        return "{\n" + indent + "}"

    result = "{\n"
    by_kind = sorted(objects, key=lambda item: (str(item[1].kind), item[0]))
    for tag, group in groupby(by_kind, key=lambda item: str(item[1].kind)):
        result += f"\n/* Begin {tag} section */\n"
        for identifier, obj in group:
            record = format_dict(obj.to_record(), indent_level + 1)
            result += f"{inner_indent}{identifier} = {record};\n"
        result += f"/* End {tag} section */\n"
    result += f"{indent}}}"
    return result


def format_value(value: Value, indent_level: int) -> str:
    """
    Format a value based on its type.

    Args:
        value: The value to format.
        indent_level: The current indentation level.

    Returns:
        A string representing the formatted value.
    """
    if isinstance(value, bool):
        return "YES" if value else "NO"
    elif isinstance(value, int):
        return str(value)
    elif isinstance(value, (ObjectKind, UnknownKind)):
        return str(value)
    elif isinstance(value, str):
        return format_string(value)
    elif isinstance(value, list):
        return format_list(value, indent_level)
    elif isinstance(value, dict):
        return format_dict(value, indent_level)
    else:
        raise TypeError(f"Unsupported type: {type(value).__name__} for value: {value}")


def format_string(value: str) -> str:
    if _is_bare(value):
        return value
    return '"' + _QUOTED_PIECE.sub(_escape_piece, value) + '"'


def _escape_piece(match: "re.Match[str]") -> str:
    piece = match.group(0)
    if piece == '"':
        return r'\"'
    if piece == "\\":
        return r"\\"
    return piece


def format_key(key: str) -> str:
    return format_string(key)


def _is_bare(value: str) -> bool:
    if not grammar.WORD_RE.fullmatch(value):
        return False
    if value.startswith(("//", "/*")):
        return False
    rule = grammar.classify_word(value)
    if rule == grammar.NUMBER:
        # Decimal tokens read back as strings, plain integers would not.
        return "." in value
    return rule in (grammar.REFERENCE, grammar.IDENT)


def _key_order(key: str) -> Tuple[int, str]:
    return (0 if key == "isa" else 1, key)


def format_dict(value_dict: PBXObjectMap, indent_level: int) -> str:
    """
    Format a dictionary, "isa" first and the other keys sorted.

    Args:
        value_dict: The dictionary to format.
        indent_level: The current indentation level.

    Returns:
        A string representing the formatted dictionary.
    """
    indent = "\t" * indent_level
    inner_indent = "\t" * (indent_level + 1)

    # Empty dictionaries keep their braces on separate lines like Xcode does
    if not value_dict:
        return "{\n" + indent + "}"

    result = "{\n"
    for key in sorted(value_dict.keys(), key=_key_order):
        value = value_dict[key]
        if value is None:
            continue
        formatted_value = format_value(value, indent_level + 1)
        result += f"{inner_indent}{format_key(key)} = {formatted_value};\n"
    result += f"{indent}}}"
    return result


def format_list(value_list: List[Value], indent_level: int) -> str:
    """
    Format a list.

    Args:
        value_list: The list to format.
        indent_level: The current indentation level.

    Returns:
        A string representing the formatted list.
    """
    if not value_list:
        return "()"

    # Handle single-item lists differently (on a single line)
    if len(value_list) == 1 and not isinstance(value_list[0], (list, dict)):
        return f"({format_value(value_list[0], indent_level)})"

    indent = "\t" * indent_level
    inner_indent = "\t" * (indent_level + 1)

    result = "(\n"
    for item in value_list:
        result += f"{inner_indent}{format_value(item, indent_level + 1)},\n"
    result += f"{indent})"
    return result
