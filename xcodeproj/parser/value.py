"""
Value reduction.

Reduces a parse tree from the grammar into plain Python values:

    string    -> str (enclosing quotes stripped, escapes kept verbatim)
    reference -> str
    ident     -> str
    number    -> int (leading zeros are not kept), or str when the token contains a
                 decimal point
    bool      -> bool
    kind      -> ObjectKind / UnknownKind
    array     -> list
    object    -> dict (insertion ordered, last duplicate key wins)
"""

from typing import Callable, Dict, List, Tuple, Union

from xcodeproj.errors import InvalidBoolLiteral, InvalidNumberLiteral
from xcodeproj.parser import grammar
from xcodeproj.parser.grammar import Node
from xcodeproj.parser.kind import Kind, ObjectKind, UnknownKind

Value = Union[str, int, bool, Kind, List["Value"], Dict[str, "Value"]]
PBXObjectMap = Dict[str, Value]


def value_kind(value: object) -> str:
    """Name the shape of a value for error messages."""
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (ObjectKind, UnknownKind)):
        return "kind"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def reduce_string(node: Node) -> str:
    text = node.text
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


def reduce_number(node: Node) -> Union[int, str]:
    # Decimal tokens are version strings ("5.0", "10.15"), not quantities.
    if "." in node.text:
        return node.text
    try:
        return int(node.text)
    except ValueError as e:
        raise InvalidNumberLiteral(node.text) from e


def reduce_bool(node: Node) -> bool:
    if node.text == "YES":
        return True
    if node.text == "NO":
        return False
    raise InvalidBoolLiteral(node.text)


def reduce_kind(node: Node) -> Kind:
    return ObjectKind.from_tag(node.text)


def reduce_word(node: Node) -> str:
    return node.text


def reduce_array(node: Node) -> List[Value]:
    return [reduce_value(child) for child in node.children]


def reduce_object(node: Node) -> PBXObjectMap:
    result: PBXObjectMap = {}
    for child in node.children:
        key, value = reduce_field(child)
        result[key] = value
    return result


def reduce_key(node: Node) -> str:
    return reduce_string(node)


def reduce_field(node: Node) -> Tuple[str, Value]:
    key, value = node.children
    return reduce_key(key), reduce_value(value)


def reduce_value(node: Node) -> Value:
    if node.rule == grammar.VALUE:
        node = node.single()
    return REDUCERS[node.rule](node)


def reduce_file(node: Node) -> PBXObjectMap:
    return reduce_object(node.single())


REDUCERS: Dict[str, Callable[[Node], Value]] = {
    grammar.STRING: reduce_string,
    grammar.REFERENCE: reduce_word,
    grammar.IDENT: reduce_word,
    grammar.NUMBER: reduce_number,
    grammar.BOOL: reduce_bool,
    grammar.KIND: reduce_kind,
    grammar.ARRAY: reduce_array,
    grammar.OBJECT: reduce_object,
}


def parse_value(text: str) -> Value:
    """Parse a single pbxproj value such as ``( a, b )`` or ``{ k = v; }``."""
    return reduce_value(grammar.parse(text, grammar.VALUE))


def parse_field(text: str) -> Tuple[str, Value]:
    """Parse a single ``key = value;`` field."""
    return reduce_field(grammar.parse(text, grammar.FIELD))


def parse_file(text: str) -> PBXObjectMap:
    """Parse a complete pbxproj text into its top-level dictionary."""
    return reduce_file(grammar.parse(text, grammar.FILE))
