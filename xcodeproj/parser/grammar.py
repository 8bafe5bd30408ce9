"""
pbxproj grammar.

Turns pbxproj text into a parse tree of Node objects. The grammar is:

    file   := object
    object := '{' field* '}'
    field  := key '=' value ';'
    value  := array | object | string | bool | kind | number | reference | ident
    array  := '(' (value ','?)* ')'

Comments (``// ...`` and ``/* ... */``) and whitespace are skipped. Bare words
are ambiguous, so each one is classified in priority order: reference,
known kind tag, boolean, number and finally plain identifier.
"""

import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from xcodeproj.errors import ParseError
from xcodeproj.parser.kind import KNOWN_TAGS


# Token tags
LBRACE = "{"
RBRACE = "}"
LPAREN = "("
RPAREN = ")"
EQUALS = "="
SEMICOLON = ";"
COMMA = ","
QUOTED = "quoted string"
WORD = "word"
EOF = "end of input"
OPEN_COMMENT = "unterminated comment"

# Parse tree rules
FILE = "file"
OBJECT = "object"
FIELD = "field"
KEY = "key"
VALUE = "value"
ARRAY = "array"
STRING = "string"
REFERENCE = "reference"
KIND = "kind"
BOOL = "bool"
NUMBER = "number"
IDENT = "ident"

RULES = (FILE, OBJECT, FIELD, VALUE, ARRAY)

REFERENCE_RE = re.compile(r"^[0-9A-F]{24}$")
NUMBER_RE = re.compile(r"^[+-]?\d+(?:\.\d+)*$")
BOOL_LITERALS = frozenset({"YES", "NO"})
WORD_RE = re.compile(r"[A-Za-z0-9_$/:.\-+]+")

# Order matters: comments before anything else, quoted strings before words.
TOKEN_EXPRS: List[Tuple["re.Pattern[str]", Optional[str]]] = [
    (re.compile(r"//[^\n]*"), None),
    (re.compile(r"/\*.*?\*/", re.DOTALL), None),
    (re.compile(r"/\*"), OPEN_COMMENT),
    (re.compile(r"\s+"), None),
    (re.compile(r"\{"), LBRACE),
    (re.compile(r"\}"), RBRACE),
    (re.compile(r"\("), LPAREN),
    (re.compile(r"\)"), RPAREN),
    (re.compile(r"="), EQUALS),
    (re.compile(r";"), SEMICOLON),
    (re.compile(r","), COMMA),
    (re.compile(r'"(?:[^"\\]|\\.)*"', re.DOTALL), QUOTED),
    (WORD_RE, WORD),
]


@dataclass
class Token:
    tag: str
    text: str
    position: int


@dataclass
class Node:
    rule: str
    text: str
    position: int
    children: List["Node"] = field(default_factory=list)

    def single(self) -> "Node":
        if len(self.children) != 1:
            raise ValueError(f"{self.rule} node has {len(self.children)} children, expected 1")
        return self.children[0]


def line_and_column(text: str, position: int) -> Tuple[int, int]:
    line = text.count("\n", 0, position) + 1
    column = position - (text.rfind("\n", 0, position) + 1) + 1
    return line, column


def classify_word(word: str) -> str:
    """Return the literal rule a bare word belongs to."""
    if REFERENCE_RE.match(word):
        return REFERENCE
    if word in KNOWN_TAGS:
        return KIND
    if word in BOOL_LITERALS:
        return BOOL
    if NUMBER_RE.match(word):
        return NUMBER
    return IDENT


def tokenize(text: str) -> Iterator[Token]:
    pos = 0
    length = len(text)
    while pos < length:
        for regex, tag in TOKEN_EXPRS:
            match = regex.match(text, pos)
            if match:
                if tag == OPEN_COMMENT:
                    line, column = line_and_column(text, pos)
                    raise ParseError(
                        pos, "end of comment", text[pos : pos + 20], line, column
                    )
                if tag is not None:
                    yield Token(tag, match.group(0), pos)
                pos = match.end()
                break
        else:
            line, column = line_and_column(text, pos)
            if text.startswith('"', pos):
                raise ParseError(pos, "closing quote", text[pos : pos + 20], line, column)
            raise ParseError(pos, "token", text[pos], line, column)
    yield Token(EOF, "", length)


class PBXGrammar:
    """Recursive-descent parser over the token stream of one pbxproj text."""

    def __init__(self, text: str):
        self.text = text
        self.tokens = list(tokenize(text))
        self.index = 0

    def parse(self, rule: str = FILE) -> Node:
        if rule not in RULES:
            raise ValueError(f"unknown start rule {rule!r}")
        node = getattr(self, f"_{rule}")()
        self._expect(EOF)
        return node

    @property
    def _current(self) -> Token:
        return self.tokens[self.index]

    def _advance(self) -> Token:
        token = self.tokens[self.index]
        if token.tag != EOF:
            self.index += 1
        return token

    def _error(self, expected: str) -> ParseError:
        token = self._current
        line, column = line_and_column(self.text, token.position)
        found = token.text if token.tag != EOF else EOF
        return ParseError(token.position, expected, found, line, column)

    def _expect(self, tag: str) -> Token:
        if self._current.tag != tag:
            raise self._error(repr(tag) if tag != EOF else tag)
        return self._advance()

    def _file(self) -> Node:
        start = self._current.position
        return Node(FILE, "", start, [self._object()])

    def _object(self) -> Node:
        start = self._expect(LBRACE).position
        fields = []
        while self._current.tag != RBRACE:
            if self._current.tag == EOF:
                raise self._error("'}'")
            fields.append(self._field())
        self._advance()
        return Node(OBJECT, self.text[start : self._previous_end()], start, fields)

    def _field(self) -> Node:
        token = self._current
        if token.tag not in (WORD, QUOTED):
            raise self._error("key")
        self._advance()
        key = Node(KEY, token.text, token.position)
        self._expect(EQUALS)
        value = self._value()
        self._expect(SEMICOLON)
        return Node(FIELD, "", token.position, [key, value])

    def _array(self) -> Node:
        start = self._expect(LPAREN).position
        values = []
        while self._current.tag != RPAREN:
            if self._current.tag == EOF:
                raise self._error("')'")
            values.append(self._value())
            if self._current.tag == COMMA:
                self._advance()
        self._advance()
        return Node(ARRAY, self.text[start : self._previous_end()], start, values)

    def _value(self) -> Node:
        token = self._current
        if token.tag == LBRACE:
            inner = self._object()
        elif token.tag == LPAREN:
            inner = self._array()
        elif token.tag == QUOTED:
            self._advance()
            inner = Node(STRING, token.text, token.position)
        elif token.tag == WORD:
            self._advance()
            inner = Node(classify_word(token.text), token.text, token.position)
        else:
            raise self._error("value")
        return Node(VALUE, inner.text, token.position, [inner])

    def _previous_end(self) -> int:
        token = self.tokens[self.index - 1]
        return token.position + len(token.text)


def parse(text: str, rule: str = FILE) -> Node:
    """Parse text starting at the given rule and return the parse tree."""
    return PBXGrammar(text).parse(rule)
