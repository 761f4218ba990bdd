"""
  BigLisp Reader: Lexer and Parser

- Regex-driven lexer yielding positioned tokens
- Recursive-descent parser emitting the immutable nodes of biglisp.types.expression:

    - integers / floats / "strings" / true / false -> Literal
    - any other bare word                           -> Symbol
    - [a b c]                                       -> VectorLiteral
    - (op a b c)                                    -> Form (op must be a symbol)
    - (let [n e ...] body)                          -> Form whose first arg is Bindings

  Parsing never evaluates. It fails only on structural errors, reported with the
  offending token's position.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, NamedTuple, Optional

from biglisp.errors import (
    BigLispParseError,
    InvalidOperator,
    MalformedBindings,
    NestingTooDeep,
    UnbalancedDelimiter,
    UnexpectedToken,
)
from biglisp.config import get_max_depth
from biglisp.runtime_context import stack_headroom
from biglisp.types.expression import Bindings, Form, Literal, Node, Symbol, VectorLiteral

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<open_string>")'  # a quote that never closes
    r'|(?P<symbol>[^\s()\[\]";]+)'  # fallback: symbols, numbers, booleans
    ,
    re.DOTALL,
)
WHITESPACE_RE = re.compile(r"\s+")

INT_RE = re.compile(r"-?\d+\Z")
FLOAT_RE = re.compile(r"-?(?:\d+\.\d*|\.\d+)\Z")

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

CLOSERS = {"lparen": ("rparen", ")"), "lbracket": ("rbracket", "]")}


class Token(NamedTuple):
    kind: str
    value: str
    pos: int


def location(source: str, pos: int) -> tuple[int, int]:
    """1-based (line, column) of an offset into `source`."""
    line = source.count("\n", 0, pos) + 1
    column = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return line, column


def _error(cls: type[BigLispParseError], message: str, source: str, pos: int, token: str | None = None):
    line, column = location(source, pos)
    return cls(message, pos, line, column, token)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, value, pos); whitespace and comments are dropped."""
    pos = 0
    n = len(source)
    while pos < n:
        ws = WHITESPACE_RE.match(source, pos)
        if ws:
            pos = ws.end()
            continue
        m = TOKEN_RE.match(source, pos)
        kind = m.lastgroup
        if kind == "comment":
            pos = m.end()
            continue
        if kind == "open_string":
            raise _error(UnbalancedDelimiter, "Unterminated string literal", source, pos, '"')
        yield Token(kind, m.group(kind), pos)
        pos = m.end()


def unescape(body: str) -> str:
    """Resolve the escapes in ESCAPES; any other backslash pair is kept verbatim."""
    return ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(0)), body)


def read_atom(text: str, pos: int) -> Literal | Symbol:
    if text == "true":
        return Literal(True, pos)
    if text == "false":
        return Literal(False, pos)
    if INT_RE.match(text):
        return Literal(int(text), pos)
    if FLOAT_RE.match(text):
        return Literal(float(text), pos)
    return Symbol(text, pos)


class TokenStream:
    def __init__(self, source: str, max_depth: int | None = None):
        self.source = source
        self.tokens = lex(source)
        self.buffer: list[Token] = []
        self.max_depth: int = get_max_depth() if max_depth is None else max_depth
        self.depth = 0
        self.last: Token | None = None

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            self.last = self.buffer.pop(0)
        else:
            self.last = next(self.tokens, None)
        return self.last

    def error(self, cls: type[BigLispParseError], message: str, token: Token | None):
        if token is None:
            return _error(cls, message, self.source, len(self.source))
        return _error(cls, message, self.source, token.pos, token.value)

    def parse_expr(self) -> Node:
        tok = self.advance()
        if tok is None:
            raise self.error(UnbalancedDelimiter, "Unexpected end of input", None)

        if tok.kind == "symbol":
            return read_atom(tok.value, tok.pos)

        if tok.kind == "string":
            return Literal(unescape(tok.value[1:-1]), tok.pos)

        if tok.kind == "lparen":
            return self.parse_form(tok)

        if tok.kind == "lbracket":
            return VectorLiteral(tuple(self.parse_sequence(tok)), tok.pos)

        # A closer with no opener.
        raise self.error(UnbalancedDelimiter, f"Unmatched '{tok.value}'", tok)

    def parse_sequence(self, opener: Token) -> list[Node]:
        """Parse expressions up to the closer matching `opener`, consuming it."""
        self.depth += 1
        if self.depth > self.max_depth:
            raise self.error(NestingTooDeep, f"Nesting deeper than {self.max_depth} levels", opener)
        closer_kind, closer_text = CLOSERS[opener.kind]
        items: list[Node] = []
        while True:
            nxt = self.peek()
            if nxt is None:
                raise self.error(UnbalancedDelimiter, f"Unmatched '{opener.value}'", opener)
            if nxt.kind == closer_kind:
                self.advance()
                self.depth -= 1
                return items
            if nxt.kind in ("rparen", "rbracket"):
                raise self.error(
                    UnbalancedDelimiter,
                    f"Expected '{closer_text}' to close '{opener.value}', got '{nxt.value}'",
                    nxt,
                )
            items.append(self.parse_expr())

    def parse_form(self, opener: Token) -> Form:
        head_tok = self.peek()
        if head_tok is not None and head_tok.kind == "rparen":
            raise self.error(UnexpectedToken, "Empty form: expected an operator", head_tok)
        items = self.parse_sequence(opener)
        head, args = items[0], items[1:]
        if not isinstance(head, Symbol):
            raise self.error(InvalidOperator, f"Operator must be a symbol, got {head}", head_tok)
        if head.name == "let":
            args = [self.read_bindings(args[0] if args else None, opener)] + args[1:]
        return Form(head, tuple(args), opener.pos)

    def read_bindings(self, node: Node | None, opener: Token) -> Bindings:
        """Pair up the `[name expr ...]` vector of a let."""
        if not isinstance(node, VectorLiteral):
            pos = opener.pos if node is None else node.pos
            raise _error(MalformedBindings, "let requires a binding vector", self.source, pos)
        if len(node.items) % 2 != 0:
            raise _error(
                MalformedBindings,
                "let binding vector needs an even number of forms",
                self.source,
                node.pos,
            )
        pairs = []
        for name, expr in zip(node.items[::2], node.items[1::2]):
            if not isinstance(name, Symbol):
                raise _error(
                    MalformedBindings, f"let binding name must be a symbol, got {name}", self.source, name.pos
                )
            pairs.append((name, expr))
        return Bindings(tuple(pairs), node.pos)

    def parse_all(self) -> Iterator[Node]:
        while self.peek() is not None:
            yield self.parse_expr()


def _read(stream: TokenStream, reader):
    """Run `reader` with stack for the nesting cap; stack exhaustion becomes NestingTooDeep."""
    with stack_headroom(stream.max_depth):
        try:
            return reader()
        except RecursionError:
            raise stream.error(NestingTooDeep, "Nesting too deep for the interpreter stack", stream.last) from None


def parse(source: str, max_depth: int | None = None) -> Node:
    """Read exactly one expression from `source`."""
    stream = TokenStream(source, max_depth)
    first = stream.peek()
    if first is None:
        raise stream.error(UnexpectedToken, "Expected an expression, got end of input", None)
    expr = _read(stream, stream.parse_expr)
    extra = stream.peek()
    if extra is not None:
        if extra.kind in ("rparen", "rbracket"):
            raise stream.error(UnbalancedDelimiter, f"Unmatched '{extra.value}'", extra)
        raise stream.error(UnexpectedToken, f"Unexpected token after expression: {extra.value}", extra)
    return expr


def parse_all(source: str, max_depth: int | None = None) -> list[Node]:
    """Read every top-level expression in `source`, in order."""
    stream = TokenStream(source, max_depth)
    exprs = _read(stream, lambda: list(stream.parse_all()))
    logger.debug("Parsed %d expression(s)", len(exprs))
    return exprs
