"""
  Tokenizer and recursive-descent reader

- Tokenizing is eager: the whole line becomes a list of token strings, so
  the reader can peek one token ahead without side effects.
- Emits pymal values directly:

    - nil / true / false -> Nil / True / False
    - integers           -> int
    - strings            -> str (escapes resolved)
    - symbols, keywords  -> Symbol
    - ( ... )            -> List
    - [ ... ]            -> Vector
    - { ... }            -> HashMap (atom keys)
    - quote shorthands   -> (quote x), (deref x), (with-meta x m), etc.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Iterator, Optional

from pymal import SExpression
from pymal.errors import MalEOFError, MalSyntaxError
from pymal.reader.reader_macros import META_PREFIX, QUOTE_FORMS, WITH_META
from pymal.types.nil import Nil
from pymal.types.symbol import Symbol
from pymal.types.values import HashMap, List, Vector

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(
    r"[\s,]*("
    r"~@"  # splice-unquote
    r"|[\[\]{}()'`~^@]"  # single-character specials
    r'|"(?:\\.|[^\\"])*"?'  # strings, possibly unterminated
    r"|;.*"  # comment to end of line
    r"|[^\s\[\]{}('\"`,;)]*"  # bare token
    r")"
)

NUMBER_RE = re.compile(r"[-+]?[0-9]+")
STRING_RE = re.compile(r'"(?:\\.|[^\\"])*"')

# Private-use range searched for a placeholder that stands in for an escaped
# backslash while the other escapes are resolved
_SENTINEL_CANDIDATES = range(0xE000, 0xF900)

CONSTANTS: dict[str, SExpression] = {
    "nil": Nil,
    "true": True,
    "false": False,
}

SEQUENCES: dict[str, tuple[str, Callable[[list[SExpression]], SExpression]]] = {
    "(": (")", List),
    "[": ("]", Vector),
}
MAP_OPEN = "{"
MAP_CLOSE = "}"
CLOSERS = frozenset(")]}")
# Tokens that start a compound form and so cannot be a hash-map key
NON_ATOMS = frozenset(["(", "[", "{", META_PREFIX, *QUOTE_FORMS])


def tokenize(source: str) -> list[str]:
    """Split `source` into token strings; comments and separators are dropped."""
    tokens = []
    for token in TOKEN_RE.findall(source):
        if not token or token.startswith(";"):
            continue
        tokens.append(token)
    return tokens


def unescape(token: str) -> str:
    """Turn a string token (quotes included) into its contents."""
    if not STRING_RE.fullmatch(token):
        raise MalSyntaxError(f"unbalanced string: {token}")
    body = token[1:-1]
    # The placeholder must not occur in the text, or it would turn into a backslash
    sentinel = next(chr(c) for c in _SENTINEL_CANDIDATES if chr(c) not in body)
    return (
        body.replace("\\\\", sentinel)
        .replace('\\"', '"')
        .replace("\\n", "\n")
        .replace(sentinel, "\\")
    )


class Reader:
    def __init__(self, tokens: Iterable[str]):
        self.tokens: list[str] = list(tokens)
        self.position = 0

    def peek(self) -> Optional[str]:
        if self.position >= len(self.tokens):
            return None
        return self.tokens[self.position]

    def next(self) -> Optional[str]:
        token = self.peek()
        if token is not None:
            self.position += 1
        return token

    def read_form(self) -> Optional[SExpression]:
        """Read one form, or return None when no tokens are left."""
        token = self.peek()
        if token is None:
            return None

        if token in QUOTE_FORMS:
            self.next()
            return List((QUOTE_FORMS[token], self._read_required(token)))

        if token == META_PREFIX:
            self.next()
            meta = self._read_required(token)
            target = self._read_required(token)
            return List((WITH_META, target, meta))

        if token in SEQUENCES:
            close, make = SEQUENCES[token]
            return self.read_sequence(token, close, make)

        if token == MAP_OPEN:
            return self.read_hash_map()

        if token in CLOSERS:
            raise MalSyntaxError(f"unexpected '{token}'")

        return self.read_atom()

    def _read_required(self, after: str) -> SExpression:
        form = self.read_form()
        if form is None:
            raise MalEOFError(f"unexpected end of input after '{after}'")
        return form

    def _expect_more(self, close: str) -> str:
        token = self.peek()
        if token is None:
            raise MalEOFError(f"unexpected end of input, expected '{close}'")
        return token

    def read_sequence(
        self,
        open_: str,
        close: str,
        make: Callable[[list[SExpression]], SExpression],
    ) -> SExpression:
        """Read forms between `open_` and `close` and build them with `make`."""
        token = self.next()
        if token != open_:
            raise MalSyntaxError(f"expected '{open_}' but found '{token}'")
        forms: list[SExpression] = []
        while True:
            token = self._expect_more(close)
            if token == close:
                self.next()
                return make(forms)
            if token in CLOSERS:
                raise MalSyntaxError(f"expected '{close}' but found '{token}'")
            forms.append(self.read_form())

    def read_hash_map(self) -> HashMap:
        """Read ``{k v ...}``; keys must be atoms, values may be any form."""
        self.next()
        items: list[SExpression] = []
        while True:
            token = self._expect_more(MAP_CLOSE)
            if token == MAP_CLOSE:
                self.next()
                return HashMap(items)
            if token in CLOSERS:
                raise MalSyntaxError(f"expected '{MAP_CLOSE}' but found '{token}'")
            if token in NON_ATOMS:
                raise MalSyntaxError(
                    f"expected an atom as hash-map key but found '{token}'"
                )
            key = self.read_atom()
            if self._expect_more(MAP_CLOSE) == MAP_CLOSE:
                raise MalSyntaxError(
                    f"hash-map literal has no value for key '{self.tokens[self.position - 1]}'"
                )
            items.append(key)
            items.append(self.read_form())

    def read_atom(self) -> SExpression:
        token = self.next()
        if token is None:
            raise MalEOFError("unexpected end of input")
        if NUMBER_RE.fullmatch(token):
            return int(token)
        if token.startswith('"'):
            return unescape(token)
        if token in CONSTANTS:
            return CONSTANTS[token]
        return Symbol(token)

    def read_all(self) -> Iterator[SExpression]:
        while (form := self.read_form()) is not None:
            logger.debug("read form %r", form)
            yield form


def read_str(source: str) -> Optional[SExpression]:
    """Read the first form in `source`; None when it contains no tokens."""
    return Reader(tokenize(source)).read_form()


def read_all(source: str) -> Iterator[SExpression]:
    """Read every top-level form in `source`."""
    return Reader(tokenize(source)).read_all()
