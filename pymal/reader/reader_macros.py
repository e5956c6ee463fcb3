"""Prefix shorthands the reader expands into ordinary list forms.

    'x   -> (quote x)
    `x   -> (quasiquote x)
    ~x   -> (unquote x)
    ~@x  -> (splice-unquote x)
    @x   -> (deref x)
    ^m x -> (with-meta x m)
"""

from __future__ import annotations

from pymal.types.symbol import Symbol


QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    "~": Symbol("unquote"),
    "~@": Symbol("splice-unquote"),
    "@": Symbol("deref"),
}

META_PREFIX = "^"
WITH_META = Symbol("with-meta")
