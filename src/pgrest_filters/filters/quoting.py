"""Filters – value escaping for the PostgREST filter syntax.

Two layers apply to every value on the wire:

* PostgREST double quotes (``"a,b"``, with ``\\"`` and ``\\\\`` escapes) keep
  reserved characters from being read as list or group structure;
* percent-encoding keeps the whole thing safe inside a query string.
"""
from __future__ import annotations

from urllib.parse import quote, unquote

QUOTE = '"'
ESCAPE = "\\"

# Characters that would break an ``in.(...)`` list or an ``and=(...)`` group.
RESERVED = frozenset(',()"\\')


def encode(text: str) -> str:
    return quote(text, safe="")


def decode(text: str) -> str:
    return unquote(text)


def is_quoted(token: str) -> bool:
    return len(token) >= 2 and token[0] == QUOTE and token[-1] == QUOTE


def needs_quotes(value: str, *, nested: bool) -> bool:
    """Whether ``value`` must be double-quoted to survive parsing.

    Top-level values only need it when they would otherwise be read back as
    a quoted literal; values inside lists and groups also need it for
    reserved characters, surrounding whitespace and the empty string.
    """
    if not nested:
        return is_quoted(value)
    return value == "" or value != value.strip() or any(c in RESERVED for c in value)


def quote_value(value: str, *, nested: bool = False) -> str:
    if not needs_quotes(value, nested=nested):
        return value
    escaped = value.replace(ESCAPE, ESCAPE * 2).replace(QUOTE, ESCAPE + QUOTE)
    return f"{QUOTE}{escaped}{QUOTE}"


def unquote_value(token: str) -> str:
    """Strip surrounding double quotes and resolve backslash escapes."""
    if not is_quoted(token):
        return token
    out: list[str] = []
    chars = iter(token[1:-1])
    for char in chars:
        if char == ESCAPE:
            char = next(chars, ESCAPE)
        out.append(char)
    return "".join(out)


def encode_value(value: str, *, nested: bool = False) -> str:
    return encode(quote_value(value, nested=nested))


def split_top_level(text: str, sep: str = ",") -> list[str]:
    """Split on ``sep`` outside double quotes and parentheses.

    ``'a,"b,c",(d,e)'`` gives ``['a', '"b,c"', '(d,e)']``; an empty input
    gives ``[]``.
    """
    if text == "":
        return []
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    in_quotes = False
    escaped = False
    for char in text:
        if escaped:
            escaped = False
        elif in_quotes and char == ESCAPE:
            escaped = True
        elif char == QUOTE:
            in_quotes = not in_quotes
        elif not in_quotes and char == "(":
            depth += 1
        elif not in_quotes and char == ")":
            depth = max(depth - 1, 0)
        elif not in_quotes and depth == 0 and char == sep:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


def unwrap_parens(text: str) -> str | None:
    """Return the inside of ``(...)``, or ``None`` when not parenthesised."""
    if len(text) >= 2 and text[0] == "(" and text[-1] == ")":
        return text[1:-1]
    return None


__all__ = [
    "RESERVED",
    "decode",
    "encode",
    "encode_value",
    "is_quoted",
    "needs_quotes",
    "quote_value",
    "split_top_level",
    "unquote_value",
    "unwrap_parens",
]
