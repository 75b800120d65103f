"""Tab indentation helpers for multi-line strings and byte strings."""

from typing import List, TypeVar

_S = TypeVar("_S", str, bytes)


def _split_after(text: _S, sep: _S) -> List[_S]:
    """Split after each separator, keeping it; the last piece may be empty."""
    parts = text.split(sep)
    return [part + sep for part in parts[:-1]] + [parts[-1]]


def _indent(text: _S, tab: _S, newline: _S) -> _S:
    if not text:
        return tab
    return text[:0].join(
        tab + line if line else line for line in _split_after(text, newline)
    )


def _dedent(text: _S, tab: _S, newline: _S) -> _S:
    lines = _split_after(text, newline)
    if lines[0] == newline:
        lines = lines[1:]
    if not lines:
        return text[:0]
    first = lines[0]
    depth = len(first) - len(first.lstrip(tab))
    out = []
    for line in lines:
        leading = min(depth, len(line) - len(line.lstrip(tab)))
        out.append(line[leading:])
    return text[:0].join(out)


def indent(s: str) -> str:
    """Prepend one tab character to each line of a string."""
    return _indent(s, "\t", "\n")


def indent_bytes(bs: bytes) -> bytes:
    """Like :func:`indent`, but for byte strings."""
    return _indent(bytes(bs), b"\t", b"\n")


def dedent(s: str) -> str:
    """Strip leading tabs from every line of a string.

    The number of tabs to strip is taken from the run of tabs that starts the
    first line.  One leading line holding nothing but a line break is dropped.
    Lines with fewer leading tabs only lose the tabs they have.
    """
    return _dedent(s, "\t", "\n")


def dedent_bytes(bs: bytes) -> bytes:
    """Like :func:`dedent`, but for byte strings."""
    return _dedent(bytes(bs), b"\t", b"\n")