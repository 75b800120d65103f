"""Unified and context diffs of line sequences."""

import io
from dataclasses import dataclass, field
from typing import List, TextIO

from .matcher import SequenceMatcher


@dataclass
class UnifiedDiff:
    """Parameters of a diff between two sequences of lines.

    An empty ``eol`` means a line feed.  A negative ``context`` means three
    lines of context.
    """

    a: List[str] = field(default_factory=list)
    b: List[str] = field(default_factory=list)
    from_file: str = ""
    from_date: str = ""
    to_file: str = ""
    to_date: str = ""
    eol: str = "\n"
    context: int = 0


@dataclass
class ContextDiff(UnifiedDiff):
    """Parameters of a context diff; the same fields as :class:`UnifiedDiff`."""


def format_range_unified(start: int, stop: int) -> str:
    """Format a line range the way unified diff hunk headers do."""
    beginning = start + 1
    length = stop - start
    if length == 1:
        return str(beginning)
    if length == 0:
        beginning -= 1
    return f"{beginning},{length}"


def format_range_context(start: int, stop: int) -> str:
    """Format a line range the way context diff hunk headers do."""
    beginning = start + 1
    length = stop - start
    if length == 0:
        beginning -= 1
    if length <= 1:
        return str(beginning)
    return f"{beginning},{beginning + length - 1}"


def _dates(diff: UnifiedDiff):
    from_date = f"\t{diff.from_date}" if diff.from_date else ""
    to_date = f"\t{diff.to_date}" if diff.to_date else ""
    return from_date, to_date


def write_unified_diff(writer: TextIO, diff: UnifiedDiff) -> None:
    """Write the delta between ``diff.a`` and ``diff.b`` as a unified diff."""
    eol = diff.eol or "\n"
    matcher = SequenceMatcher(diff.a, diff.b)
    started = False
    for group in matcher.get_grouped_opcodes(diff.context):
        if not started:
            started = True
            from_date, to_date = _dates(diff)
            if diff.from_file or diff.to_file:
                writer.write(f"--- {diff.from_file}{from_date}{eol}")
                writer.write(f"+++ {diff.to_file}{to_date}{eol}")
        first, last = group[0], group[-1]
        range1 = format_range_unified(first.i1, last.i2)
        range2 = format_range_unified(first.j1, last.j2)
        writer.write(f"@@ -{range1} +{range2} @@{eol}")
        for tag, i1, i2, j1, j2 in group:
            if tag == "e":
                for line in diff.a[i1:i2]:
                    writer.write("  " + line)
                continue
            if tag in ("r", "d"):
                for line in diff.a[i1:i2]:
                    writer.write("- " + line)
            if tag in ("r", "i"):
                for line in diff.b[j1:j2]:
                    writer.write("+ " + line)


def unified_diff_string(diff: UnifiedDiff) -> str:
    """Return the unified diff as a string."""
    buffer = io.StringIO()
    write_unified_diff(buffer, diff)
    return buffer.getvalue()


_CONTEXT_PREFIX = {"i": "+ ", "d": "- ", "r": "! ", "e": "  "}


def write_context_diff(writer: TextIO, diff: UnifiedDiff) -> None:
    """Write the delta between ``diff.a`` and ``diff.b`` as a context diff."""
    eol = diff.eol or "\n"
    matcher = SequenceMatcher(diff.a, diff.b)
    started = False
    for group in matcher.get_grouped_opcodes(diff.context):
        if not started:
            started = True
            from_date, to_date = _dates(diff)
            if diff.from_file or diff.to_file:
                writer.write(f"*** {diff.from_file}{from_date}{eol}")
                writer.write(f"--- {diff.to_file}{to_date}{eol}")

        first, last = group[0], group[-1]
        writer.write("***************" + eol)

        writer.write(f"*** {format_range_context(first.i1, last.i2)} ****{eol}")
        if any(code.tag in ("r", "d") for code in group):
            for code in group:
                if code.tag == "i":
                    continue
                for line in diff.a[code.i1:code.i2]:
                    writer.write(_CONTEXT_PREFIX[code.tag] + line)

        writer.write(f"--- {format_range_context(first.j1, last.j2)} ----{eol}")
        if any(code.tag in ("r", "i") for code in group):
            for code in group:
                if code.tag == "d":
                    continue
                for line in diff.b[code.j1:code.j2]:
                    writer.write(_CONTEXT_PREFIX[code.tag] + line)


def context_diff_string(diff: UnifiedDiff) -> str:
    """Return the context diff as a string."""
    buffer = io.StringIO()
    write_context_diff(buffer, diff)
    return buffer.getvalue()


def split_lines(s: str) -> List[str]:
    """Split a string after each line feed, ending every piece with one."""
    parts = s.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    lines.append(parts[-1] + "\n")
    return lines