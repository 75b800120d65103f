"""Reading and writing files made of titled, tab-indented text sections."""

import io
from dataclasses import dataclass, field
from typing import BinaryIO, List, Optional, Tuple, Union

from .indent import dedent_bytes, indent_bytes

_LF = b"\n"
_SECTION_BREAK = b"---"


class HunksFormatError(ValueError):
    """Raised when data cannot be parsed as hunks."""

    def __init__(self, line: int, message: str, hunks: Optional["Hunks"] = None):
        super().__init__(f"error on line {line}: {message}")
        self.line = line
        self.hunks = hunks


@dataclass
class Section:
    """One titled section with an optional comment and a body."""

    title: str
    comment: str = ""
    body: Optional[bytes] = None


@dataclass
class Hunks:
    """A file's title and its ordered sections."""

    title: str = ""
    sections: List[Section] = field(default_factory=list)

    def section_list(self) -> List[str]:
        """Return the titles of all sections, in order."""
        return [section.title for section in self.sections]

    def _find(self, title: str) -> Optional[Section]:
        return next((s for s in self.sections if s.title == title), None)

    def get_section(self, title: str) -> Optional[bytes]:
        """Return the body of a section, ``b""`` if empty, ``None`` if absent."""
        section = self._find(title)
        if section is None:
            return None
        return section.body if section.body is not None else b""

    def get_section_comment(self, title: str) -> str:
        """Return a section's comment, or ``""`` if none or absent."""
        section = self._find(title)
        return section.comment if section is not None else ""

    def put_section(self, title: str, body: bytes) -> None:
        """Set a section's body, appending a new section if the title is new."""
        section = self._find(title)
        if section is not None:
            section.body = body
        else:
            self.sections.append(Section(title=title, body=body))


def marshal_hunks(writer: BinaryIO, hunks: Hunks) -> None:
    """Write hunks to a binary stream in the canonical layout."""
    writer.write(b"# " + hunks.title.encode() + _LF + _LF + _SECTION_BREAK + _LF)
    for section in hunks.sections:
        writer.write(b"# " + section.title.encode() + _LF)
        if section.comment:
            for line in section.comment.split("\n"):
                writer.write(b"## " + line.encode() + _LF)
        writer.write(_LF)
        writer.write(indent_bytes(section.body or b""))
        writer.write(_LF)
        writer.write(_SECTION_BREAK + _LF)


def _title_of(line: bytes) -> Optional[bytes]:
    if len(line) >= 3 and line.startswith(b"# "):
        return line[2:]
    return None


def _comment_of(line: bytes) -> Tuple[bytes, bool]:
    if line == b"##" or line.startswith(b"## "):
        return line[3:], True
    return b"", False


def _is_section_break(line: bytes) -> bool:
    return line == _SECTION_BREAK


def _parse(data: bytes) -> Hunks:
    lines = data.split(_LF)
    end = len(lines)
    hunks = Hunks()

    title = _title_of(lines[0])
    if title is None:
        raise HunksFormatError(
            1, "first line of file must be a title (e.g. `# title`)", hunks
        )
    hunks.title = title.decode()

    i = 1
    while i < end and not _is_section_break(lines[i]):
        i += 1
    i += 1

    while i < end:
        while not lines[i]:
            i += 1
            if i >= end:
                return hunks

        title = _title_of(lines[i])
        if title is None:
            raise HunksFormatError(
                i + 1,
                "first line of each section must be a title (e.g. `# title`)",
                hunks,
            )
        section = Section(title=title.decode())
        hunks.sections.append(section)
        i += 1
        if i >= end:
            return hunks

        comments = []
        while i < end:
            content, ok = _comment_of(lines[i])
            if not ok:
                break
            comments.append(content.strip() + _LF)
            i += 1
        section.comment = b"".join(comments).decode()
        if i >= end:
            return hunks

        while not lines[i]:
            i += 1
            if i >= end:
                return hunks

        body_start = body_end = i
        while not _is_section_break(lines[i]):
            if lines[i]:
                body_end += 1
            i += 1
            if i >= end:
                break
        body = _LF.join(lines[body_start:body_end]) + _LF
        section.body = dedent_bytes(body)
        i += 1
    return hunks


def unmarshal_hunks(reader: BinaryIO) -> Hunks:
    """Read and parse hunks from a binary stream.

    Parsing is lenient about whitespace; raises :class:`HunksFormatError`
    when a required title is missing.
    """
    return _parse(reader.read())


def dumps(hunks: Hunks) -> bytes:
    """Serialise hunks to bytes."""
    buffer = io.BytesIO()
    marshal_hunks(buffer, hunks)
    return buffer.getvalue()


def loads(data: Union[bytes, str]) -> Hunks:
    """Parse hunks from bytes or text."""
    if isinstance(data, str):
        data = data.encode()
    return _parse(data)


def save_file(path, hunks: Hunks) -> None:
    """Write hunks to a file, replacing its contents."""
    with open(path, "wb") as f:
        marshal_hunks(f, hunks)


def load_file(path) -> Hunks:
    """Read hunks from a file."""
    with open(path, "rb") as f:
        return unmarshal_hunks(f)