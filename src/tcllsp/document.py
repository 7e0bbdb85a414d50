"""
Per-document text cache.

TCL is line oriented: every line is one command, split on whitespace into
words.  A :class:`TclDocument` keeps the source split into lines once per
change so the validator, completion and hover handlers share it.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field

_WORD_RE = re.compile(r'\S+')
_LINE_SPLIT_RE = re.compile(r'\r?\n')


@dataclass(frozen=True)
class Word:
    text: str
    start: int       # 0-based column

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass
class TclDocument:
    uri: str
    source: str
    version: int | None = None
    lines: list[str] = field(init=False)

    def __post_init__(self):
        self.lines = _LINE_SPLIT_RE.split(self.source)

    def line(self, index: int) -> str | None:
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return None


def split_words(line: str) -> list[Word]:
    """Split *line* into whitespace-delimited words, keeping their columns."""
    return [Word(m.group(0), m.start()) for m in _WORD_RE.finditer(line)]


def word_at(line: str, character: int) -> Word | None:
    """Return the space-delimited word under *character*, or None.

    Scans backward and forward from the cursor to the nearest spaces, so a
    cursor just after the last character still hits the word.
    """
    if not line or character < 0:
        return None
    character = min(character, len(line))
    start = line.rfind(' ', 0, character) + 1
    end = line.find(' ', character)
    if end == -1:
        end = len(line)
    text = line[start:end].strip()
    if not text:
        return None
    return Word(text, start)


def parse_document(uri: str, source: str, version: int | None = None) -> TclDocument:
    return TclDocument(uri=uri, source=source, version=version)
