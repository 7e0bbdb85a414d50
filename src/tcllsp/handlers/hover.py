"""
Hover handler.

When the cursor rests on a word that is a dictionary field of the file named
on the same line (the first argument after the verb), show the field's kind,
number, conversion, heading, width and value type.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from lsprotocol import types as lsp

from tcllsp.document import TclDocument, split_words, word_at

if TYPE_CHECKING:
    from tcllsp.store import MetadataStore


def _line_file_name(line: str) -> str | None:
    words = split_words(line)
    return words[1].text if len(words) > 1 else None


def get_hover(
    doc: TclDocument,
    position: lsp.Position,
    store: MetadataStore,
) -> lsp.Hover | None:
    """Return LSP hover content for *position* in *doc*, or *None*."""
    line = doc.line(position.line)
    if line is None:
        return None
    word = word_at(line, position.character)
    if word is None:
        return None

    file_name = _line_file_name(line)
    if not store.has_dictionary(file_name):
        return None
    definition = store.dictionary_field(file_name, word.text)
    if definition is None:
        return None

    return lsp.Hover(
        contents=lsp.MarkupContent(
            kind=lsp.MarkupKind.Markdown,
            value=f'```\n{definition.summary()}\n```',
        ),
        range=lsp.Range(
            start=lsp.Position(line=position.line, character=word.start),
            end=lsp.Position(line=position.line, character=word.end),
        ),
    )
