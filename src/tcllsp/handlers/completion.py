"""
Completion handler.

The editing context is inferred from the words before the cursor (a word
being typed counts), in order:

1. **Item ids**: an item verb (``RUN``, ``CT``, ...) whose file argument is
   a file with a cached item list.
2. **File names**: a verb that takes a file is followed by exactly one more
   word (two with ``DICT``), or the last word is ``FROM`` / ``TO``.
3. **Dictionary names**: the word after the file of ``CREATE.INDEX`` /
   ``DELETE.INDEX``; nothing is offered past that word.
4. **File types**: ``CREATE.FILE name TYPE=`` (or ``TYPE =``).
5. **Dictionary names**: the last word is a modifier (``WITH``, ...);
   the fields of the current file are offered.
6. **Command keywords**: everything else.

Keyword items carry a numeric tag in ``data``; :func:`resolve_completion`
fills in ``detail`` / ``documentation`` from :mod:`tcllsp.keywords`.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from lsprotocol import types as lsp

from tcllsp.document import TclDocument, split_words
from tcllsp.grammar import (
    FILE_PREPOSITIONS,
    FILE_TYPES,
    VerbRole,
    is_modifier,
    match_verb,
)
from tcllsp.keywords import KEYWORD_DOCS, KEYWORDS, NO_DOCS

if TYPE_CHECKING:
    from tcllsp.store import MetadataStore


def _keyword_items() -> list[lsp.CompletionItem]:
    # Built per request; resolve fills items in place.
    return [
        lsp.CompletionItem(
            label=label,
            kind=lsp.CompletionItemKind.Method if label == 'SELECT' else lsp.CompletionItemKind.Function,
            data=tag,
        )
        for label, tag in KEYWORDS
    ]


def _items(labels, kind: lsp.CompletionItemKind) -> list[lsp.CompletionItem]:
    return [lsp.CompletionItem(label=label, kind=kind, data=NO_DOCS) for label in labels]


def _file_argument(line: str) -> str | None:
    """The file named by the verb at the start of *line*, if any."""
    verb = match_verb(line)
    if verb is None or verb.role is VerbRole.FILE:
        return None
    words = [w.text for w in split_words(line)]
    idx = verb.file_index(words)
    return words[idx] if idx < len(words) else None


def current_file(doc: TclDocument, line_no: int, store: MetadataStore) -> str | None:
    """The file whose dictionary applies at *line_no*.

    Same cursor as the validator keeps: the last known file named by a
    selection or item verb on this line or an earlier one.
    """
    for idx in range(min(line_no, len(doc.lines) - 1), -1, -1):
        name = _file_argument(doc.lines[idx])
        if store.is_known_file_name(name) or store.has_dictionary(name):
            return name
    return None


def get_completions(
    doc: TclDocument,
    position: lsp.Position,
    store: MetadataStore,
) -> list[lsp.CompletionItem]:
    """Return completion items for *position* in *doc*."""
    line = doc.line(position.line)
    if line is None:
        return []
    prefix = line[:position.character]
    words = [w.text for w in split_words(prefix)]
    lowered = [w.lower() for w in words]
    count = len(words)
    last = lowered[-1] if lowered else None
    verb = match_verb(prefix)

    if verb is not None and verb.role is VerbRole.ITEM and count >= 2:
        if store.has_file(words[1]):
            return _items(store.file_items(words[1]), lsp.CompletionItemKind.Class)

    file_index = verb.file_index(words) if verb is not None else None
    if (file_index is not None and count == file_index + 1) or (
            last is not None and last.upper() in FILE_PREPOSITIONS):
        return _items(store.known_file_names(), lsp.CompletionItemKind.Module)

    if verb is not None and verb.dictionary_argument:
        if count > file_index + 2:
            return []
        if count == file_index + 2:
            return _items(store.dictionary_field_names(words[file_index]),
                          lsp.CompletionItemKind.Reference)

    if lowered and lowered[0] in ('create.file', 'create-file'):
        if (count >= 3 and lowered[2] == 'type=') or (count >= 4 and lowered[3] == '='):
            return _items(FILE_TYPES, lsp.CompletionItemKind.Function)

    if is_modifier(last):
        name = current_file(doc, position.line, store)
        return _items(store.dictionary_field_names(name), lsp.CompletionItemKind.Reference)

    return _keyword_items()


def resolve_completion(item: lsp.CompletionItem) -> lsp.CompletionItem:
    """Attach static detail/documentation for a keyword item's tag."""
    try:
        tag = int(item.data)
    except (TypeError, ValueError):
        return item
    docs = KEYWORD_DOCS.get(tag)
    if docs is None:
        return item
    item.detail, documentation = docs
    if documentation:
        item.documentation = lsp.MarkupContent(
            kind=lsp.MarkupKind.PlainText, value=documentation,
        )
    return item
