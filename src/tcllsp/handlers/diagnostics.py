"""
Line-by-line TCL validation.

Every line is split into words and checked in three passes:

1. **File argument.**  Selection and item verbs must name a file that exists
   in the account.  A valid name becomes the scan's *current file* and, if its
   dictionary (selection verbs) or item list (item verbs) is not cached yet,
   is queued for fetching.
2. **Operator → value.**  A comparison operator must be followed by a field
   of the current file, a quoted literal, or a number.
3. **Modifier → field.**  ``WITH``, ``IF``, ``AND``, ``OR``, ``BY-EXP``,
   ``TOTAL``, ``BY-EXP-DSND`` and ``BREAK-ON`` must be followed by a field of
   the current file.  ``AND WITH x`` is checked as ``WITH x``.

Field names are checked once a line has named a valid file; before that any
word is accepted where a field name may appear.  A valid file whose
dictionary is not cached yet has no fields, so its field names are reported
until the dictionary arrives and the document is validated again.

Diagnostics reflect whatever the store knows right now; the queued fetches
are returned in :class:`ValidationResult` and dispatched as one batch per
kind by :func:`request_metadata`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lsprotocol import types as lsp

from tcllsp.document import TclDocument, Word, split_words
from tcllsp.grammar import VerbRole, is_literal, is_modifier, is_number, is_operator, match_verb
from tcllsp.wire import join_file_names

if TYPE_CHECKING:
    from tcllsp.store import MetadataStore
    from tcllsp.sync import MetadataSynchronizer

logger = logging.getLogger(__name__)

SOURCE = 'TCL'


@dataclass
class ValidationResult:
    diagnostics: list[lsp.Diagnostic] = field(default_factory=list)
    missing_dictionaries: list[str] = field(default_factory=list)
    missing_items: list[str] = field(default_factory=list)


class _Scan:
    """State of one full-document scan, including the current-file cursor."""

    def __init__(self, doc: TclDocument, store: MetadataStore, related_information: bool):
        self.doc = doc
        self.store = store
        self.related_information = related_information
        self.current_file: str | None = None
        self.result = ValidationResult()

    def error(self, line_no: int, word: Word, message: str, related: str) -> None:
        rng = lsp.Range(
            start=lsp.Position(line=line_no, character=word.start),
            end=lsp.Position(line=line_no, character=word.end),
        )
        diag = lsp.Diagnostic(
            range=rng,
            message=message,
            severity=lsp.DiagnosticSeverity.Error,
            source=SOURCE,
        )
        if self.related_information:
            diag.related_information = [
                lsp.DiagnosticRelatedInformation(
                    location=lsp.Location(uri=self.doc.uri, range=rng),
                    message=related,
                )
            ]
        self.result.diagnostics.append(diag)

    @staticmethod
    def _queue(names: list[str], name: str) -> None:
        if name not in names:
            names.append(name)

    # ------------------------------------------------------------------

    def scan_line(self, line_no: int, line: str) -> None:
        words = split_words(line)
        if not words:
            return
        self._check_file_argument(line_no, line, words)
        self._check_clauses(line_no, words)

    def _check_file_argument(self, line_no: int, line: str, words: list[Word]) -> None:
        verb = match_verb(line)
        if verb is None or verb.role is VerbRole.FILE:
            return
        idx = verb.file_index([w.text for w in words])
        if idx >= len(words):
            return
        file_word = words[idx]
        if not self.store.is_known_file_name(file_word.text):
            self.error(line_no, file_word, f'Invalid Filename {file_word.text}',
                       'The Filename does not exist in this account')
            return
        self.current_file = file_word.text
        if verb.role is VerbRole.SELECTION:
            if not self.store.has_dictionary(self.current_file):
                self._queue(self.result.missing_dictionaries, self.current_file)
        elif not self.store.has_file(self.current_file):
            self._queue(self.result.missing_items, self.current_file)

    @staticmethod
    def _known_field(fields: set[str] | None, name: str) -> bool:
        # No current file: every name passes.
        return fields is None or name in fields

    def _check_clauses(self, line_no: int, words: list[Word]) -> None:
        fields = None
        if self.current_file is not None:
            fields = set(self.store.dictionary_field_names(self.current_file))
        for j, word in enumerate(words):
            following = words[j + 1] if j + 1 < len(words) else None

            if is_operator(word.text):
                if following is None or not (
                    is_literal(following.text)
                    or is_number(following.text)
                    or self._known_field(fields, following.text)
                ):
                    self.error(line_no, word,
                               f'Expecting Value or Dictionary Item after Operator {word.text}',
                               'A value or dictionary item is required after an operator')

            if is_modifier(word.text):
                if (word.text.upper() == 'AND' and following is not None
                        and following.text.upper() == 'WITH'):
                    # the WITH that follows carries the check
                    continue
                if following is None:
                    self.error(line_no, word, f'Expecting Dictionary Name after {word.text}',
                               'Dictionary Name expected after modifier')
                elif not self._known_field(fields, following.text):
                    self.error(line_no, following, f'Invalid Dictionary Name {following.text}',
                               'The Dictionary Item does not exist in this file')


def validate_document(
    doc: TclDocument,
    store: MetadataStore,
    *,
    related_information: bool = False,
    max_problems: int | None = None,
) -> ValidationResult:
    """Scan *doc* and return diagnostics plus the metadata still missing."""
    scan = _Scan(doc, store, related_information)
    for line_no, line in enumerate(doc.lines):
        try:
            scan.scan_line(line_no, line)
        except Exception:
            logger.warning('validate_document: line %d of %s skipped', line_no, doc.uri,
                           exc_info=True)
    result = scan.result
    if max_problems is not None and len(result.diagnostics) > max_problems:
        del result.diagnostics[max_problems:]
    logger.debug('validate_document: %s → %d diagnostics, %d dictionaries / %d item lists missing',
                 doc.uri, len(result.diagnostics), len(result.missing_dictionaries),
                 len(result.missing_items))
    return result


def get_diagnostics(doc: TclDocument, store: MetadataStore, **kwargs) -> list[lsp.Diagnostic]:
    """Return LSP ``Diagnostic`` objects for every problem in *doc*."""
    return validate_document(doc, store, **kwargs).diagnostics


def request_metadata(result: ValidationResult, synchronizer: MetadataSynchronizer) -> None:
    """Issue at most one dictionary and one item-list request for a scan."""
    if result.missing_dictionaries:
        synchronizer.request_dictionaries(join_file_names(result.missing_dictionaries))
    if result.missing_items:
        synchronizer.request_items(join_file_names(result.missing_items))
