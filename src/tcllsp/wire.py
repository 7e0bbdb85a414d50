"""
Synchronization wire format.

Requests name files as a ``|``-joined list.  Responses describe one file::

    items       <file> 0x02 <id> 0x01 <id> 0x01 ...
    dictionary  <file> 0x02 <entry> 0x01 <entry> 0x01 ...
    entry       <name> 0xFE <kind> 0xFE <field no> 0xFE ...

A raw dictionary record that uses 0x02 as its own attribute mark is
rewritten to 0xFE before embedding so it cannot collide with the file
separator.  SB+ screen/report definitions and dot-prefixed internal items
never leave the provider side.
"""
from __future__ import annotations

import logging
from typing import Iterable

from tcllsp.dictionary import FieldDefinition, decode_field

logger = logging.getLogger(__name__)

NAME_SEPARATOR = '|'
ENTRY_MARK = '\x01'
FILE_MARK = '\x02'
ATTRIBUTE_MARK = '\xfe'

_EXCLUDED_RECORD_PREFIXES = ('SCREEN', 'REPORT')


class WireFormatError(ValueError):
    """A payload could not be split into file name and body."""


# ---------------------------------------------------------------------------
# File name lists
# ---------------------------------------------------------------------------

def join_file_names(names: Iterable[str]) -> str:
    return NAME_SEPARATOR.join(names)


def encode_file_request(names: Iterable[str]) -> str:
    """Batch request body: every name prefixed with ``|`` (``|A|B|C``).

    Batch editors drop the first character before splitting.
    """
    return ''.join(NAME_SEPARATOR + n for n in names)


def split_file_names(payload: str) -> list[str]:
    """Split a ``|``-joined list, dropping empty names (a leading ``|`` is
    tolerated) and duplicates while keeping order."""
    seen: dict[str, None] = {}
    for name in payload.split(NAME_SEPARATOR):
        if name:
            seen.setdefault(name, None)
    return list(seen)


# ---------------------------------------------------------------------------
# Item lists
# ---------------------------------------------------------------------------

def encode_items(file_name: str, items: Iterable[str]) -> str:
    return file_name + FILE_MARK + ENTRY_MARK.join(items)


def decode_items(payload: str) -> tuple[str, list[str]]:
    file_name, body = _split_file(payload)
    return file_name, [i for i in body.split(ENTRY_MARK) if i]


# ---------------------------------------------------------------------------
# Dictionaries
# ---------------------------------------------------------------------------

def is_internal_name(name: str) -> bool:
    return name.startswith('.')


def is_excluded_record(record: str) -> bool:
    return record.startswith(_EXCLUDED_RECORD_PREFIXES)


def encode_dictionary_entries(file_name: str, entries: Iterable[tuple[str, str]]) -> str:
    """Encode raw ``(item id, record)`` pairs as read from a dictionary file.

    *record* starts at the kind attribute; its attribute marks may be either
    0xFE or 0x02.
    """
    parts = []
    for name, record in entries:
        if is_internal_name(name) or is_excluded_record(record):
            continue
        record = record.replace(FILE_MARK, ATTRIBUTE_MARK)
        parts.append(name + ATTRIBUTE_MARK + record)
    return file_name + FILE_MARK + ENTRY_MARK.join(parts)


def decode_dictionary(payload: str) -> tuple[str, list[FieldDefinition]]:
    """Decode a dictionary payload.

    Entries with an unsupported kind byte are dropped.  A failure while
    decoding one entry is logged and does not affect its siblings.
    """
    file_name, body = _split_file(payload)
    fields: list[FieldDefinition] = []
    if not body:
        return file_name, fields
    for entry in body.split(ENTRY_MARK):
        if not entry:
            continue
        try:
            definition = decode_field(entry.split(ATTRIBUTE_MARK))
        except Exception:
            logger.warning('decode_dictionary: bad entry %r in %s', entry[:40], file_name,
                           exc_info=True)
            continue
        if definition is None:
            logger.debug('decode_dictionary: dropped %r in %s', entry[:40], file_name)
            continue
        fields.append(definition)
    return file_name, fields


def _split_file(payload: str) -> tuple[str, str]:
    file_name, sep, body = payload.partition(FILE_MARK)
    if not sep or not file_name:
        raise WireFormatError(f'missing file separator in payload {payload[:40]!r}')
    return file_name, body
