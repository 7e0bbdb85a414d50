"""
In-memory metadata cache for one language session.

Three independent collections are kept:

* the set of file names valid in the connected account (replaced wholesale
  whenever the editor refreshes the account file list),
* :class:`FileRecord` item-id lists, and
* :class:`DictionaryRecord` field definitions.

A name may be known to exist long before its items or dictionary have been
fetched.  Records are insert-if-absent: a second response for the same name
is ignored, so synchronization responses can arrive in any order, any number
of times.  Nothing here performs I/O.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

from tcllsp.dictionary import FieldDefinition


@dataclass(frozen=True)
class FileRecord:
    name: str
    items: tuple[str, ...]


@dataclass(frozen=True)
class DictionaryRecord:
    file_name: str
    fields: Mapping[str, FieldDefinition] = field(default_factory=dict)


class MetadataStore:
    """Registry of known files, item lists and dictionaries."""

    def __init__(self):
        self._file_names: frozenset[str] = frozenset()
        self._files: dict[str, FileRecord] = {}
        self._dictionaries: dict[str, DictionaryRecord] = {}

    # ------------------------------------------------------------------
    # Account file names
    # ------------------------------------------------------------------

    def replace_known_file_names(self, names: Iterable[str]) -> None:
        self._file_names = frozenset(n for n in names if n)

    def is_known_file_name(self, name: str | None) -> bool:
        return name is not None and name in self._file_names

    def known_file_names(self) -> list[str]:
        return sorted(self._file_names)

    # ------------------------------------------------------------------
    # Item lists
    # ------------------------------------------------------------------

    def has_file(self, name: str | None) -> bool:
        return name in self._files

    def add_file(self, name: str, items: Iterable[str]) -> bool:
        """Record the item ids of *name* unless already known.

        Returns True when the record was inserted.
        """
        if name in self._files:
            return False
        self._files[name] = FileRecord(name, tuple(items))
        return True

    def file_items(self, name: str | None) -> list[str]:
        record = self._files.get(name)
        return list(record.items) if record else []

    # ------------------------------------------------------------------
    # Dictionaries
    # ------------------------------------------------------------------

    def has_dictionary(self, name: str | None) -> bool:
        return name in self._dictionaries

    def add_dictionary(self, name: str, fields: Iterable[FieldDefinition]) -> bool:
        """Record the dictionary of *name* unless already known.

        Field names are unique; a later duplicate within *fields* is ignored.
        Returns True when the record was inserted.
        """
        if name in self._dictionaries:
            return False
        by_name: dict[str, FieldDefinition] = {}
        for f in fields:
            by_name.setdefault(f.name, f)
        self._dictionaries[name] = DictionaryRecord(name, by_name)
        return True

    def dictionary_field_names(self, name: str | None) -> list[str]:
        record = self._dictionaries.get(name)
        return list(record.fields) if record else []

    def dictionary_field(self, file_name: str | None, field_name: str) -> FieldDefinition | None:
        record = self._dictionaries.get(file_name)
        if record is None:
            return None
        return record.fields.get(field_name)
