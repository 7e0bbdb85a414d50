"""Shared fixtures: an in-memory metadata provider and a populated store."""
from __future__ import annotations

import pytest

from tcllsp.dictionary import AttributeFieldDefinition, DataFieldDefinition, FieldDefinition
from tcllsp.provider import MetadataProvider, MetadataProviderError
from tcllsp.store import MetadataStore
from tcllsp.wire import ATTRIBUTE_MARK, encode_dictionary_entries


def make_field(name, kind, field_number='', heading='', conversion='', width='',
               value_type='') -> FieldDefinition:
    if kind[:1] in AttributeFieldDefinition.KINDS:
        return AttributeFieldDefinition(name, kind[:1], field_number, heading, conversion, width, '')
    return DataFieldDefinition(name, kind[:1], field_number, heading, conversion, width, value_type)


def field_record(f: FieldDefinition) -> str:
    """The raw dictionary record (kind onwards) that decodes back to *f*."""
    if isinstance(f, AttributeFieldDefinition):
        # whole width in attribute 9, attribute 10 left empty
        attrs = [f.kind, f.field_number, f.heading, '', '', '', '', f.conversion, f.width, '']
    else:
        attrs = [f.kind, f.field_number, f.conversion, f.heading, f.width, f.value_type]
    return ATTRIBUTE_MARK.join(attrs)


def encode_dictionary(file_name, fields) -> str:
    return encode_dictionary_entries(file_name, [(f.name, field_record(f)) for f in fields])


class FakeProvider(MetadataProvider):
    """Answers from dicts; records every call; can be told to fail."""

    def __init__(self, files=None, dictionaries=None, fail=False):
        self.files: dict[str, list[str]] = files or {}
        # file -> {item id: raw record (attributes joined by 0xFE)}
        self.dictionaries: dict[str, dict[str, str]] = dictionaries or {}
        self.fail = fail
        self.calls: list[tuple] = []

    def _call(self, *call):
        self.calls.append(call)
        if self.fail:
            raise MetadataProviderError('no active session')

    async def list_files(self):
        self._call('list_files')
        return sorted(set(self.files) | set(self.dictionaries))

    async def open_file(self, file_name):
        self._call('open_file', file_name)

    async def item_ids(self, file_name):
        self._call('item_ids', file_name)
        return list(self.files.get(file_name, []))

    async def open_dictionary(self, file_name):
        self._call('open_dictionary', file_name)

    async def dictionary_item_ids(self, file_name):
        self._call('dictionary_item_ids', file_name)
        return list(self.dictionaries.get(file_name, {}))

    async def read_dictionary_item(self, file_name, item_id):
        self._call('read_dictionary_item', file_name, item_id)
        return self.dictionaries[file_name][item_id]


class RecordingSynchronizer:
    """Stands in for MetadataSynchronizer and records batched requests."""

    def __init__(self):
        self.dictionary_requests: list[str] = []
        self.item_requests: list[str] = []

    def request_dictionaries(self, file_names):
        self.dictionary_requests.append(file_names)

    def request_items(self, file_names):
        self.item_requests.append(file_names)


@pytest.fixture
def store() -> MetadataStore:
    s = MetadataStore()
    s.replace_known_file_names(['CUSTOMERS', 'ORDERS', 'PROGS', 'VOC'])
    s.add_dictionary('CUSTOMERS', [
        make_field('NAME', 'D', '1', 'Customer Name', '', '30L', 'S'),
        make_field('STATUS', 'D', '2', 'Status', '', '1L', 'S'),
        make_field('BALANCE', 'I', '0', 'Balance', 'MD2', '12R', 'S'),
    ])
    s.add_file('PROGS', ['P1', 'P2'])
    return s
