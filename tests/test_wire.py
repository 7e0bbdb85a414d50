"""Tests for tcllsp.wire and tcllsp.dictionary: the synchronization codec."""
from __future__ import annotations

import pytest

from conftest import encode_dictionary, make_field
from tcllsp.dictionary import AttributeFieldDefinition, DataFieldDefinition, FieldDefinition, decode_field
from tcllsp.wire import (
    WireFormatError,
    decode_dictionary,
    decode_items,
    encode_dictionary_entries,
    encode_file_request,
    encode_items,
    join_file_names,
    split_file_names,
)

FM = '\xfe'


class TestFileNames:
    def test_join(self):
        assert join_file_names(['A', 'B', 'C']) == 'A|B|C'

    def test_split_tolerates_leading_separator(self):
        assert split_file_names('|A|B') == ['A', 'B']

    def test_split_drops_duplicates_keeping_order(self):
        assert split_file_names('B|A|B') == ['B', 'A']

    def test_split_empty(self):
        assert split_file_names('') == []

    def test_batch_request_body(self):
        body = encode_file_request(['A', 'B', 'C'])
        assert body == '|A|B|C'
        # batch editors drop the first character, then split
        assert body[1:].split('|') == ['A', 'B', 'C']
        assert split_file_names(body) == ['A', 'B', 'C']


class TestItems:
    def test_encoding_is_bit_exact(self):
        assert encode_items('PROGS', ['P1', 'P2']) == 'PROGS\x02P1\x01P2'

    def test_decode(self):
        assert decode_items('PROGS\x02P1\x01P2') == ('PROGS', ['P1', 'P2'])

    def test_decode_empty_list(self):
        assert decode_items('PROGS\x02') == ('PROGS', [])

    def test_missing_separator_raises(self):
        with pytest.raises(WireFormatError):
            decode_items('PROGS')


class TestDictionaryRoundTrip:
    def test_data_kinds(self):
        fields = [
            make_field('NAME', 'D', '1', 'Customer Name', 'MCU', '30L', 'S'),
            make_field('TOTAL', 'I', '0', 'Total', 'MD2', '10R', 'M'),
            make_field('CALC', 'V', '0', 'Calc', '', '5R', 'S'),
        ]
        file_name, decoded = decode_dictionary(encode_dictionary('CUSTOMERS', fields))
        assert file_name == 'CUSTOMERS'
        assert decoded == fields
        assert all(isinstance(f, DataFieldDefinition) for f in decoded)

    def test_attribute_kinds(self):
        fields = [
            make_field('NAME', 'A', '1', 'Customer Name', 'MCU', 'L30'),
            make_field('CODE', 'S', '2', 'Code', 'MD0', 'R5'),
        ]
        _, decoded = decode_dictionary(encode_dictionary('CUSTOMERS', fields))
        assert [(f.kind, f.field_number, f.heading, f.conversion, f.width) for f in decoded] == [
            ('A', '1', 'Customer Name', 'MCU', 'L30'),
            ('S', '2', 'Code', 'MD0', 'R5'),
        ]
        assert all(isinstance(f, AttributeFieldDefinition) for f in decoded)


class TestDictionaryDecoding:
    def test_data_layout_positions(self):
        f = decode_field(['NAME', 'D', '1', 'MCU', 'Heading', '30L', 'S'])
        assert (f.conversion, f.heading, f.width, f.value_type) == ('MCU', 'Heading', '30L', 'S')

    def test_attribute_layout_positions(self):
        attrs = ['NAME', 'A', '1', 'Heading', 'x4', 'x5', 'x6', 'x7', 'MCU', 'L', '30']
        f = decode_field(attrs)
        assert (f.heading, f.conversion, f.width, f.value_type) == ('Heading', 'MCU', 'L30', '')

    def test_kind_uses_first_character(self):
        assert decode_field(['NAME', 'DATA', '1']).kind == 'D'

    def test_base_definition_is_abstract(self):
        with pytest.raises(TypeError):
            FieldDefinition('NAME', 'D', '1', '', '', '', '')

    def test_unsupported_kind_dropped(self):
        payload = 'CUSTOMERS\x02' + FM.join(['NAME', 'D', '1']) + '\x01' + FM.join(['PH', 'PH', 'X'])
        _, fields = decode_dictionary(payload)
        assert [f.name for f in fields] == ['NAME']

    def test_short_entry_does_not_break_siblings(self):
        payload = 'CUSTOMERS\x02NAME' + FM + 'D\x01BAD\x01' + FM.join(['CODE', 'A', '2', 'Code'])
        _, fields = decode_dictionary(payload)
        assert [f.name for f in fields] == ['NAME', 'CODE']
        assert fields[0].field_number == ''

    def test_empty_dictionary(self):
        assert decode_dictionary('CUSTOMERS\x02') == ('CUSTOMERS', [])

    def test_missing_separator_raises(self):
        with pytest.raises(WireFormatError):
            decode_dictionary('CUSTOMERS')


class TestDictionaryEncoding:
    def test_entries_are_bit_exact(self):
        payload = encode_dictionary_entries('F', [('A', 'D' + FM + '1'), ('B', 'I' + FM + '0')])
        assert payload == 'F\x02A' + FM + 'D' + FM + '1\x01B' + FM + 'I' + FM + '0'

    def test_inner_file_marks_escaped(self):
        payload = encode_dictionary_entries('F', [('A', 'D\x021\x02\x02Head')])
        assert payload == 'F\x02A' + FM + 'D' + FM + '1' + FM + FM + 'Head'

    def test_screens_reports_and_internal_items_excluded(self):
        payload = encode_dictionary_entries('F', [
            ('A', 'D' + FM + '1'),
            ('SCR', 'SCREEN' + FM + 'x'),
            ('REP', 'REPORT' + FM + 'x'),
            ('.HIDDEN', 'D' + FM + '2'),
        ])
        _, fields = decode_dictionary(payload)
        assert [f.name for f in fields] == ['A']
