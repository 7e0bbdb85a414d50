"""Tests for tcllsp.handlers.completion: context inference and resolve."""
from __future__ import annotations

from lsprotocol import types as lsp

from tcllsp.document import parse_document
from tcllsp.grammar import FILE_TYPES
from tcllsp.handlers.completion import current_file, get_completions, resolve_completion
from tcllsp.keywords import NO_DOCS


def _complete(source: str, store, line: int | None = None, character: int | None = None):
    doc = parse_document('file:///tmp/test.tcl', source)
    if line is None:
        line = len(doc.lines) - 1
    if character is None:
        character = len(doc.lines[line])
    return get_completions(doc, lsp.Position(line=line, character=character), store)


def _labels(items) -> list[str]:
    return [i.label for i in items]


class TestItemContext:
    def test_item_verb_offers_cached_items(self, store):
        items = _complete('RUN PROGS ', store)
        assert set(_labels(items)) == {'P1', 'P2'}
        assert all(i.kind == lsp.CompletionItemKind.Class for i in items)

    def test_file_without_cached_items_falls_back_to_file_names(self, store):
        items = _complete('RUN PR', store)
        assert 'PROGS' in _labels(items)
        assert all(i.kind == lsp.CompletionItemKind.Module for i in items)


class TestFileContext:
    def test_partial_file_argument(self, store):
        assert _labels(_complete('SELECT CU', store)) == ['CUSTOMERS', 'ORDERS', 'PROGS', 'VOC']

    def test_completed_file_argument(self, store):
        assert _labels(_complete('SELECT CUSTOMERS ', store)) == ['CUSTOMERS', 'ORDERS', 'PROGS', 'VOC']

    def test_verb_alone_offers_keywords(self, store):
        labels = _labels(_complete('select ', store))
        assert 'SELECT' in labels
        assert 'ORDERS' not in labels

    def test_dict_infix(self, store):
        assert 'ORDERS' in _labels(_complete('LIST DICT CU', store))
        assert 'ORDERS' not in _labels(_complete('LIST DICT ', store))

    def test_lower_case_dict_is_the_file_argument(self, store):
        assert 'ORDERS' not in _labels(_complete('LIST dict CU', store))

    def test_file_management_verb(self, store):
        assert 'VOC' in _labels(_complete('DELETE.FILE VO', store))

    def test_after_from_or_to(self, store):
        assert 'VOC' in _labels(_complete('COPY FROM ', store))
        assert 'VOC' in _labels(_complete('COPY FROM ORDERS TO ', store))

    def test_past_file_argument_is_not_file_context(self, store):
        labels = _labels(_complete('SELECT CUSTOMERS BY ', store))
        assert 'SELECT' in labels
        assert 'ORDERS' not in labels


class TestDictionaryContext:
    def test_after_modifier(self, store):
        items = _complete('SELECT CUSTOMERS WITH ', store)
        assert _labels(items) == ['NAME', 'STATUS', 'BALANCE']
        assert all(i.kind == lsp.CompletionItemKind.Reference for i in items)

    def test_modifier_on_continuation_line(self, store):
        assert _labels(_complete('LIST CUSTOMERS\nBY-EXP ', store)) == ['NAME', 'STATUS', 'BALANCE']

    def test_unknown_dictionary_offers_nothing(self, store):
        assert _complete('SELECT ORDERS WITH ', store) == []

    def test_index_verb_dictionary_argument(self, store):
        fields = ['NAME', 'STATUS', 'BALANCE']
        assert _labels(_complete('CREATE.INDEX CUSTOMERS NAME ', store)) == fields
        assert _labels(_complete('DELETE.INDEX CUSTOMERS ST', store)) == fields
        assert _labels(_complete('CREATE.INDEX DICT CUSTOMERS NAME ', store)) == fields

    def test_index_verb_file_argument(self, store):
        assert 'ORDERS' in _labels(_complete('CREATE.INDEX CUSTOMERS ', store))

    def test_index_verb_grammar_exhausted(self, store):
        assert _complete('CREATE.INDEX CUSTOMERS NAME BALANCE ', store) == []

    def test_current_file_follows_last_verb(self, store):
        doc = parse_document('u', 'SELECT CUSTOMERS\nWITH NAME = "A"\nSELECT NOFILE\nAND')
        assert current_file(doc, 1, store) == 'CUSTOMERS'
        assert current_file(doc, 3, store) == 'CUSTOMERS'


class TestFileTypeContext:
    def test_type_equals(self, store):
        assert _labels(_complete('CREATE.FILE NEW TYPE=', store)) == list(FILE_TYPES)

    def test_type_space_equals(self, store):
        assert _labels(_complete('create.file NEW TYPE = ', store)) == list(FILE_TYPES)


class TestKeywordContext:
    def test_empty_line(self, store):
        labels = _labels(_complete('', store))
        assert 'SELECT' in labels
        assert 'CREATE.FILE' in labels
        assert len(labels) == len(set(labels))

    def test_keyword_items_carry_tags(self, store):
        items = {i.label: i for i in _complete('SE', store)}
        assert items['SELECT'].kind == lsp.CompletionItemKind.Method
        assert items['SELECT'].data == 1
        assert items['COMPILE'].data == items['BASIC'].data

    def test_line_past_end_of_document(self, store):
        doc = parse_document('u', 'SELECT')
        assert get_completions(doc, lsp.Position(line=5, character=0), store) == []


class TestResolve:
    def test_keyword_documentation(self):
        item = resolve_completion(lsp.CompletionItem(label='SELECT', data=1))
        assert item.detail == 'SELECT {Filename} {Criteria}'
        assert 'active select list' in item.documentation.value

    def test_untagged_item_unchanged(self):
        item = resolve_completion(lsp.CompletionItem(label='P1', data=NO_DOCS))
        assert item.detail is None
        assert item.documentation is None

    def test_missing_data(self):
        item = resolve_completion(lsp.CompletionItem(label='X'))
        assert item.detail is None

    def test_resolve_does_not_leak_into_later_requests(self, store):
        first = {i.label: i for i in _complete('', store)}
        resolve_completion(first['SELECT'])
        second = {i.label: i for i in _complete('', store)}
        assert second['SELECT'] is not first['SELECT']
        assert second['SELECT'].detail is None
