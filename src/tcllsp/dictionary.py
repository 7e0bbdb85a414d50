"""
Dictionary field definitions.

A dictionary item travels as a list of attribute-mark delimited values::

    [0] name  [1] kind  [2] field number  [3] ...

What follows the field number depends on the kind byte.  D/I/V items (data,
I-descriptor, V-descriptor) carry ``conversion, heading, width, value type``
in that order.  A/S items (Pick-style attribute and synonym definitions)
carry the heading straight after the field number, the conversion at
attribute 8 and a width split across attributes 9 and 10 (justification and
length).  Each layout is modelled by its own class and picked from
``_DECODERS`` by the first character of the kind value.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class FieldDefinition(ABC):
    name: str
    kind: str            # one of D, I, V, A, S
    field_number: str
    heading: str
    conversion: str
    width: str
    value_type: str

    KINDS: ClassVar[tuple[str, ...]] = ()

    @classmethod
    @abstractmethod
    def from_attributes(cls, attrs: list[str]) -> FieldDefinition:
        """Build the definition from the attributes of one dictionary item."""

    def summary(self) -> str:
        """Plain-text block shown when hovering a field name."""
        return '\n'.join([
            f'Field Name : {self.name}',
            f'Dict Type  : {self.kind}',
            f'Field No   : {self.field_number}',
            f'Conversion : {self.conversion}',
            f'Heading    : {self.heading}',
            f'Width      : {self.width}',
            f'Type       : {self.value_type}',
        ])


@dataclass(frozen=True)
class DataFieldDefinition(FieldDefinition):
    """D, I and V dictionary items."""

    KINDS: ClassVar[tuple[str, ...]] = ('D', 'I', 'V')

    @classmethod
    def from_attributes(cls, attrs: list[str]) -> DataFieldDefinition:
        a = _padded(attrs, 7)
        return cls(
            name=a[0], kind=a[1][:1], field_number=a[2],
            conversion=a[3], heading=a[4], width=a[5], value_type=a[6],
        )


@dataclass(frozen=True)
class AttributeFieldDefinition(FieldDefinition):
    """A and S dictionary items.  ``value_type`` is always empty."""

    KINDS: ClassVar[tuple[str, ...]] = ('A', 'S')

    @classmethod
    def from_attributes(cls, attrs: list[str]) -> AttributeFieldDefinition:
        a = _padded(attrs, 11)
        return cls(
            name=a[0], kind=a[1][:1], field_number=a[2],
            heading=a[3], conversion=a[8], width=a[9] + a[10], value_type='',
        )


_DECODERS: dict[str, type[FieldDefinition]] = {
    kind: cls
    for cls in (DataFieldDefinition, AttributeFieldDefinition)
    for kind in cls.KINDS
}


def _padded(attrs: list[str], size: int) -> list[str]:
    if len(attrs) >= size:
        return attrs
    return list(attrs) + [''] * (size - len(attrs))


def decode_field(attrs: list[str]) -> FieldDefinition | None:
    """Build a :class:`FieldDefinition` from split attributes.

    Returns *None* when the kind byte is not one of D/I/V/A/S (S-dictionary
    screens, reports and other unsupported item types are dropped).  Short
    records are padded with empty attributes.
    """
    if len(attrs) < 2 or not attrs[0]:
        return None
    cls = _DECODERS.get(attrs[1][:1])
    if cls is None:
        return None
    return cls.from_attributes(attrs)

