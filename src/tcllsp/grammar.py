"""
TCL command grammar.

Each verb that takes a file argument is described by a :class:`Verb` entry
in ``VERBS``.  Verbs match case-insensitively at the very start of a line
and must be followed by whitespace; a ``.`` in a verb name also matches
``-`` (``LIST.ITEM`` / ``LIST-ITEM``).

Roles:

* ``SELECTION`` verbs query a file; the file's dictionary is needed to check
  ``WITH``-style clauses.  The literal word ``DICT`` directly after the verb
  moves the file argument one word to the right.
* ``ITEM`` verbs act on one item of a file; the file's item-id list is used
  for completion.
* ``FILE`` verbs only take a file name (completion of file names).
"""
from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Sequence


class VerbRole(enum.Enum):
    SELECTION = 'selection'
    ITEM = 'item'
    FILE = 'file'


@dataclass(frozen=True)
class Verb:
    name: str
    role: VerbRole
    file_position: int = 1
    dict_infix: bool = False          # accepts "VERB DICT file"
    dictionary_argument: bool = False  # "VERB file dictname"

    def file_index(self, words: Sequence[str]) -> int:
        """Word index of the file argument for this line's *words*."""
        if self.dict_infix and len(words) > 1 and words[1] == 'DICT':
            return self.file_position + 1
        return self.file_position


_S, _I, _F = VerbRole.SELECTION, VerbRole.ITEM, VerbRole.FILE

VERBS: dict[str, Verb] = {v.name: v for v in (
    Verb('SELECT', _S, dict_infix=True),
    Verb('SSELECT', _S, dict_infix=True),
    Verb('LIST', _S, dict_infix=True),
    Verb('SORT', _S, dict_infix=True),
    Verb('COUNT', _S, dict_infix=True),
    Verb('CREATE.INDEX', _S, dict_infix=True, dictionary_argument=True),
    Verb('DELETE.INDEX', _S, dict_infix=True, dictionary_argument=True),
    Verb('BASIC', _I),
    Verb('COMPILE', _I),
    Verb('RUN', _I),
    Verb('CATALOG', _I),
    Verb('DECATALOG', _I),
    Verb('CT', _I),
    Verb('LIST.ITEM', _I),
    Verb('DELETE.FILE', _F),
)}


def _verb_pattern(name: str) -> str:
    return re.escape(name).replace(r'\.', '[.-]')


# Longest names first so LIST.ITEM wins over LIST.
_VERB_RE = re.compile(
    r'^(%s)\s' % '|'.join(_verb_pattern(n) for n in sorted(VERBS, key=len, reverse=True)),
    re.IGNORECASE,
)


def match_verb(line: str) -> Verb | None:
    """Return the :class:`Verb` that starts *line*, or None."""
    m = _VERB_RE.match(line)
    if m is None:
        return None
    return VERBS[m.group(1).upper().replace('-', '.')]


# ---------------------------------------------------------------------------
# Clause keywords
# ---------------------------------------------------------------------------

_OPERATOR_RE = re.compile(r'^(=|#|>|>=|<|<=|GT|LT|LE|GE|NE)$', re.IGNORECASE)

MODIFIERS = frozenset({
    'WITH', 'IF', 'AND', 'OR', 'BY-EXP', 'TOTAL', 'BY-EXP-DSND', 'BREAK-ON',
})

# Previous-word keywords after which a file name is expected.
FILE_PREPOSITIONS = frozenset({'FROM', 'TO'})

# At least one digit; "." and "" are not numbers.
_NUMBER_RE = re.compile(r'^(\d+\.?\d*|\.\d+)$')

_LITERAL_PREFIXES = ("'", '"', '\\')

FILE_TYPES = ('SqlArray', 'Directory', 'Hashed', 'MongoDB', 'Universe', 'Unidata')


def is_operator(word: str) -> bool:
    return bool(_OPERATOR_RE.match(word))


def is_modifier(word: str | None) -> bool:
    return word is not None and word.upper() in MODIFIERS


def is_number(word: str) -> bool:
    return bool(_NUMBER_RE.match(word))


def is_literal(word: str) -> bool:
    return word.startswith(_LITERAL_PREFIXES)
