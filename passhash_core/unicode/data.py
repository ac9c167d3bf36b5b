"""
Unicode Data Files
==================
Loader for the UCD-style property files shipped in ``unicode/data``.

Each non-comment line has the form::

    0660..0669    ; CONTEXTO     # ARABIC-INDIC DIGIT ZERO..NINE
"""

from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from typing import List, Tuple

import structlog

from .ranges import RangeTable

logger = structlog.get_logger(__name__)

DEFAULT_IGNORABLE_FILE = "Default_Ignorable_DerivedProperty.txt"
EXCEPTIONS_FILE = "RFC5892_Exceptions_FCategory.txt"
OLD_HANGUL_JAMO_FILE = "RFC5892_OldHangulJamo_ICategory.txt"

PVALID = "PVALID"


@dataclass(frozen=True)
class UnicodeDataItem:
    """One ``start..end ; value`` entry."""
    start: int
    end: int
    value: str


def parse_unicode_data(text: str) -> List[UnicodeDataItem]:
    """
    Parse the contents of a property file.

    Raises:
        ValueError: On a malformed line
    """
    items = []

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.split("#", 1)[0].strip()
        if not line:
            continue

        fields = [f.strip() for f in line.split(";")]
        if len(fields) != 2 or not fields[0] or not fields[1]:
            raise ValueError(
                f"Unexpected number of items in data on line {line_number}. Data: {line}"
            )

        bounds = fields[0].split("..")
        try:
            if len(bounds) == 1:
                start = end = int(bounds[0], 16)
            elif len(bounds) == 2:
                start, end = int(bounds[0], 16), int(bounds[1], 16)
            else:
                raise ValueError(bounds)
        except ValueError:
            raise ValueError(
                f"Invalid code point range on line {line_number}. Data: {line}"
            ) from None

        items.append(UnicodeDataItem(start, end, fields[1]))

    return items


@lru_cache(maxsize=None)
def load_unicode_data(name: str) -> Tuple[UnicodeDataItem, ...]:
    """Load and cache a property file from the package data directory."""
    text = resources.files(__package__).joinpath("data").joinpath(name).read_text(encoding="utf-8")
    items = tuple(parse_unicode_data(text))

    if not items:
        raise ValueError(f"Unicode data file '{name}' contains no entries")

    logger.debug("unicode_data_loaded", file=name, entries=len(items))
    return items


@lru_cache(maxsize=1)
def default_ignorable_table() -> RangeTable:
    """Default_Ignorable_Code_Point ranges."""
    return RangeTable((i.start, i.end) for i in load_unicode_data(DEFAULT_IGNORABLE_FILE))


@lru_cache(maxsize=1)
def exceptions_allow_table() -> RangeTable:
    """RFC 5892 exceptions with a PVALID derived property."""
    return RangeTable(
        (i.start, i.end) for i in load_unicode_data(EXCEPTIONS_FILE) if i.value == PVALID
    )


@lru_cache(maxsize=1)
def exceptions_disallow_table() -> RangeTable:
    """RFC 5892 exceptions that are CONTEXTO or DISALLOWED."""
    return RangeTable(
        (i.start, i.end) for i in load_unicode_data(EXCEPTIONS_FILE) if i.value != PVALID
    )


@lru_cache(maxsize=1)
def old_hangul_jamo_table() -> RangeTable:
    """Conjoining Hangul Jamo ranges."""
    return RangeTable((i.start, i.end) for i in load_unicode_data(OLD_HANGUL_JAMO_FILE))
