"""
Unicode Tables
==============
Code point range tables used by the password normalizer.
"""

from .ranges import RangeTable
from .data import (
    UnicodeDataItem,
    parse_unicode_data,
    load_unicode_data,
    default_ignorable_table,
    exceptions_allow_table,
    exceptions_disallow_table,
    old_hangul_jamo_table,
)

__all__ = [
    "RangeTable",
    "UnicodeDataItem",
    "parse_unicode_data",
    "load_unicode_data",
    "default_ignorable_table",
    "exceptions_allow_table",
    "exceptions_disallow_table",
    "old_hangul_jamo_table",
]
