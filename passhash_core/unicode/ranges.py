"""
Code Point Range Tables
=======================
Immutable sets of inclusive code point intervals.
"""

from bisect import bisect_right
from typing import Iterable, Iterator, Tuple

CodePointRange = Tuple[int, int]


class RangeTable:
    """
    Sorted, merged set of inclusive ``(start, end)`` code point intervals.

    Overlapping and adjacent intervals are merged on construction so that a
    lookup is a single binary search over the interval starts.
    """

    __slots__ = ("_starts", "_ends")

    def __init__(self, ranges: Iterable[CodePointRange]):
        merged = []
        for start, end in sorted(ranges):
            if start > end:
                raise ValueError(f"Invalid code point range {start:04X}..{end:04X}")
            if merged and start <= merged[-1][1] + 1:
                if end > merged[-1][1]:
                    merged[-1] = (merged[-1][0], end)
            else:
                merged.append((start, end))

        self._starts = tuple(start for start, _ in merged)
        self._ends = tuple(end for _, end in merged)

    def __contains__(self, code_point: int) -> bool:
        index = bisect_right(self._starts, code_point) - 1
        return index >= 0 and code_point <= self._ends[index]

    def __iter__(self) -> Iterator[CodePointRange]:
        return iter(zip(self._starts, self._ends))

    def __len__(self) -> int:
        return len(self._starts)

    def __repr__(self) -> str:
        return f"RangeTable({len(self)} ranges)"
