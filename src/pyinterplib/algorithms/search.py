"""Interval lookup: bounded binary search and the lookup accelerator."""

import logging
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


def bsearch(x_array: Sequence[float], x: float, index_lo: int, index_hi: int) -> int:
    """
    Find the segment of a sorted table that contains x.

    Returns the index i in [index_lo, index_hi - 1] with x_array[i] <= x < x_array[i + 1].
    Queries below x_array[index_lo] clamp to index_lo, queries at or above
    x_array[index_hi] clamp to index_hi - 1. When x equals an interior sample the
    segment starting at that sample is returned.
    Args:
        x_array: Strictly increasing sample points
        x: Query point
        index_lo: Lowest sample index to consider
        index_hi: Highest sample index to consider
    Returns:
        Index of the first sample of the segment
    """
    ilo = index_lo
    ihi = index_hi
    while ihi > ilo + 1:
        i = (ihi + ilo) // 2
        if x_array[i] > x:
            ihi = i
        else:
            ilo = i
    return ilo


class LookupAccelerator:
    """
    Caches the last segment index found in a table.

    Nearby queries (e.g. dense sampling of a curve) are answered from the cached
    segment or one of its neighbours without searching. The cached index is checked
    against the table it is used with, so reusing one accelerator for a different
    table only costs a cache miss. Call reset() when switching tables to start cold.

    An accelerator is mutable and must not be shared between threads.
    """

    def __init__(self) -> None:
        self._cache: Optional[int] = None
        self._hit_count = 0
        self._miss_count = 0

    @property
    def cache(self) -> Optional[int]:
        """Cached segment index, or None while cold."""
        return self._cache

    @property
    def hit_count(self) -> int:
        return self._hit_count

    @property
    def miss_count(self) -> int:
        return self._miss_count

    @property
    def is_warm(self) -> bool:
        return self._cache is not None

    def find(self, x_array: Sequence[float], x: float) -> int:
        """Return the segment index for x, identical to bsearch over the whole table."""
        size = len(x_array)
        k = self._cache
        if k is not None and k + 1 < size:
            if x_array[k] <= x < x_array[k + 1]:
                self._hit_count += 1
                return k
            if k + 2 < size and x_array[k + 1] <= x < x_array[k + 2]:
                self._hit_count += 1
                self._cache = k + 1
                return k + 1
            if k > 0 and x_array[k - 1] <= x < x_array[k]:
                self._hit_count += 1
                self._cache = k - 1
                return k - 1
            # Search only the side of the cached segment that can contain x
            if x < x_array[k]:
                index = bsearch(x_array, x, 0, k)
            else:
                index = bsearch(x_array, x, k, size - 1)
        else:
            if k is not None:
                logger.debug("Cached index %d invalid for table of length %d, searching full table", k, size)
            index = bsearch(x_array, x, 0, size - 1)
        self._miss_count += 1
        self._cache = index
        return index

    def reset(self) -> None:
        """Forget the cached index and clear the statistics."""
        self._cache = None
        self._hit_count = 0
        self._miss_count = 0

    def __repr__(self) -> str:
        return (f"LookupAccelerator(cache={self._cache}, hits={self._hit_count}, "
                f"misses={self._miss_count})")


def find_index(x_array: Sequence[float], x: float, accel: Optional[LookupAccelerator] = None) -> int:
    """Resolve the segment index for x, through the accelerator when one is given."""
    if accel is not None:
        return accel.find(x_array, x)
    return bsearch(x_array, x, 0, len(x_array) - 1)
