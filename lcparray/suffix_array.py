#!/usr/bin/env python3
"""
Suffix array strategy for arbitrary-pair LCP queries.

Uses pydivsufsort (C library) for O(n) suffix array construction, Kasai's
algorithm for the LCP of lexicographically adjacent suffixes, and a
range-minimum tree over that array: the LCP of two suffixes is the minimum
adjacent LCP between their ranks.
"""

import numpy as np
import pydivsufsort

from lcparray.rmq import MinSegmentTree
from lcparray.text_utils import StringLike, check_positions, to_bytes


class SuffixArrayLCP:
    """
    LCP of any two suffixes via suffix array + adjacent LCP + range minimum.

    Same get(i, j) contract as LongestCommonPrefix; stores a suffix array,
    its inverse and a segment tree instead of class layers.

    Usage:
        >>> lcp = SuffixArrayLCP(b"banana")
        >>> lcp.get(1, 3)
        3
    """

    def __init__(self, data: StringLike):
        """
        Build the structure for a string.

        Args:
            data: bytes, bytearray, List[int] of byte values (0-255), or text
        """
        self._bytes = to_bytes(data)
        self.n = len(self._bytes)

        # Always use int64 to support large strings (>2GB)
        if self.n == 0:
            self.suffix_array = np.array([], dtype=np.int64)
        elif self.n == 1:
            self.suffix_array = np.array([0], dtype=np.int64)
        else:
            self.suffix_array = pydivsufsort.divsufsort(self._bytes).astype(np.int64)

        self.rank = self._build_rank()
        self.lcp_array = self._build_lcp_array()
        self._min_lcp = MinSegmentTree(self.lcp_array)

        for array in (self.suffix_array, self.rank, self.lcp_array):
            array.flags.writeable = False

    @property
    def text(self) -> bytes:
        """The indexed string."""
        return self._bytes

    def _build_rank(self) -> np.ndarray:
        """Inverse suffix array: rank[position] = index in suffix_array."""
        rank = np.empty(self.n, dtype=np.int64)
        rank[self.suffix_array] = np.arange(self.n, dtype=np.int64)
        return rank

    def _build_lcp_array(self) -> np.ndarray:
        """
        Build the adjacent LCP array using Kasai's algorithm.

        lcp[r] is the LCP of suffix_array[r] and suffix_array[r + 1], so the
        array has n - 1 entries.
        Time complexity: O(n)
        """
        if self.n <= 1:
            return np.array([], dtype=np.int64)

        lcp = np.zeros(self.n - 1, dtype=np.int64)

        k = 0
        for i in range(self.n):
            if self.rank[i] == self.n - 1:
                k = 0
                continue

            j = self.suffix_array[self.rank[i] + 1]

            while i + k < self.n and j + k < self.n and \
                  self._bytes[i + k] == self._bytes[j + k]:
                k += 1

            lcp[self.rank[i]] = k

            if k > 0:
                k -= 1

        return lcp

    def get(self, first: int, second: int) -> int:
        """
        Length of the longest common prefix of two suffixes.

        Raises:
            IndexError: If either position is not in [0, N)

        Complexity: O(log N)
        """
        i, j = check_positions(first, second, self.n)

        if i == j:
            return self.n - i

        low, high = sorted((int(self.rank[i]), int(self.rank[j])))
        return int(self._min_lcp.get(low, high - 1))

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"SuffixArrayLCP(n={self.n})"
