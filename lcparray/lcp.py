#!/usr/bin/env python3
"""
Longest common prefix queries over the suffixes of a fixed string.

The structure keeps every equivalence class layer produced by
lcparray.classes.classify() and answers get(i, j) with a greedy,
highest-power-first matching walk over those layers, in O(log N).
"""

from typing import List, Union
import numpy as np

from lcparray.classes import classify
from lcparray.suffix_array import SuffixArrayLCP
from lcparray.text_utils import StringLike, check_positions, to_bytes


class LongestCommonPrefix:
    """
    LCP of any two suffixes of a string, via retained class layers.

    Construction runs prefix doubling once (O(N log N) time and space).
    Afterwards the structure is read-only, so any number of callers may
    query it concurrently without locking.

    Usage:
        >>> lcp = LongestCommonPrefix("abacaba")
        >>> lcp.get(0, 4)
        3
        >>> lcp.get(0, 0)
        7
    """

    def __init__(self, data: StringLike):
        """
        Build the structure for a string.

        Args:
            data: bytes, bytearray, List[int] of byte values (0-255), or text
                  (UTF-8 encoded)
        """
        self._bytes = to_bytes(data)
        self.n = len(self._bytes)
        self._layers = classify(self._bytes)

    @property
    def text(self) -> bytes:
        """The indexed string."""
        return self._bytes

    @property
    def layers(self) -> List[np.ndarray]:
        """Class layers L_0..L_K (read-only arrays)."""
        return list(self._layers)

    def get(self, first: int, second: int) -> int:
        """
        Length of the longest common prefix of two suffixes.

        Args:
            first: Start position of the first suffix
            second: Start position of the second suffix

        Returns:
            Number of leading symbols the two suffixes share

        Raises:
            IndexError: If either position is not in [0, N)

        Complexity: O(log N)
        """
        i, j = check_positions(first, second, self.n)

        # Handled apart from the walk: a suffix matches itself to the end
        if i == j:
            return self.n - i

        result = 0
        for k in range(len(self._layers) - 1, -1, -1):
            step = 1 << k
            # Only non-wrapping substrings may match; a cursor may land on n
            if max(i, j) + step > self.n:
                continue

            layer = self._layers[k]
            if layer[i] == layer[j]:
                result += step
                i += step
                j += step

        return result

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"LongestCommonPrefix(n={self.n}, layers={len(self._layers)})"


STRATEGIES = {
    'classes': LongestCommonPrefix,
    'suffix_array': SuffixArrayLCP,
}

DEFAULT_STRATEGY = 'classes'


def new(data: StringLike, strategy: str = DEFAULT_STRATEGY
        ) -> Union[LongestCommonPrefix, SuffixArrayLCP]:
    """
    Build an LCP structure for a string.

    Args:
        data: The string to index
        strategy: 'classes' (binary lifting over class layers, default) or
                  'suffix_array' (suffix array + adjacency LCP + range minimum)

    Returns:
        Structure exposing get(i, j)

    Raises:
        ValueError: If the strategy is unknown
    """
    if strategy not in STRATEGIES:
        raise ValueError(
            f"Unknown strategy '{strategy}'. Expected one of {list(STRATEGIES)}"
        )
    return STRATEGIES[strategy](data)
