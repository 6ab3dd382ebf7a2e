#!/usr/bin/env python3
"""
Static range-minimum queries.

A bottom-up segment tree over a fixed sequence: O(N) build,
O(log N) query for the minimum of values[lo..hi] inclusive.
"""

from typing import Any, List, Sequence
import numpy as np


class MinSegmentTree:
    """
    Immutable minimum segment tree.

    Leaves live at tree[n:2n] and node k covers children 2k and 2k+1, which
    works for any n (not just powers of two) because min is commutative.

    Example:
        >>> tree = MinSegmentTree([5, 2, 7, 1, 9])
        >>> tree.get(0, 2)
        2
        >>> tree.get(2, 4)
        1
    """

    def __init__(self, values: Sequence[Any]):
        """
        Build the tree.

        Args:
            values: Comparable values (list, tuple or numpy array)
        """
        if isinstance(values, np.ndarray):
            values = values.tolist()
        else:
            values = list(values)

        self.n = len(values)
        self._tree: List[Any] = [None] * self.n + values

        for node in range(self.n - 1, 0, -1):
            left = self._tree[2 * node]
            right = self._tree[2 * node + 1]
            self._tree[node] = left if left <= right else right

    def get(self, lo: int, hi: int) -> Any:
        """
        Minimum of values[lo..hi], both ends inclusive.

        Raises:
            IndexError: If the range is empty or outside [0, n)
        """
        if lo < 0 or hi >= self.n or lo > hi:
            raise IndexError(
                f"Range [{lo}, {hi}] out of bounds for {self.n} values"
            )

        result = self._tree[lo + self.n]
        left = lo + self.n + 1
        right = hi + self.n + 1

        while left < right:
            if left & 1:
                if self._tree[left] < result:
                    result = self._tree[left]
                left += 1
            if right & 1:
                right -= 1
                if self._tree[right] < result:
                    result = self._tree[right]
            left >>= 1
            right >>= 1

        return result

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"MinSegmentTree(n={self.n})"
