"""
lcparray: Longest Common Prefix Queries Over Suffixes

Prefix-doubling equivalence classes for O(N log N) preprocessing and
O(log N) LCP queries between any two suffixes of a fixed byte string.
"""

from lcparray.lcp import LongestCommonPrefix, new, STRATEGIES
from lcparray.classes import classify
from lcparray.suffix_array import SuffixArrayLCP
from lcparray.rmq import MinSegmentTree
from lcparray import benchmark

__version__ = "0.1.0"

__all__ = [
    "LongestCommonPrefix",
    "SuffixArrayLCP",
    "MinSegmentTree",
    "new",
    "classify",
    "STRATEGIES",
    "benchmark",
]
