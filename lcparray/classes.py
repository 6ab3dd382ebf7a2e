#!/usr/bin/env python3
"""
Prefix-doubling classification of suffixes into equivalence classes.

For each power of two 2^k (k = 0..ceil(log2 N)) a layer maps every start
position to a class id; two positions share an id iff their cyclic
substrings of length 2^k are equal. Layer k+1 is derived from layer k by
sorting positions on the pair of classes (L_k[p], L_k[(p + 2^k) mod N]).

The wraparound only exists to keep the sort keys fixed-size. Consumers must
accept a class match only when neither substring crosses the string end,
in which case cyclic equality is ordinary substring equality.
"""

from typing import List
import numpy as np

from lcparray.text_utils import StringLike, to_bytes

# Symbols are bytes
ALPHABET_SIZE = 256

# Radix digit width for sorting class ids
DIGIT_BITS = 16


def layer_count(n: int) -> int:
    """
    Number of class layers produced for a string of length n.

    Example:
        >>> layer_count(0), layer_count(1), layer_count(7), layer_count(8)
        (0, 1, 4, 4)
    """
    if n <= 1:
        return n
    return (n - 1).bit_length() + 1


def class_count(layer: np.ndarray) -> int:
    """Number of distinct classes in a layer (ids are dense from 0)."""
    if len(layer) == 0:
        return 0
    return int(layer.max()) + 1


def _class_dtype(n: int) -> np.dtype:
    if n <= np.iinfo(np.int32).max:
        return np.dtype(np.int32)
    return np.dtype(np.int64)


def counting_order(keys: np.ndarray, key_count: int) -> np.ndarray:
    """
    Stable order of positions by non-negative integer keys below key_count.

    LSD radix sort over 16-bit digits. NumPy sorts uint16 keys with a
    stable radix (counting) sort, so each pass is O(N) and the whole sort is
    O(N) for up to 2^32 distinct keys (two passes), with a third pass beyond.

    Example:
        >>> counting_order(np.array([3, 1, 3, 0]), 4).tolist()
        [3, 1, 0, 2]
    """
    digit_mask = (1 << DIGIT_BITS) - 1
    passes = max(1, -(-max(key_count - 1, 0).bit_length() // DIGIT_BITS))

    order = np.arange(len(keys), dtype=np.int64)
    for shift in range(0, passes * DIGIT_BITS, DIGIT_BITS):
        digits = ((keys[order] >> shift) & digit_mask).astype(np.uint16)
        order = order[np.argsort(digits, kind='stable')]

    return order


def _freeze(layer: np.ndarray) -> np.ndarray:
    layer.flags.writeable = False
    return layer


def initial_classes(text: bytes) -> np.ndarray:
    """
    Build layer 0: single-symbol classes ranked by symbol value.

    Counts symbols into a 256-bucket table; the class of a symbol is the
    number of distinct smaller symbols present, so ids are also a valid sort
    order. O(N) time.
    """
    symbols = np.frombuffer(text, dtype=np.uint8)
    counts = np.bincount(symbols, minlength=ALPHABET_SIZE)
    symbol_class = np.cumsum(counts > 0) - 1
    return symbol_class[symbols].astype(_class_dtype(len(text)))


class _DoublingState:
    """
    Scratch buffers for one classification run.

    Holds the current sort order of positions together with pre-sized
    buffers reused by every doubling step. Owned by a single call to
    classify() and discarded afterwards.
    """

    def __init__(self, text: bytes, classes: np.ndarray):
        self.n = len(text)
        self.dtype = classes.dtype

        # Stable radix sort on uint8 keys is a 256-bucket counting sort
        symbols = np.frombuffer(text, dtype=np.uint8)
        self.order = np.argsort(symbols, kind='stable').astype(np.int64)

        self.shifted = np.empty(self.n, dtype=np.int64)
        self.partner = np.empty(self.n, dtype=np.int64)
        self.keys = np.empty(self.n, dtype=self.dtype)
        self.first = np.empty(self.n, dtype=self.dtype)
        self.second = np.empty(self.n, dtype=self.dtype)
        self.changed = np.empty(self.n - 1, dtype=bool)

    def double(self, classes: np.ndarray, length: int, key_count: int) -> np.ndarray:
        """
        Derive the layer for substrings of length 2 * length.

        Args:
            classes: Layer for substrings of the given length
            length: Current substring length (a power of two)
            key_count: Number of classes in the given layer

        Returns:
            New layer; self.order is left sorted by the new classes
        """
        n = self.n

        # order is sorted by L[q]; with p = q - length it is sorted by L[p + length]
        np.subtract(self.order, length, out=self.shifted)
        np.mod(self.shifted, n, out=self.shifted)

        # Stable sort by the first half keeps the second-half order inside buckets
        np.take(classes, self.shifted, out=self.keys)
        bucket_order = counting_order(self.keys, key_count)
        np.take(self.shifted, bucket_order, out=self.order)

        # Renumber: a new class starts wherever the key pair changes
        np.take(classes, self.order, out=self.first)
        np.add(self.order, length, out=self.partner)
        np.mod(self.partner, n, out=self.partner)
        np.take(classes, self.partner, out=self.second)

        np.not_equal(self.first[1:], self.first[:-1], out=self.changed)
        self.changed |= self.second[1:] != self.second[:-1]

        new_classes = np.empty(n, dtype=self.dtype)
        new_classes[self.order[0]] = 0
        new_classes[self.order[1:]] = np.cumsum(self.changed)
        return new_classes


def classify(data: StringLike) -> List[np.ndarray]:
    """
    Compute equivalence class layers L_0..L_K for all suffixes.

    Args:
        data: The string (bytes, bytearray, List[int] of 0-255, or text)

    Returns:
        List of read-only integer arrays, one per power-of-two length.
        Empty for an empty string; a single [0] layer for length 1.

    Complexity: O(N log N) time and space.

    Example:
        >>> [layer.tolist() for layer in classify(b"aba")]
        [[0, 1, 0], [1, 2, 0], [1, 2, 0]]
    """
    text = to_bytes(data)
    n = len(text)

    if n == 0:
        return []
    if n == 1:
        return [_freeze(np.zeros(1, dtype=_class_dtype(n)))]

    classes = _freeze(initial_classes(text))
    layers = [classes]
    state = _DoublingState(text, classes)

    length = 1
    while length < n:
        count = class_count(classes)
        if count == n:
            # Every position is already distinct; further layers repeat it
            layers.append(classes)
        else:
            classes = _freeze(state.double(classes, length, count))
            layers.append(classes)
        length *= 2

    return layers
