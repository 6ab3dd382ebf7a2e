#!/usr/bin/env python3
"""
Tests for prefix-doubling equivalence classes.
"""

import random

import numpy as np
import pytest

from lcparray.classes import (
    _DoublingState,
    classify,
    class_count,
    counting_order,
    initial_classes,
    layer_count,
)


def cyclic_substring(text: bytes, start: int, length: int) -> bytes:
    doubled = text * (length // len(text) + 2)
    return doubled[start:start + length]


class TestLayerShape:
    """Test number and size of layers."""

    def test_empty_string_has_no_layers(self):
        """Test empty string produces no layers."""
        assert classify(b"") == []

    def test_single_symbol_has_one_trivial_layer(self):
        """Test length-1 string produces a single [0] layer."""
        layers = classify(b"z")
        assert len(layers) == 1
        assert layers[0].tolist() == [0]

    @pytest.mark.parametrize("n, expected", [
        (0, 0), (1, 1), (2, 2), (3, 3), (4, 3), (5, 4), (7, 4), (8, 4), (9, 5),
    ])
    def test_layer_count(self, n, expected):
        """Test one layer per power of two up to ceil(log2 n)."""
        assert layer_count(n) == expected
        assert len(classify(b"x" * n)) == expected

    def test_every_layer_covers_every_position(self):
        """Test each layer has one entry per position."""
        text = b"abracadabra"
        for layer in classify(text):
            assert len(layer) == len(text)


class TestLayerZero:
    """Test single-symbol classes."""

    def test_ranked_by_symbol_value(self):
        """Test layer 0 ids follow symbol order."""
        assert classify(b"abacaba")[0].tolist() == [0, 1, 0, 2, 0, 1, 0]

    def test_banana(self):
        """Test layer 0 of banana."""
        assert initial_classes(b"banana").tolist() == [1, 0, 2, 0, 2, 0]

    def test_ids_are_dense(self):
        """Test absent symbols leave no gaps in ids."""
        layer = initial_classes(bytes([255, 0, 128, 0]))
        assert layer.tolist() == [2, 0, 1, 0]
        assert class_count(layer) == 3


class TestCountingOrder:
    """Test the radix sort used by each doubling step."""

    def test_docstring_example(self):
        """Test small stable ordering."""
        assert counting_order(np.array([3, 1, 3, 0]), 4).tolist() == [3, 1, 0, 2]

    def test_empty_keys(self):
        """Test empty input gives an empty order."""
        assert counting_order(np.array([], dtype=np.int32), 0).tolist() == []

    @pytest.mark.parametrize("key_count", [1, 2, 300, 65536, 65537, 2 ** 31 - 1])
    def test_matches_stable_argsort_int32(self, key_count):
        """Test one- and two-pass sorts equal a stable comparison sort."""
        rng = np.random.default_rng(key_count)
        keys = rng.integers(0, key_count, size=5000).astype(np.int32)
        expected = np.argsort(keys, kind='stable')
        assert counting_order(keys, key_count).tolist() == expected.tolist()

    def test_matches_stable_argsort_int64_three_passes(self):
        """Test keys wider than 32 bits need and get a third pass."""
        rng = np.random.default_rng(0)
        key_count = 2 ** 40
        keys = rng.integers(0, key_count, size=5000, dtype=np.int64)
        keys[:100] = keys[100:200]  # force ties
        expected = np.argsort(keys, kind='stable')
        assert counting_order(keys, key_count).tolist() == expected.tolist()


class TestDoubling:
    """Test layers built by doubling."""

    def test_small_example(self):
        """Test layers of a three-symbol string."""
        layers = classify(b"aba")
        assert [layer.tolist() for layer in layers] == [
            [0, 1, 0],
            [1, 2, 0],
            [1, 2, 0],
        ]

    def test_uniform_string_stays_in_one_class(self):
        """Test a run of one symbol keeps a single class."""
        for layer in classify(b"aaaaa"):
            assert layer.tolist() == [0] * 5

    def test_class_count_empty(self):
        """Test class_count of an empty layer."""
        assert class_count(np.array([], dtype=np.int32)) == 0

    @pytest.mark.parametrize("seed", range(4))
    def test_step_order_equals_lexsort_of_pairs(self, seed):
        """Test the doubling step orders positions by the class pair."""
        rng = random.Random(seed)
        text = bytes(rng.choice(b"abcd") for _ in range(300))
        n = len(text)
        classes = initial_classes(text)
        state = _DoublingState(text, classes)

        length = 1
        while length < n:
            partner = classes[(np.arange(n) + length) % n]
            expected = np.lexsort((partner, classes))

            new_classes = state.double(classes, length, class_count(classes))

            assert sorted(state.order.tolist()) == list(range(n))
            assert classes[state.order].tolist() == classes[expected].tolist()
            assert partner[state.order].tolist() == partner[expected].tolist()

            classes = new_classes
            length *= 2

    def test_wide_class_ids_use_two_passes(self):
        """Test a string with more than 2^16 classes still sorts correctly."""
        rng = random.Random(11)
        text = bytes(rng.randrange(256) for _ in range(70000))
        layers = classify(text)

        assert class_count(layers[-1]) > 2 ** 16
        for _ in range(200):
            p, q = rng.randrange(len(text)), rng.randrange(len(text))
            for k, layer in enumerate(layers):
                length = 1 << k
                if max(p, q) + length <= len(text):
                    same = text[p:p + length] == text[q:q + length]
                    assert (layer[p] == layer[q]) == same

    @pytest.mark.parametrize("seed", range(5))
    def test_classes_encode_cyclic_substring_equality(self, seed):
        """Test equal ids iff cyclic substrings are equal."""
        rng = random.Random(seed)
        text = bytes(rng.choice(b"abc") for _ in range(rng.randint(2, 30)))
        n = len(text)

        for k, layer in enumerate(classify(text)):
            length = 1 << k
            for p in range(n):
                for q in range(n):
                    same = cyclic_substring(text, p, length) == cyclic_substring(text, q, length)
                    assert (layer[p] == layer[q]) == same

    @pytest.mark.parametrize("seed", range(5))
    def test_ids_follow_sort_order(self, seed):
        """Test smaller id means lexicographically smaller cyclic substring."""
        rng = random.Random(seed)
        text = bytes(rng.choice(b"ab") for _ in range(rng.randint(2, 25)))
        n = len(text)

        for k, layer in enumerate(classify(text)):
            length = 1 << k
            for p in range(n):
                for q in range(n):
                    if layer[p] < layer[q]:
                        assert cyclic_substring(text, p, length) < cyclic_substring(text, q, length)

    def test_refinement_chain(self):
        """Test equal ids at layer k imply equal ids at layer k-1."""
        rng = random.Random(7)
        text = bytes(rng.choice(b"ab") for _ in range(64))
        layers = classify(text)

        for previous, current in zip(layers, layers[1:]):
            for p in range(len(text)):
                for q in range(len(text)):
                    if current[p] == current[q]:
                        assert previous[p] == previous[q]

    def test_layers_are_read_only(self):
        """Test layers cannot be modified."""
        for layer in classify(b"mississippi"):
            assert not layer.flags.writeable

    def test_accepts_text(self):
        """Test str input is accepted."""
        assert classify("ab")[0].tolist() == [0, 1]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
