#!/usr/bin/env python3
"""
Input helpers shared by the LCP structures.

Normalizes the accepted string types to bytes and validates query
positions against the string length.
"""

import operator
from typing import List, Optional, Tuple, Union

StringLike = Union[str, bytes, bytearray, List[int]]


def _as_byte(value) -> Optional[int]:
    """Integer value of a byte-like element, or None if it is not a byte."""
    if isinstance(value, bool):
        return None
    try:
        value = operator.index(value)
    except TypeError:
        return None
    return value if 0 <= value <= 255 else None


def validate_byte_sequence(byte_sequence: List[int]) -> None:
    """
    Validate that a sequence contains only valid bytes (0-255).

    Args:
        byte_sequence: Sequence to validate

    Raises:
        ValueError: If sequence contains invalid values

    Example:
        >>> validate_byte_sequence([0, 128, 255])  # OK
        >>> validate_byte_sequence([256])  # Raises ValueError
    """
    invalid = [b for b in byte_sequence if _as_byte(b) is None]
    if invalid:
        raise ValueError(
            f"Sequence contains {len(invalid)} invalid byte values: "
            f"{invalid[:10]}{'...' if len(invalid) > 10 else ''}"
        )


def to_bytes(data: StringLike, encoding: str = 'utf-8') -> bytes:
    """
    Convert any accepted string representation to an immutable bytes copy.

    Args:
        data: bytes, bytearray, list of byte values (0-255), or text
        encoding: Text encoding used when data is a str (default: 'utf-8')

    Returns:
        The string as bytes

    Example:
        >>> to_bytes("abacaba")
        b'abacaba'
        >>> to_bytes([98, 97])
        b'ba'
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, bytearray):
        return bytes(data)
    if isinstance(data, str):
        return data.encode(encoding)
    if isinstance(data, list):
        validate_byte_sequence(data)
        return bytes(operator.index(b) for b in data)

    raise TypeError(
        f"Expected str, bytes, bytearray or List[int]. Got {type(data)}"
    )


def check_positions(first: int, second: int, n: int) -> Tuple[int, int]:
    """
    Validate a pair of suffix start positions for a string of length n.

    Positions are never clamped or wrapped: anything outside [0, n) fails,
    so every query against an empty string fails.

    Raises:
        IndexError: If either position is out of range
        TypeError: If a position is not an integer
    """
    first = operator.index(first)
    second = operator.index(second)

    for position in (first, second):
        if position < 0 or position >= n:
            raise IndexError(
                f"Suffix position {position} out of range for string of length {n}"
            )

    return first, second
