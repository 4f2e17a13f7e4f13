#!/usr/bin/env python3
"""
Word Packing - Big-endian conversion between unsigned words and bytes.

Every generator state and seed travels as raw bytes. Scalars are packed
with int.to_bytes/int.from_bytes; word arrays go through numpy big-endian
dtypes so that a 624-word Mersenne Twister state or a 2M-word SuperKISS
queue is converted in one call.

Version: 1.0.0
"""

from typing import List, Sequence, Union

import numpy as np

from prng_framework.errors import InvalidArgumentError, require

BytesLike = Union[bytes, bytearray, memoryview]

# Word size in bytes -> big-endian numpy dtype
_BIG_ENDIAN_DTYPES = {
    1: np.dtype('>u1'),
    2: np.dtype('>u2'),
    4: np.dtype('>u4'),
    8: np.dtype('>u8'),
}

# Word size in bytes -> native numpy dtype (used for in-memory queues)
_NATIVE_DTYPES = {
    1: np.uint8,
    2: np.uint16,
    4: np.uint32,
    8: np.uint64,
}


def _dtype_for(word_size: int) -> np.dtype:
    if word_size not in _BIG_ENDIAN_DTYPES:
        raise InvalidArgumentError(f"Unsupported word size: {word_size} bytes")
    return _BIG_ENDIAN_DTYPES[word_size]


# ============================================================================
# SCALARS
# ============================================================================

def unsigned_to_bytes(value: int, size: int) -> bytes:
    """Pack ``value`` into ``size`` big-endian bytes, keeping only the low bits."""
    return (value & ((1 << (8 * size)) - 1)).to_bytes(size, 'big')


def bytes_to_unsigned(data: BytesLike, size: int, offset: int = 0) -> int:
    """Read ``size`` big-endian bytes starting at ``offset``."""
    require(offset >= 0, f"Negative offset: {offset}")
    end = offset + size
    require(len(data) >= end,
            f"Need {end} bytes to read a {8 * size}-bit word at offset {offset}, got {len(data)}")
    return int.from_bytes(bytes(data[offset:end]), 'big')


def short_to_bytes(value: int) -> bytes:
    return unsigned_to_bytes(value, 2)


def integer_to_bytes(value: int) -> bytes:
    return unsigned_to_bytes(value, 4)


def long_to_bytes(value: int) -> bytes:
    return unsigned_to_bytes(value, 8)


def bytes_to_short(data: BytesLike, offset: int = 0) -> int:
    return bytes_to_unsigned(data, 2, offset)


def bytes_to_integer(data: BytesLike, offset: int = 0) -> int:
    return bytes_to_unsigned(data, 4, offset)


def bytes_to_long(data: BytesLike, offset: int = 0) -> int:
    return bytes_to_unsigned(data, 8, offset)


# ============================================================================
# WORD ARRAYS
# ============================================================================

def words_to_bytes(words: Union[Sequence[int], np.ndarray], word_size: int) -> bytes:
    """Pack a sequence of unsigned words big-endian, no padding."""
    dtype = _dtype_for(word_size)
    if isinstance(words, np.ndarray):
        return words.astype(dtype, copy=False).tobytes()
    return np.array(words, dtype=dtype).tobytes()


def bytes_to_word_array(data: BytesLike, word_size: int, count: int,
                        offset: int = 0) -> np.ndarray:
    """Unpack ``count`` big-endian words into a writable native-endian numpy array."""
    dtype = _dtype_for(word_size)
    require(count >= 0, f"Negative word count: {count}")
    needed = offset + count * word_size
    require(len(data) >= needed,
            f"Need {needed} bytes for {count} words of {word_size} bytes, got {len(data)}")
    view = np.frombuffer(bytes(data), dtype=dtype, count=count, offset=offset)
    return view.astype(_NATIVE_DTYPES[word_size])


def bytes_to_words(data: BytesLike, word_size: int, count: int,
                   offset: int = 0) -> List[int]:
    """Unpack ``count`` big-endian words into a list of Python ints."""
    return [int(word) for word in bytes_to_word_array(data, word_size, count, offset)]
