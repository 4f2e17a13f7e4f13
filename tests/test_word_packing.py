#!/usr/bin/env python3
"""
Byte packing and width adapter tests.

Tests:
1. Big-endian scalar and word-array packing
2. Widening concatenates most-significant chunk first
3. Narrowing keeps the low bits
4. Top-N bit extraction and 1-bit composition
5. Bit-count validation happens before any state advance

Version: 1.0.0
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from prng_framework.api import BitWidth, RandomGenerator, RandomGenerator1, WidthAdapter
from prng_framework.errors import InvalidArgumentError
from prng_framework.utils import (
    bytes_to_integer,
    bytes_to_long,
    bytes_to_short,
    bytes_to_words,
    integer_to_bytes,
    long_to_bytes,
    words_to_bytes,
)


class ScriptedGenerator(RandomGenerator):
    """Replays fixed primitive outputs and counts primitive calls."""

    def __init__(self, width, outputs):
        self.NATURAL_WIDTH = BitWidth(width)
        self._outputs = list(outputs)
        self.calls = 0
        super().__init__(seed=b'')

    def set_seed(self, seed):
        pass

    def next_bits(self):
        value = self._outputs[self.calls]
        self.calls += 1
        return value


class ScriptedBitGenerator(RandomGenerator1):
    """1-bit generator replaying fixed bits."""

    def __init__(self, bits):
        self._bits = list(bits)
        self.calls = 0
        super().__init__(seed=b'')

    def set_seed(self, seed):
        pass

    def generate_bit(self):
        bit = self._bits[self.calls]
        self.calls += 1
        return bit


class TestScalarPacking:
    """Fixed-width integers to and from big-endian bytes."""

    def test_long_is_big_endian(self):
        """Most significant byte comes first."""
        assert long_to_bytes(0x0102030405060708) == bytes(range(1, 9))
        assert bytes_to_long(bytes(range(1, 9))) == 0x0102030405060708

    def test_values_are_unsigned(self):
        """All-ones bytes read back as the largest unsigned value."""
        assert bytes_to_short(b'\xff\xfe') == 0xFFFE
        assert bytes_to_long(b'\xff' * 8) == 2 ** 64 - 1

    def test_packing_keeps_low_bits(self):
        """Values wider than the target are truncated."""
        assert integer_to_bytes(0x100000001) == b'\x00\x00\x00\x01'

    def test_offset_read(self):
        """Reads start at the requested offset."""
        assert bytes_to_integer(b'\x00\x00\xde\xad\xbe\xef', offset=2) == 0xDEADBEEF

    def test_short_buffer_rejected(self):
        """Too few bytes is an invalid argument."""
        with pytest.raises(InvalidArgumentError):
            bytes_to_long(b'\x00' * 7)
        with pytest.raises(InvalidArgumentError):
            bytes_to_integer(b'\x00' * 5, offset=2)


class TestWordArrays:
    """Word arrays use numpy big-endian dtypes with no padding."""

    def test_words_to_bytes(self):
        assert words_to_bytes([1, 0xFFFFFFFF], 4) == b'\x00\x00\x00\x01\xff\xff\xff\xff'
        assert words_to_bytes([2 ** 64 - 1], 8) == b'\xff' * 8
        assert words_to_bytes([0x0102], 2) == b'\x01\x02'

    def test_bytes_to_words_with_offset(self):
        data = b'\xaa' + b'\x00\x01\x00\x02'
        assert bytes_to_words(data, 2, 2, offset=1) == [1, 2]

    def test_words_are_python_ints(self):
        """Unpacked words behave as unbounded ints, not numpy scalars."""
        words = bytes_to_words(b'\xff' * 8, 8, 1)
        assert type(words[0]) is int
        assert (words[0] << 1) == 2 ** 65 - 2

    def test_word_array_too_short(self):
        with pytest.raises(InvalidArgumentError):
            bytes_to_words(b'\x00' * 7, 4, 2)

    def test_unsupported_word_size(self):
        with pytest.raises(InvalidArgumentError):
            words_to_bytes([1], 3)


class TestWidening:
    """Wider values concatenate consecutive primitive outputs."""

    def test_long_from_shorts(self):
        """64 bits from a 16-bit primitive costs exactly four calls, MSB first."""
        gen = ScriptedGenerator(16, [0x0102, 0x0304, 0x0506, 0x0708])
        assert gen.generate_uniform_long() == 0x0102030405060708
        assert gen.calls == 4

    def test_short_from_bytes(self):
        gen = ScriptedGenerator(8, [0xAB, 0xCD])
        assert gen.generate_uniform_short() == 0xABCD
        assert gen.calls == 2

    def test_byte_from_bits(self):
        """A 1-bit primitive builds a byte from eight calls."""
        gen = ScriptedBitGenerator([1, 0, 0, 0, 0, 0, 0, 1])
        assert gen.generate_uniform_byte() == 0x81
        assert gen.calls == 8


class TestNarrowing:
    """Narrower values keep the low bits of a single call."""

    @pytest.mark.parametrize("method,expected", [
        ('generate_uniform_byte', 0x88),
        ('generate_uniform_short', 0x7788),
        ('generate_uniform_integer', 0x55667788),
        ('generate_uniform_long', 0x1122334455667788),
    ])
    def test_low_bits(self, method, expected):
        gen = ScriptedGenerator(64, [0x1122334455667788])
        assert getattr(gen, method)() == expected
        assert gen.calls == 1


class TestBitExtraction:
    """generate_*_bits(n) returns the top n bits of one value."""

    def test_top_bits(self):
        gen = ScriptedGenerator(32, [0xAABBCCDD])
        assert gen.generate_integer_bits(8) == 0xAA

    def test_zero_bits(self):
        gen = ScriptedGenerator(64, [0xFFFFFFFFFFFFFFFF])
        assert gen.generate_long_bits(0) == 0

    def test_full_width(self):
        gen = ScriptedGenerator(16, [0xBEEF])
        assert gen.generate_short_bits(16) == 0xBEEF

    def test_one_bit_generator_draws_only_needed_bits(self):
        """A 1-bit generator consumes exactly n calls for n bits."""
        gen = ScriptedBitGenerator([1, 0, 1, 1])
        assert gen.generate_byte_bits(4) == 0b1011
        assert gen.calls == 4

    @pytest.mark.parametrize("method,bits", [
        ('generate_byte_bits', 9),
        ('generate_short_bits', 17),
        ('generate_integer_bits', 33),
        ('generate_long_bits', 65),
        ('generate_long_bits', -1),
    ])
    def test_out_of_range_rejected_without_advancing(self, method, bits):
        gen = ScriptedGenerator(64, [])
        with pytest.raises(InvalidArgumentError):
            getattr(gen, method)(bits)
        assert gen.calls == 0

    def test_one_bit_generator_bound_check(self):
        gen = ScriptedBitGenerator([])
        with pytest.raises(InvalidArgumentError):
            gen.generate_byte_bits(9)
        assert gen.calls == 0


class TestDerivedPrimitives:
    """Booleans and byte strings."""

    def test_boolean_is_top_bit_of_byte(self):
        assert ScriptedGenerator(8, [0x80]).generate_boolean() is True
        assert ScriptedGenerator(8, [0x7F]).generate_boolean() is False

    def test_one_bit_boolean(self):
        gen = ScriptedBitGenerator([1, 0])
        assert gen.generate_boolean() is True
        assert gen.generate_boolean() is False
        assert gen.calls == 2

    def test_generate_bytes_is_big_endian_longs(self):
        gen = ScriptedGenerator(64, [0x0102030405060708, 0x090A0B0C0D0E0F10])
        assert gen.generate_bytes(10) == bytes(range(1, 11))
        assert gen.calls == 2

    def test_adapter_directly(self):
        """WidthAdapter works on any callable."""
        values = iter([0x12, 0x34])
        adapter = WidthAdapter(BitWidth.BYTE, lambda: next(values))
        assert adapter.uniform_short() == 0x1234
