"""
Utils package - Big-endian byte packing shared by every generator
"""
from .word_packing import (
    bytes_to_integer,
    bytes_to_long,
    bytes_to_short,
    bytes_to_unsigned,
    bytes_to_word_array,
    bytes_to_words,
    integer_to_bytes,
    long_to_bytes,
    short_to_bytes,
    unsigned_to_bytes,
    words_to_bytes,
)

__all__ = [
    'bytes_to_integer', 'bytes_to_long', 'bytes_to_short', 'bytes_to_unsigned',
    'bytes_to_word_array', 'bytes_to_words', 'integer_to_bytes', 'long_to_bytes',
    'short_to_bytes', 'unsigned_to_bytes', 'words_to_bytes',
]
