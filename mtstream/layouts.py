# mtstream/layouts.py
"""Byte-order aware field types for declarative record layouts.

Layouts are parsed with ``byte_swapped`` in the parse context (see
``DataReader.parse``). Integers built from these types honour it; raw
``Bytes`` blocks are never swapped.
"""
from construct import Bytes, BytesInteger, Int8ub


def _little_endian(ctx) -> bool:
    # BytesInteger reads big-endian unless told to swap
    return not ctx._params.byte_swapped


UInt8 = Int8ub
UInt16 = BytesInteger(2, signed=False, swapped=_little_endian)
UInt32 = BytesInteger(4, signed=False, swapped=_little_endian)
SInt16 = BytesInteger(2, signed=True, swapped=_little_endian)

__all__ = [
    'Bytes',
    'UInt8',
    'UInt16',
    'UInt32',
    'SInt16',
]
