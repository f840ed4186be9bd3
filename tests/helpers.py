"""
Byte builders for test records

Every builder returns the record body that follows the tag and revision.
``big`` selects Mac (big-endian) or Windows (little-endian) byte order.
"""

import io
import struct
from typing import List, Sequence

from mtstream.reader import DataReader, SerializationProperties


def is_big(sp: SerializationProperties) -> bool:
    return sp.is_byte_swapped


def pack(fmt: str, *values, big: bool = True) -> bytes:
    """Pack values with the given byte order"""
    return struct.pack(('>' if big else '<') + fmt, *values)


def record(tag: int, revision: int, body: bytes, big: bool = True) -> bytes:
    """Prefix a body with its tag and revision"""
    return pack('IH', tag, revision, big=big) + body


def make_reader(data: bytes, sp: SerializationProperties) -> DataReader:
    return DataReader(io.BytesIO(data), sp.is_byte_swapped)


def decode(obj, body: bytes, revision: int, sp: SerializationProperties) -> DataReader:
    """Load ``obj`` from ``body`` and return the reader for position checks"""
    reader = make_reader(body, sp)
    obj.load(reader, revision, sp)
    return reader


def rect(top: int, left: int, bottom: int, right: int, big: bool = True) -> bytes:
    return pack('hhhh', top, left, bottom, right, big=big)


def event(event_id: int, event_info: int, big: bool = True) -> bytes:
    return pack('II', event_id, event_info, big=big)


# Stream bookkeeping

def stream_header(name: bytes = b'Project.mfw', big: bool = True, size: int = 38) -> bytes:
    return (pack('II', 0, size, big=big)
            + name.ljust(16, b'\0')
            + b'\x00\x07'
            + b'\xde\xad\xbe\xef'
            + pack('H', 0, big=big))


def unknown_3ec(big: bool = True, size: int = 24) -> bytes:
    return (pack('II', 0, size, big=big)
            + b'\x01\x02'
            + pack('IHH', 0x1234, 5, 6, big=big))


def unknown_17(big: bool = True, size: int = 20) -> bytes:
    return pack('II', 0, size, big=big) + b'\x01\x02\x03\x04\x05\x06'


def unknown_19(big: bool = True, size: int = 16) -> bytes:
    return pack('II', 0, size, big=big) + b'\xab\xcd'


def debris(marker: int = 0xDEBBEEFD, size: int = 14, big: bool = True) -> bytes:
    return pack('II', marker, size, big=big)


def end_of_stream(big: bool = True) -> bytes:
    return pack('II', 0, 0, big=big)


# Label map

def label_tree(name: bytes, label_id: int, children: Sequence[bytes] = (),
               is_group: int = 0, flags: int = 0, big: bool = True) -> bytes:
    return (pack('IIIII', len(name), is_group, label_id, 0, flags, big=big)
            + name
            + pack('I', len(children), big=big)
            + b''.join(children))


def super_group(name: bytes, tree: bytes, big: bool = True) -> bytes:
    return pack('III', len(name), 0, 0, big=big) + name + tree


def label_map(groups: Sequence[bytes], next_id: int = 100,
              constant: int = 0x16, big: bool = True) -> bytes:
    return pack('IIII', 0, constant, len(groups), next_id, big=big) + b''.join(groups)


# Asset catalog

def asset_info(name: bytes, asset_type: int, flags1: int = 0, flags2: int = 0,
               file_position: int = 0, with_flags2: bool = True, big: bool = True) -> bytes:
    data = pack('IHHIII', flags1, len(name), 0, 0, file_position, asset_type, big=big)
    if with_flags2:
        data += pack('I', flags2, big=big)
    return data + name


def asset_catalog(entries: List[bytes], names: List[bytes], big: bool = True,
                  name_total: int = None) -> bytes:
    if name_total is None:
        name_total = 22 + sum(len(n) for n in names)
    return (pack('II', 0, name_total, big=big)
            + b'\0' * 4
            + pack('I', len(entries), big=big)
            + b''.join(entries))


# Structural definitions

def _structural_header(size: int, big: bool) -> bytes:
    return pack('III', 0x16, size, 0, big=big)


def project_def(name: bytes = b'Project', flags: int = 0, big: bool = True,
                size: int = None) -> bytes:
    if size is None:
        size = 24 + len(name)
    return (_structural_header(size, big)
            + pack('IH', flags, len(name), big=big)
            + name)


def section_def(name: bytes = b'Section', section_id: int = 3, segment_id: int = 1,
                flags: int = 0, big: bool = True, size: int = None) -> bytes:
    if size is None:
        size = 32 + len(name)
    return (_structural_header(size, big)
            + pack('HIHHI', len(name), flags, 0, section_id, segment_id, big=big)
            + name)


def subsection_def(name: bytes = b'Subsection', section_id: int = 4, flags: int = 0,
                   big: bool = True, size: int = None) -> bytes:
    if size is None:
        size = 26 + len(name)
    return (_structural_header(size, big)
            + pack('HIH', len(name), flags, section_id, big=big)
            + name)


def scene_def(name: bytes = b'Scene', section_id: int = 5, stream_locator: int = 0x10000002,
              flags: int = 0, big: bool = True, size: int = None) -> bytes:
    if size is None:
        size = 52 + len(name)
    return (_structural_header(size, big)
            + pack('HI', len(name), flags, big=big)
            + b'\0\0'
            + pack('H', section_id, big=big)
            + rect(0, 0, 480, 640, big=big)
            + rect(10, 20, 30, 40, big=big)
            + pack('I', stream_locator, big=big)
            + b'\0' * 4
            + name)


def image_def(name: bytes = b'Image', image_asset_id: int = 9, flags: int = 0,
              big: bool = True, size: int = None) -> bytes:
    if size is None:
        size = 56 + len(name)
    return (_structural_header(size, big)
            + pack('HI', len(name), flags, big=big)
            + b'\0\0'
            + pack('H', 6, big=big)
            + rect(0, 0, 100, 200, big=big)
            + rect(0, 0, 100, 200, big=big)
            + pack('II', image_asset_id, 1, big=big)
            + b'\0' * 4
            + name)


def movie_def(name: bytes = b'Movie', asset_id: int = 12, volume: int = 100,
              animation_flags: int = 0, big: bool = True, size: int = None) -> bytes:
    if size is None:
        size = 120 + len(name)
    return (_structural_header(size, big)
            + pack('HIH', len(name), 0, 2, big=big)
            + b'\0' * 44
            + pack('H', 7, big=big)
            + b'\0\0'
            + rect(0, 0, 240, 320, big=big)
            + rect(0, 0, 240, 320, big=big)
            + pack('IIHI', asset_id, 0, volume, animation_flags, big=big)
            + b'\0' * 8
            + pack('I', 1, big=big)
            + b'\0' * 4
            + name)


def mtoon_def(name: bytes = b'Toon', rate_times_10000: int = 150000,
              animation_flags: int = 0, structural_flags: int = 0,
              big: bool = True, size: int = None) -> bytes:
    if size is None:
        size = 68 + len(name)
    return (_structural_header(size, big)
            + pack('HI', len(name), structural_flags, big=big)
            + b'\0\0'
            + pack('I', animation_flags, big=big)
            + b'\0' * 4
            + pack('H', 8, big=big)
            + rect(0, 0, 64, 64, big=big)
            + rect(0, 0, 64, 64, big=big)
            + pack('IIII', 0, rate_times_10000, 1, 0, big=big)
            + name)


# Modifiers

def behavior(name: bytes = b'Behavior', num_children: int = 2, big: bool = True,
             size: int = None) -> bytes:
    if size is None:
        size = 60 + len(name)
    return (pack('II', 0, size, big=big)
            + b'\0\0'
            + pack('IIHI', 0, 0, 0, 0, big=big)
            + pack('hh', 12, 34, big=big)
            + pack('HHI', len(name), num_children, 0, big=big)
            + event(0x5dc, 0, big=big)
            + event(0x5dd, 1, big=big)
            + b'\0\0'
            + name)


def plug_in_modifier(name: bytes = b'Point Var', private: bytes = b'\x01\x02\x03\x04',
                     plugin: bytes = b'pointvar', big: bool = True,
                     weird_size: int = None) -> bytes:
    if weird_size is None:
        weird_size = len(name) + len(private)
        if big:
            weird_size += 52
    return (plugin.ljust(16, b'\0')
            + pack('II', 0, weird_size, big=big)
            + b'\0' * 20
            + pack('H', len(name), big=big)
            + name
            + private)


def cursor_modifier(name: bytes = b'Cursor', cursor_index: int = 10,
                    big: bool = True, size: int = None) -> bytes:
    mac_part = b''
    if big:
        mac_part = event(0x3e8, 0, big=big) + pack('IHI', 0, 0, cursor_index, big=big)
    if size is None:
        size = 34 + len(name) + len(mac_part)
    return (pack('IIIIHI', 0, size, 0, 0, 0, 0, big=big)
            + b'\0' * 4
            + pack('H', len(name), big=big)
            + name
            + mac_part)


# Assets

def color_table(asset_id: int = 3, big: bool = True, size: int = 1562) -> bytes:
    colors = b''.join(pack('HHH', i << 8, 0xffff - (i << 8), 0x8080, big=big)
                      for i in range(256))
    return (pack('II', 0, size, big=big)
            + b'\0' * 4
            + pack('II', asset_id, 0, big=big)
            + colors)


def audio_asset(asset_id: int = 4, sample_rate: int = 22050, encoding: int = 0,
                big: bool = True) -> bytes:
    tail = b'\x11' * 42 if big else b'\x22' * 33
    return (pack('II', 0, 0x1000, big=big)
            + b'\0' * 4
            + pack('I', asset_id, big=big)
            + b'\0' * 20
            + pack('HBBB', sample_rate, 8, encoding, 1, big=big)
            + b'\0' * 4
            + pack('HII', sample_rate, 0x2000, 0x400, big=big)
            + tail)


def movie_asset(asset_id: int = 5, big: bool = True) -> bytes:
    tail = b'\x33' * 50 if big else b'\x44' * 96
    return (pack('II', 0, 0x3000, big=big)
            + b'\0' * 4
            + pack('IIII', asset_id, 0x4000, 0x5000, 0x600, big=big)
            + tail)


def placeholder(size: int = 20, big: bool = True) -> bytes:
    return pack('II', 0, size, big=big) + b'\x5a' * max(size - 14, 0)
