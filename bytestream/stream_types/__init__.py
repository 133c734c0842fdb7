#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

"""
Builtin implementations of the stream contract, one `StreamType` class per kind of value:

- `bool`: `BoolStreamType()`, 1 byte
- `int`: `Int8StreamType()`, `Uint8StreamType()`, ..., `Int64StreamType()`, `Uint64StreamType()`, 1/2/4/8 bytes
- `bytes`: `BytesStreamType()`, 4-byte length and the bytes
- `str`: `StrStreamType()`, 4-byte length and the utf-8 bytes
- `list[T]`, `set[T]`, `frozenset[T]`: `ListStreamType(t)`, `SetStreamType(t)`, `FrozenSetStreamType(t)`, 4-byte count
  and the items
- `dict[K, V]`: `DictStreamType(k, v)`, 4-byte count and the key/value pairs
- `Optional[T]`: `OptionalStreamType(t)`, 1-byte flag and the value when present
- `tuple[A, B, C]`: `TupleStreamType(a, b, c)`, the members concatenated

All multi-byte integers, including the length prefixes, use the byte order passed to each call.

>>> from bytestream.byte_order import ByteOrder
>>> Uint32StreamType().to_bytes(0x01020304, ByteOrder.BIG_ENDIAN).hex()
'01020304'
>>> Uint32StreamType().to_bytes(0x01020304, ByteOrder.LITTLE_ENDIAN).hex()
'04030201'
>>> words = DictStreamType(StrStreamType(), ListStreamType(Int16StreamType()))
>>> data = words.to_bytes({'a': [1, -1]}, ByteOrder.LITTLE_ENDIAN)
>>> data.hex()
'010000000100000061020000000100ffff'
>>> words.from_bytes(data, ByteOrder.LITTLE_ENDIAN)
{'a': [1, -1]}
"""

from bytestream.stream_types.bool_stream_type import BoolStreamType
from bytestream.stream_types.bytes_stream_type import BytesStreamType
from bytestream.stream_types.collection_stream_type import FrozenSetStreamType, ListStreamType, SetStreamType
from bytestream.stream_types.map_stream_type import DictStreamType
from bytestream.stream_types.optional_stream_type import OptionalStreamType
from bytestream.stream_types.sized_int_stream_type import (
    Int8StreamType,
    Int16StreamType,
    Int32StreamType,
    Int64StreamType,
    Uint8StreamType,
    Uint16StreamType,
    Uint32StreamType,
    Uint64StreamType,
)
from bytestream.stream_types.str_stream_type import StrStreamType
from bytestream.stream_types.stream_type import StreamType
from bytestream.stream_types.tuple_stream_type import TupleStreamType

__all__ = [
    'BoolStreamType',
    'BytesStreamType',
    'DictStreamType',
    'FrozenSetStreamType',
    'Int8StreamType',
    'Int16StreamType',
    'Int32StreamType',
    'Int64StreamType',
    'ListStreamType',
    'OptionalStreamType',
    'SetStreamType',
    'StrStreamType',
    'StreamType',
    'TupleStreamType',
    'Uint8StreamType',
    'Uint16StreamType',
    'Uint32StreamType',
    'Uint64StreamType',
]
