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

r"""
This module implements encoding a boolean value using 1 byte.

The format is trivial and extremely simple:

- `False` maps to `b'\x00'`
- `True` maps to `b'\x01'`
- when decoding, any byte other than `b'\x00'` is `True`

The byte order is accepted and ignored.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bool(se, False, ByteOrder.BIG_ENDIAN)
>>> encode_bool(se, True, ByteOrder.BIG_ENDIAN)
>>> bytes(se.finalize())
b'\x00\x01'

>>> de = Deserializer.build_bytes_deserializer(b'\x00\x01\xff')
>>> decode_bool(de, ByteOrder.BIG_ENDIAN)
False
>>> decode_bool(de, ByteOrder.BIG_ENDIAN)
True
>>> decode_bool(de, ByteOrder.LITTLE_ENDIAN)
True
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x01test')
>>> decode_bool(de, ByteOrder.BIG_ENDIAN)
True
>>> bytes(de.read_all())
b'test'
"""

from bytestream.byte_order import ByteOrder
from bytestream.serialization import Deserializer, Serializer


def encode_bool(serializer: Serializer, value: bool, order: ByteOrder) -> None:
    """ Encodes a boolean value using 1 byte.
    """
    assert isinstance(value, bool)
    serializer.write_byte(0x01 if value else 0x00)


def decode_bool(deserializer: Deserializer, order: ByteOrder) -> bool:
    """ Decodes a boolean value from 1 byte.
    """
    return deserializer.read_byte() != 0x00
