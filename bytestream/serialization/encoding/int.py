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
This module implements encoding of integers with a fixed size, the size and signedness are parametrized.

The encoding is the two's complement representation of the number using exactly `length` bytes, in the given byte
order.

>>> be, le = ByteOrder.BIG_ENDIAN, ByteOrder.LITTLE_ENDIAN
>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 0, length=1, signed=True, order=be)  # writes 00
>>> encode_int(se, 255, length=1, signed=False, order=be)  # writes ff
>>> encode_int(se, 1234, length=2, signed=True, order=be)  # writes 04d2
>>> encode_int(se, -1234, length=2, signed=True, order=le)  # writes 2efb
>>> encode_int(se, 0x01020304, length=4, signed=False, order=le)  # writes 04030201
>>> bytes(se.finalize()).hex()
'00ff04d22efb04030201'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00ff04d22efb04030201'))
>>> decode_int(de, length=1, signed=True, order=be)  # reads 00
0
>>> decode_int(de, length=1, signed=False, order=be)  # reads ff
255
>>> decode_int(de, length=2, signed=True, order=be)  # reads 04d2
1234
>>> decode_int(de, length=2, signed=True, order=le)  # reads 2efb
-1234
>>> hex(decode_int(de, length=4, signed=False, order=le))  # reads 04030201
'0x1020304'
>>> de.finalize()

Values that don't fit are rejected before anything is written:

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 256, length=1, signed=False, order=be)
Traceback (most recent call last):
...
ValueError: too big to encode
>>> se.cur_pos()
0
"""

from bytestream.byte_order import ByteOrder
from bytestream.serialization import Deserializer, Serializer


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool, order: ByteOrder) -> None:
    """ Encode an int using the given byte-length, signedness and byte order.

    This modules's docstring has more details and examples.
    """
    try:
        data = int.to_bytes(number, length, byteorder=order.value, signed=signed)
    except OverflowError:
        raise ValueError('too big to encode')
    serializer.write_bytes(data)


def decode_int(deserializer: Deserializer, *, length: int, signed: bool, order: ByteOrder) -> int:
    """ Decode an int using the given byte-length, signedness and byte order.

    This modules's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder=order.value, signed=signed)
