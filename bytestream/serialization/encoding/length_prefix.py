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
The length prefix used by every variable-sized encoding: a 4-byte unsigned int in the active byte order.

It holds a count of bytes (for bytes and text) or of elements (for collections and mappings).

>>> se = Serializer.build_bytes_serializer()
>>> encode_length_prefix(se, 2, ByteOrder.BIG_ENDIAN)
>>> encode_length_prefix(se, 2, ByteOrder.LITTLE_ENDIAN)
>>> bytes(se.finalize()).hex()
'0000000202000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('000000ff'))
>>> decode_length_prefix(de, ByteOrder.BIG_ENDIAN)
255

A maximum can be imposed when decoding, to avoid trusting a huge length read from the stream:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('000000ff'))
>>> decode_length_prefix(de, ByteOrder.BIG_ENDIAN, max_length=100)
Traceback (most recent call last):
...
bytestream.serialization.exceptions.TooLongError: length 255 exceeds the maximum of 100

Writers check the same maximum with `check_length` before writing anything:

>>> check_length(100, max_length=100)
>>> check_length(101, max_length=100)
Traceback (most recent call last):
...
bytestream.serialization.exceptions.TooLongError: length 101 exceeds the maximum of 100
"""

from bytestream.byte_order import ByteOrder
from bytestream.serialization import Deserializer, Serializer
from bytestream.serialization.exceptions import TooLongError

from .int import decode_int, encode_int

LENGTH_PREFIX_SIZE = 4
MAX_LENGTH = 2**(8 * LENGTH_PREFIX_SIZE) - 1


def encode_length_prefix(serializer: Serializer, length: int, order: ByteOrder) -> None:
    if length < 0:
        raise ValueError('length cannot be negative')
    if length > MAX_LENGTH:
        raise TooLongError(f'length {length} does not fit in {LENGTH_PREFIX_SIZE} bytes')
    encode_int(serializer, length, length=LENGTH_PREFIX_SIZE, signed=False, order=order)


def check_length(length: int, *, max_length: int | None) -> None:
    if max_length is not None and length > max_length:
        raise TooLongError(f'length {length} exceeds the maximum of {max_length}')


def decode_length_prefix(deserializer: Deserializer, order: ByteOrder, *, max_length: int | None = None) -> int:
    length = decode_int(deserializer, length=LENGTH_PREFIX_SIZE, signed=False, order=order)
    check_length(length, max_length=max_length)
    return length
