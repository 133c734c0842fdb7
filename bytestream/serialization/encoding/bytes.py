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
This modules implements encoding of byte sequence by prefixing it with the length of the sequence encoded as a 4-byte
unsigned integer in the given byte order.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test', ByteOrder.BIG_ENDIAN)  # will prepend 00000004 before writing b'test'
>>> bytes(se.finalize()).hex()
'0000000474657374'

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test', ByteOrder.LITTLE_ENDIAN)  # only the prefix changes
>>> bytes(se.finalize()).hex()
'0400000074657374'

>>> de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x04testfoo')
>>> decode_bytes(de, ByteOrder.BIG_ENDIAN)
b'test'
>>> try:
...     de.finalize()
... except ValueError as e:
...     print(*e.args)
trailing data

>>> de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x04tes')
>>> try:
...     decode_bytes(de, ByteOrder.BIG_ENDIAN)
... except EOFError as e:
...     print(*e.args)
not enough bytes to read
"""

from bytestream.byte_order import ByteOrder
from bytestream.serialization import Deserializer, Serializer
from bytestream.serialization.types import Buffer

from .length_prefix import decode_length_prefix, encode_length_prefix


def encode_bytes(serializer: Serializer, data: Buffer, order: ByteOrder) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    This modules's docstring has more details and examples.
    """
    view = memoryview(data)
    encode_length_prefix(serializer, view.nbytes, order)
    serializer.write_bytes(view)


def decode_bytes(deserializer: Deserializer, order: ByteOrder, *, max_length: int | None = None) -> bytes:
    """ Decodes a byte-sequence with a length prefix.

    This modules's docstring has more details and examples.
    """
    size = decode_length_prefix(deserializer, order, max_length=max_length)
    return bytes(deserializer.read_bytes(size))
