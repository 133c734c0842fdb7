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
This module implements utf-8 string encoding with a length prefix.

It works exactly like bytes-encoding but the encoded byte-sequence is utf-8 and it takes/returns a `str`. The prefix
counts bytes, not characters.

>>> be = ByteOrder.BIG_ENDIAN
>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'ab', be)  # writes 00000002 6162
>>> encode_utf8(se, 'π', be)  # writes 00000002 cf80
>>> encode_utf8(se, '😎', be)  # writes 00000004 f09f988e
>>> bytes(se.finalize()).hex()
'00000002616200000002cf8000000004f09f988e'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000002616200000002cf8000000004f09f988e'))
>>> decode_utf8(de, be)
'ab'
>>> decode_utf8(de, be)
'π'
>>> decode_utf8(de, be)
'😎'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x01\xff')
>>> try:
...     decode_utf8(de, be)
... except ValueError as e:
...     print(*e.args)
invalid utf-8 data
"""

from bytestream.byte_order import ByteOrder
from bytestream.serialization import Deserializer, Serializer
from bytestream.serialization.exceptions import BadDataError

from .bytes import decode_bytes, encode_bytes


def encode_utf8(serializer: Serializer, value: str, order: ByteOrder) -> None:
    """ Encodes a string using UTF-8 and adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, str)
    data = value.encode('utf-8')
    encode_bytes(serializer, data, order)


def decode_utf8(deserializer: Deserializer, order: ByteOrder, *, max_length: int | None = None) -> str:
    """ Decodes a UTF-8 string with a length prefix.

    This modules's docstring has more details and examples.
    """
    data = decode_bytes(deserializer, order, max_length=max_length)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise BadDataError('invalid utf-8 data') from e
