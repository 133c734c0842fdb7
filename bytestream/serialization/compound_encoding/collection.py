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
A collection is basically any value that has a known size and is iterable.

Layout: [N: 4-byte unsigned][value_0]...[value_N-1]

>>> from bytestream.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> be = ByteOrder.BIG_ENDIAN
>>> se = Serializer.build_bytes_serializer()
>>> value = ['foobar', 'π', 'test']
>>> encode_collection(se, value, encode_utf8, be)
>>> bytes(se.finalize()).hex()
'0000000300000006666f6f62617200000002cf800000000474657374'

Breakdown of the result:

    00000003: 3, the total length
    00000006666f6f626172: 'foobar' (with length prefix)
    00000002cf80: 'π' (with length prefix)
    0000000474657374: 'test' (with length prefix)

When decoding, the builder can be any compatible collection, in the previous example a `list` was encoded, but when
decoding a `tuple` could be used, it only matters that the collection can be initialized with an `Iterable[T]`.

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000300000006666f6f62617200000002cf800000000474657374'))
>>> decode_collection(de, decode_utf8, tuple, be)
('foobar', 'π', 'test')
>>> de.finalize()

An empty collection is just the zero count:

>>> se = Serializer.build_bytes_serializer()
>>> encode_collection(se, [], encode_utf8, be)
>>> bytes(se.finalize())
b'\x00\x00\x00\x00'
"""

from collections.abc import Collection, Iterable
from typing import Callable, TypeVar

from bytestream.byte_order import ByteOrder
from bytestream.serialization import Deserializer, Serializer
from bytestream.serialization.encoding.length_prefix import decode_length_prefix, encode_length_prefix

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


def encode_collection(serializer: Serializer, values: Collection[T], encoder: Encoder[T], order: ByteOrder) -> None:
    encode_length_prefix(serializer, len(values), order)
    for value in values:
        encoder(serializer, value, order)


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    order: ByteOrder,
    *,
    max_length: int | None = None,
) -> R:
    length = decode_length_prefix(deserializer, order, max_length=max_length)
    return builder(decoder(deserializer, order) for _ in range(length))
