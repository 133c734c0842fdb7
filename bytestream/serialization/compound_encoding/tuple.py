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
Encoding of fixed-length heterogeneous tuples, like `tuple[A, B, C]`, which is also how records are laid out.

There actually isn't a "format" per-se, the encoding of `tuple[A, B, C]` is just the encoding of A concatenated with B
concatenated with C, with no count and no separators. Variable length homogeneous tuples (`tuple[X, ...]`) are
encoded with the collection encoder instead.

>>> from bytestream.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from bytestream.serialization.encoding.bool import encode_bool, decode_bool
>>> from bytestream.serialization.encoding.bytes import decode_bytes, encode_bytes
>>> be = ByteOrder.BIG_ENDIAN
>>> se = Serializer.build_bytes_serializer()
>>> values = ('foobar', False, b'test')
>>> encode_tuple(se, values, (encode_utf8, encode_bool, encode_bytes), be)
>>> bytes(se.finalize()).hex()
'00000006666f6f626172000000000474657374'

Breakdown of the result:

    00000006666f6f626172: 'foobar'
    00: False
    0000000474657374: b'test'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000006666f6f626172000000000474657374'))
>>> decode_tuple(de, (decode_utf8, decode_bool, decode_bytes), be)
('foobar', False, b'test')
>>> de.finalize()
"""

from typing import Any

from typing_extensions import TypeVarTuple, Unpack

from bytestream.byte_order import ByteOrder
from bytestream.serialization import Deserializer, Serializer

from . import Decoder, Encoder

Ts = TypeVarTuple('Ts')


def encode_tuple(
    serializer: Serializer,
    values: tuple[Unpack[Ts]],
    encoders: tuple[Encoder[Any], ...],
    order: ByteOrder,
) -> None:
    if len(values) != len(encoders):
        raise ValueError(f'expected {len(encoders)} values, got {len(values)}')
    # mypy can't track tuple element-wise mapping yet, the length check above keeps them paired
    for value, encoder in zip(values, encoders):  # type: ignore
        encoder(serializer, value, order)


def decode_tuple(deserializer: Deserializer, decoders: tuple[Decoder[Any], ...], order: ByteOrder) -> tuple[Unpack[Ts]]:
    return tuple(decoder(deserializer, order) for decoder in decoders)
