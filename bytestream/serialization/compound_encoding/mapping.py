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
Encoding a mapping is equivalent to encoding a collection of 2-tuples.

Layout: [N: 4-byte unsigned][key_0][value_0]...[key_N-1][value_N-1]

Entries are written in the mapping's iteration order (insertion order for a `dict`), so two equal dicts built in a
different order produce different bytes. With `sort_keys=True` the entries are written sorted by key instead, which
makes the output canonical, as long as the keys are comparable.

>>> from bytestream.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from bytestream.serialization.encoding.bool import encode_bool, decode_bool
>>> be = ByteOrder.BIG_ENDIAN
>>> se = Serializer.build_bytes_serializer()
>>> value = {
...     'foo': False,
...     'bar': True,
... }
>>> encode_mapping(se, value, encode_utf8, encode_bool, be)
>>> bytes(se.finalize()).hex()
'0000000200000003666f6f000000000362617201'

Breakdown of the result:

    00000002: 2, the total length
    00000003666f6f: 'foo' (with length prefix)
    00: False
    00000003626172: 'bar' (with length prefix)
    01: True

>>> se = Serializer.build_bytes_serializer()
>>> encode_mapping(se, value, encode_utf8, encode_bool, be, sort_keys=True)
>>> bytes(se.finalize()).hex()
'00000002000000036261720100000003666f6f00'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000200000003666f6f000000000362617201'))
>>> decode_mapping(de, decode_utf8, decode_bool, dict, be)
{'foo': False, 'bar': True}
>>> de.finalize()

When the same key shows up more than once in the stream the last entry wins, when the builder is a `dict`:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000200000003666f6f0100000003666f6f00'))
>>> decode_mapping(de, decode_utf8, decode_bool, dict, be)
{'foo': False}
>>> de.finalize()
"""

from collections.abc import Iterable, Mapping
from typing import Any, Callable, TypeVar

from bytestream.byte_order import ByteOrder
from bytestream.serialization import Deserializer, Serializer
from bytestream.serialization.encoding.length_prefix import decode_length_prefix, encode_length_prefix

from . import Decoder, Encoder

KT = TypeVar('KT')
VT = TypeVar('VT')
R = TypeVar('R', bound=Mapping)


def _entry_key(entry: tuple[Any, Any]) -> Any:
    return entry[0]


def encode_mapping(
    serializer: Serializer,
    values_mapping: Mapping[KT, VT],
    key_encoder: Encoder[KT],
    value_encoder: Encoder[VT],
    order: ByteOrder,
    *,
    sort_keys: bool = False,
) -> None:
    entries: Iterable[tuple[KT, VT]] = values_mapping.items()
    if sort_keys:
        entries = sorted(entries, key=_entry_key)
    encode_length_prefix(serializer, len(values_mapping), order)
    for key, value in entries:
        key_encoder(serializer, key, order)
        value_encoder(serializer, value, order)


def decode_mapping(
    deserializer: Deserializer,
    key_decoder: Decoder[KT],
    value_decoder: Decoder[VT],
    mapping_builder: Callable[[Iterable[tuple[KT, VT]]], R],
    order: ByteOrder,
    *,
    max_length: int | None = None,
) -> R:
    size = decode_length_prefix(deserializer, order, max_length=max_length)
    return mapping_builder(
        (key_decoder(deserializer, order), value_decoder(deserializer, order))
        for _ in range(size)
    )
