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

import pytest

from bytestream import ByteOrder
from bytestream.serialization import Deserializer, OutOfDataError, Serializer, TooLongError
from bytestream.serialization.compound_encoding.collection import decode_collection, encode_collection
from bytestream.serialization.compound_encoding.mapping import decode_mapping, encode_mapping
from bytestream.serialization.compound_encoding.optional import decode_optional, encode_optional
from bytestream.serialization.compound_encoding.tuple import decode_tuple, encode_tuple
from bytestream.serialization.encoding.bool import decode_bool, encode_bool
from bytestream.serialization.encoding.utf8 import decode_utf8, encode_utf8

BE = ByteOrder.BIG_ENDIAN
LE = ByteOrder.LITTLE_ENDIAN


def test_empty_collection_consumes_exactly_the_count() -> None:
    se = Serializer.build_bytes_serializer()
    encode_collection(se, [], encode_utf8, LE)
    data = bytes(se.finalize())
    assert data == b'\x00\x00\x00\x00'

    de = Deserializer.build_bytes_deserializer(data + b'\xaa')
    assert decode_collection(de, decode_utf8, list, LE) == []
    assert de.read_byte() == 0xaa
    de.finalize()


def test_collection_count_uses_the_order() -> None:
    se = Serializer.build_bytes_serializer()
    encode_collection(se, [True, False, True], encode_bool, LE)
    assert bytes(se.finalize()).hex() == '03000000' '010001'


def test_collection_max_length() -> None:
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000003010001'))
    with pytest.raises(TooLongError):
        decode_collection(de, decode_bool, list, BE, max_length=2)


def test_collection_missing_items() -> None:
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('000000030100'))
    with pytest.raises(OutOfDataError):
        decode_collection(de, decode_bool, list, BE)


def test_mapping_write_order() -> None:
    value = {'b': True, 'a': False}

    se = Serializer.build_bytes_serializer()
    encode_mapping(se, value, encode_utf8, encode_bool, BE)
    assert bytes(se.finalize()).hex() == '00000002' '0000000162' '01' '0000000161' '00'

    se = Serializer.build_bytes_serializer()
    encode_mapping(se, value, encode_utf8, encode_bool, BE, sort_keys=True)
    assert bytes(se.finalize()).hex() == '00000002' '0000000161' '00' '0000000162' '01'


def test_mapping_duplicate_key_last_wins() -> None:
    data = bytes.fromhex('00000002' '0000000161' '01' '0000000161' '00')
    de = Deserializer.build_bytes_deserializer(data)
    assert decode_mapping(de, decode_utf8, decode_bool, dict, BE) == {'a': False}
    de.finalize()


def test_mapping_max_length() -> None:
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000002'))
    with pytest.raises(TooLongError):
        decode_mapping(de, decode_utf8, decode_bool, dict, BE, max_length=1)


def test_optional() -> None:
    se = Serializer.build_bytes_serializer()
    encode_optional(se, None, encode_bool, BE)
    encode_optional(se, False, encode_bool, BE)
    data = bytes(se.finalize())
    assert data == b'\x00\x01\x00'

    de = Deserializer.build_bytes_deserializer(data)
    assert decode_optional(de, decode_bool, BE) is None
    assert decode_optional(de, decode_bool, BE) is False
    de.finalize()


def test_tuple_has_no_prefix() -> None:
    se = Serializer.build_bytes_serializer()
    encode_tuple(se, (True, 'x'), (encode_bool, encode_utf8), LE)
    data = bytes(se.finalize())
    assert data == b'\x01\x01\x00\x00\x00x'

    de = Deserializer.build_bytes_deserializer(data)
    assert decode_tuple(de, (decode_bool, decode_utf8), LE) == (True, 'x')
    de.finalize()


def test_tuple_size_mismatch() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        encode_tuple(se, (True,), (encode_bool, encode_utf8), LE)
    assert se.cur_pos() == 0
