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

import unittest
from typing import Any, TypeVar

from bytestream import ByteOrder
from bytestream.serialization import BadDataError, OutOfDataError, Serializer, TooLongError
from bytestream.stream_types import (
    BoolStreamType,
    BytesStreamType,
    DictStreamType,
    FrozenSetStreamType,
    Int16StreamType,
    Int32StreamType,
    ListStreamType,
    OptionalStreamType,
    SetStreamType,
    StreamType,
    StrStreamType,
    TupleStreamType,
    Uint8StreamType,
    Uint32StreamType,
)

T = TypeVar('T')


class StreamTypeTestCase(unittest.TestCase):
    def _run_test(self, stream_type: StreamType[T], value: T) -> None:
        for order in ByteOrder:
            value_bytes = stream_type.to_bytes(value, order)
            value2: T = stream_type.from_bytes(value_bytes, order)
            self.assertEqual(value, value2)

    def test_bool(self) -> None:
        self._run_test(BoolStreamType(), True)
        self._run_test(BoolStreamType(), False)

    def test_bool_nonzero_byte(self) -> None:
        self.assertIs(BoolStreamType().from_bytes(b'\xff', ByteOrder.BIG_ENDIAN), True)
        self.assertIs(BoolStreamType().from_bytes(b'\x02', ByteOrder.LITTLE_ENDIAN), True)

    def test_bool_invalid_type(self) -> None:
        with self.assertRaises(TypeError):
            BoolStreamType().to_bytes(1, ByteOrder.BIG_ENDIAN)  # type: ignore[arg-type]

    def test_str_empty(self) -> None:
        self._run_test(StrStreamType(), '')

    def test_str_valid(self) -> None:
        self._run_test(StrStreamType(), 'bytestream')

    def test_str_accents(self) -> None:
        self._run_test(StrStreamType(), 'áéíóúçãõ')

    def test_str_layout(self) -> None:
        self.assertEqual(StrStreamType().to_bytes('ab', ByteOrder.BIG_ENDIAN).hex(), '000000026162')
        self.assertEqual(StrStreamType().to_bytes('ab', ByteOrder.LITTLE_ENDIAN).hex(), '020000006162')

    def test_str_invalid_utf8(self) -> None:
        with self.assertRaises(BadDataError):
            StrStreamType().from_bytes(b'\x00\x00\x00\x01\x80', ByteOrder.BIG_ENDIAN)

    def test_str_max_length(self) -> None:
        stream_type = StrStreamType(max_length=2)
        self.assertEqual(stream_type.get_max_length(), 2)
        data = StrStreamType().to_bytes('abc', ByteOrder.BIG_ENDIAN)
        with self.assertRaises(TooLongError):
            stream_type.from_bytes(data, ByteOrder.BIG_ENDIAN)
        with self.assertRaises(TooLongError):
            stream_type.to_bytes('abc', ByteOrder.BIG_ENDIAN)

    def test_str_lone_surrogate(self) -> None:
        stream_type = ListStreamType(StrStreamType())
        with self.assertRaisesRegex(ValueError, 'invalid utf-8 text'):
            stream_type.check_value(['ok', '\ud800'])
        with self.assertRaises(ValueError):
            StrStreamType().to_bytes('\udfff', ByteOrder.LITTLE_ENDIAN)
        # the bad member is refused before its length prefix is written
        se = Serializer.build_bytes_serializer()
        with self.assertRaises(ValueError):
            stream_type.write_to(se, ['ok', '\ud800'], ByteOrder.BIG_ENDIAN)
        self.assertEqual(bytes(se.finalize()).hex(), '00000002' '000000026f6b')

    def test_bytes_empty(self) -> None:
        self._run_test(BytesStreamType(), b'')

    def test_bytes_valid(self) -> None:
        self._run_test(BytesStreamType(), b'\x01\x02')

    def test_bytes_bytearray(self) -> None:
        data = BytesStreamType().to_bytes(bytearray(b'\x01\x02'), ByteOrder.BIG_ENDIAN)
        self.assertEqual(data, b'\x00\x00\x00\x02\x01\x02')

    def test_bytes_default_max_length(self) -> None:
        # tests run with the unittests.yml settings
        self.assertEqual(BytesStreamType().get_max_length(), 65536)
        data = (65537).to_bytes(4, 'big')
        with self.assertRaises(TooLongError):
            BytesStreamType().from_bytes(data, ByteOrder.BIG_ENDIAN)

    def test_int(self) -> None:
        self._run_test(Int32StreamType(), -100)
        self._run_test(Int32StreamType(), 0)
        self._run_test(Uint32StreamType(), 4294967295)

    def test_list_empty(self) -> None:
        stream_type = ListStreamType(Int16StreamType())
        self._run_test(stream_type, [])
        self.assertEqual(stream_type.to_bytes([], ByteOrder.LITTLE_ENDIAN), b'\x00\x00\x00\x00')

    def test_list_nested(self) -> None:
        self._run_test(ListStreamType(ListStreamType(StrStreamType())), [['a', 'b'], [], ['c']])

    def test_list_rejects_str(self) -> None:
        with self.assertRaises(TypeError):
            ListStreamType(StrStreamType()).check_value('abc')  # type: ignore[arg-type]

    def test_list_deep_check(self) -> None:
        stream_type = ListStreamType(Uint8StreamType())
        with self.assertRaises(ValueError):
            stream_type.check_value([1, 2, 256])
        with self.assertRaises(TypeError):
            stream_type.check_value([1, 'a'])  # type: ignore[list-item]

    def test_write_to_checks_members_as_written(self) -> None:
        stream_type = ListStreamType(Uint8StreamType())
        se = Serializer.build_bytes_serializer()
        with self.assertRaises(ValueError):
            stream_type.write_to(se, [1, 2, 256], ByteOrder.BIG_ENDIAN)
        # the count and the first items were already written
        self.assertEqual(se.cur_pos(), 6)

    def test_list_max_length(self) -> None:
        data = ListStreamType(BoolStreamType()).to_bytes([True, True, True], ByteOrder.BIG_ENDIAN)
        with self.assertRaises(TooLongError):
            ListStreamType(BoolStreamType(), max_length=2).from_bytes(data, ByteOrder.BIG_ENDIAN)
        with self.assertRaises(TooLongError):
            ListStreamType(BoolStreamType(), max_length=2).check_value([True, True, True])

    def test_default_max_length_round_trip(self) -> None:
        # tests run with the unittests.yml settings, anything the writer accepts reads back
        stream_type = ListStreamType(BoolStreamType())
        self._run_test(stream_type, [True] * 4096)
        with self.assertRaises(TooLongError):
            stream_type.to_bytes([True] * 4097, ByteOrder.BIG_ENDIAN)
        self._run_test(BytesStreamType(), b'\x00' * 65536)
        with self.assertRaises(TooLongError):
            BytesStreamType().to_bytes(b'\x00' * 65537, ByteOrder.BIG_ENDIAN)

    def test_set(self) -> None:
        self._run_test(SetStreamType(StrStreamType()), {'a', 'b', 'c'})
        self._run_test(FrozenSetStreamType(Int32StreamType()), frozenset([1, 2, 3]))

    def test_set_requires_set(self) -> None:
        with self.assertRaises(TypeError):
            SetStreamType(Int32StreamType()).check_value([1, 2])  # type: ignore[arg-type]

    def test_set_of_unhashable(self) -> None:
        with self.assertRaises(TypeError):
            SetStreamType(ListStreamType(Int32StreamType()))  # type: ignore[type-var]

    def test_hashable(self) -> None:
        self.assertTrue(FrozenSetStreamType(Int32StreamType()).is_hashable())
        self.assertFalse(SetStreamType(Int32StreamType()).is_hashable())
        self.assertFalse(ListStreamType(Int32StreamType()).is_hashable())
        self.assertTrue(TupleStreamType(BoolStreamType(), StrStreamType()).is_hashable())
        self.assertFalse(TupleStreamType(BoolStreamType(), ListStreamType(StrStreamType())).is_hashable())
        self.assertTrue(OptionalStreamType(StrStreamType()).is_hashable())

    def test_dict(self) -> None:
        self._run_test(DictStreamType(StrStreamType(), Int32StreamType()), {'a': 1, 'b': -1})
        self._run_test(DictStreamType(Int32StreamType(), ListStreamType(BoolStreamType())), {})

    def test_dict_frozenset_keys(self) -> None:
        stream_type = DictStreamType(FrozenSetStreamType(Int32StreamType()), BoolStreamType())
        self._run_test(stream_type, {frozenset([1, 2]): True, frozenset(): False})

    def test_dict_unhashable_keys(self) -> None:
        with self.assertRaises(TypeError):
            DictStreamType(ListStreamType(Int32StreamType()), BoolStreamType())  # type: ignore[type-var]

    def test_dict_keeps_insertion_order(self) -> None:
        stream_type = DictStreamType(StrStreamType(), BoolStreamType())
        data = stream_type.to_bytes({'b': True, 'a': False}, ByteOrder.BIG_ENDIAN)
        self.assertEqual(data.hex(), '00000002' '0000000162' '01' '0000000161' '00')
        self.assertEqual(list(stream_type.from_bytes(data, ByteOrder.BIG_ENDIAN)), ['b', 'a'])

    def test_dict_sort_keys(self) -> None:
        stream_type = DictStreamType(StrStreamType(), BoolStreamType(), sort_keys=True)
        self.assertTrue(stream_type.get_sort_keys())
        data = stream_type.to_bytes({'b': True, 'a': False}, ByteOrder.BIG_ENDIAN)
        self.assertEqual(data.hex(), '00000002' '0000000161' '00' '0000000162' '01')

    def test_dict_duplicate_key_last_wins(self) -> None:
        stream_type = DictStreamType(StrStreamType(), BoolStreamType())
        data = bytes.fromhex('00000002' '0000000161' '01' '0000000161' '00')
        self.assertEqual(stream_type.from_bytes(data, ByteOrder.BIG_ENDIAN), {'a': False})

    def test_optional(self) -> None:
        stream_type = OptionalStreamType(StrStreamType())
        self._run_test(stream_type, None)
        self._run_test(stream_type, '')
        self._run_test(stream_type, 'abc')
        self.assertEqual(stream_type.to_bytes(None, ByteOrder.BIG_ENDIAN), b'\x00')

    def test_optional_checks_inner_value(self) -> None:
        with self.assertRaises(TypeError):
            OptionalStreamType(StrStreamType()).check_value(1)  # type: ignore[arg-type]

    def test_tuple(self) -> None:
        stream_type = TupleStreamType(BoolStreamType(), Uint32StreamType())
        self._run_test(stream_type, (True, 1))
        self.assertEqual(len(stream_type.to_bytes((True, 1), ByteOrder.BIG_ENDIAN)), 5)

    def test_tuple_wrong_size(self) -> None:
        stream_type = TupleStreamType(BoolStreamType(), Uint32StreamType())
        with self.assertRaises(TypeError):
            stream_type.check_value((True,))
        with self.assertRaises(TypeError):
            stream_type.check_value([True, 1])  # type: ignore[arg-type]

    def test_trailing_data(self) -> None:
        with self.assertRaises(BadDataError):
            Uint8StreamType().from_bytes(b'\x01\x02', ByteOrder.BIG_ENDIAN)

    def test_out_of_data(self) -> None:
        with self.assertRaises(OutOfDataError):
            Uint32StreamType().from_bytes(b'\x01\x02', ByteOrder.BIG_ENDIAN)
        # also an EOFError, for code that doesn't know about this package's errors
        with self.assertRaises(EOFError):
            ListStreamType(BoolStreamType()).from_bytes(b'\x00\x00\x00\x02\x01', ByteOrder.BIG_ENDIAN)

    def test_nested_layout(self) -> None:
        stream_type: StreamType[Any] = DictStreamType(StrStreamType(), ListStreamType(Int16StreamType()))
        data = stream_type.to_bytes({'a': [1, -1]}, ByteOrder.BIG_ENDIAN)
        self.assertEqual(data.hex(), '00000001' '0000000161' '00000002' '0001' 'ffff')

    def test_to_bytes_checks_before_writing(self) -> None:
        stream_type = ListStreamType(Uint8StreamType())
        with self.assertRaises(ValueError):
            stream_type.to_bytes([1, 2, 256], ByteOrder.BIG_ENDIAN)
