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

from dataclasses import dataclass
from typing import Optional

import pytest
from typing_extensions import Self

from bytestream import ByteOrder
from bytestream.serialization import BadDataError, Deserializer, OutOfDataError, Serializer
from bytestream.serialization.encoding.utf8 import decode_utf8, encode_utf8
from bytestream.stream_types import (
    BoolStreamType,
    DictStreamType,
    ListStreamType,
    OptionalStreamType,
    StrStreamType,
    Uint32StreamType,
)
from bytestream.streamable import Streamable, StreamableStreamType

_bool = BoolStreamType()
_u32 = Uint32StreamType()


@dataclass(frozen=True)
class Foo(Streamable):
    a: bool
    b: int

    def write_to(self, serializer: Serializer, order: ByteOrder, /) -> None:
        _bool.write_to(serializer, self.a, order)
        _u32.write_to(serializer, self.b, order)

    @classmethod
    def read_from(cls, deserializer: Deserializer, order: ByteOrder, /) -> Self:
        a = _bool.read_from(deserializer, order)
        b = _u32.read_from(deserializer, order)
        return cls(a, b)


_foos = ListStreamType(Foo.stream_type())
_note = OptionalStreamType(StrStreamType())


@dataclass
class Bar(Streamable):
    name: str
    head: Foo
    rest: list[Foo]
    note: Optional[str] = None

    def write_to(self, serializer: Serializer, order: ByteOrder, /) -> None:
        encode_utf8(serializer, self.name, order)
        self.head.write_to(serializer, order)
        _foos.write_to(serializer, self.rest, order)
        _note.write_to(serializer, self.note, order)

    @classmethod
    def read_from(cls, deserializer: Deserializer, order: ByteOrder, /) -> Self:
        name = decode_utf8(deserializer, order)
        head = Foo.read_from(deserializer, order)
        rest = list(_foos.read_from(deserializer, order))
        note = _note.read_from(deserializer, order)
        return cls(name, head, rest, note)


def test_record_layout() -> None:
    foo = Foo(True, 0x01020304)
    assert foo.to_bytes(ByteOrder.BIG_ENDIAN).hex() == '0101020304'
    assert foo.to_bytes(ByteOrder.LITTLE_ENDIAN).hex() == '0104030201'
    assert len(foo.to_bytes(ByteOrder.LITTLE_ENDIAN)) == 5


@pytest.mark.parametrize('order', list(ByteOrder))
def test_record_round_trip(order: ByteOrder) -> None:
    foo = Foo(False, 4294967295)
    assert Foo.from_bytes(foo.to_bytes(order), order) == foo


def test_record_nonzero_bool() -> None:
    assert Foo.from_bytes(bytes.fromhex('ff00000001'), ByteOrder.BIG_ENDIAN) == Foo(True, 1)


def test_record_trailing_data() -> None:
    with pytest.raises(BadDataError):
        Foo.from_bytes(bytes.fromhex('010000000100'), ByteOrder.BIG_ENDIAN)


def test_record_out_of_data() -> None:
    with pytest.raises(OutOfDataError):
        Foo.from_bytes(bytes.fromhex('01000000'), ByteOrder.BIG_ENDIAN)


def test_record_invalid_field() -> None:
    with pytest.raises(ValueError):
        Foo(True, -1).to_bytes(ByteOrder.BIG_ENDIAN)


@pytest.mark.parametrize('order', list(ByteOrder))
def test_nested_records(order: ByteOrder) -> None:
    bar = Bar('bar', Foo(True, 1), [Foo(False, 2), Foo(True, 3)], note='π')
    data = bar.to_bytes(order)
    assert Bar.from_bytes(data, order) == bar

    bar = Bar('', Foo(False, 0), [])
    assert Bar.from_bytes(bar.to_bytes(order), order) == bar


def test_nested_record_layout() -> None:
    bar = Bar('x', Foo(True, 1), [Foo(False, 2)])
    expected = (
        '0000000178'  # name
        '0100000001'  # head
        '00000001' '0000000002'  # rest
        '00'  # note
    )
    assert bar.to_bytes(ByteOrder.BIG_ENDIAN).hex() == expected


def test_consecutive_records_in_one_stream() -> None:
    se = Serializer.build_bytes_serializer()
    Foo(True, 1).write_to(se, ByteOrder.LITTLE_ENDIAN)
    Foo(False, 2).write_to(se, ByteOrder.LITTLE_ENDIAN)
    de = Deserializer.build_bytes_deserializer(se.finalize())
    assert Foo.read_from(de, ByteOrder.LITTLE_ENDIAN) == Foo(True, 1)
    assert Foo.read_from(de, ByteOrder.LITTLE_ENDIAN) == Foo(False, 2)
    de.finalize()


def test_stream_type() -> None:
    stream_type = Foo.stream_type()
    assert isinstance(stream_type, StreamableStreamType)
    assert stream_type.is_hashable()
    assert not Bar.stream_type().is_hashable()

    with pytest.raises(TypeError):
        stream_type.check_value(Bar('', Foo(True, 1), []))  # type: ignore[arg-type]


def test_records_as_dict_values() -> None:
    stream_type = DictStreamType(StrStreamType(), Foo.stream_type())
    value = {'x': Foo(True, 1), 'y': Foo(False, 2)}
    data = stream_type.to_bytes(value, ByteOrder.LITTLE_ENDIAN)
    assert stream_type.from_bytes(data, ByteOrder.LITTLE_ENDIAN) == value


def test_records_are_abstract() -> None:
    with pytest.raises(TypeError):
        Streamable()  # type: ignore[abstract]
