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
User-defined records that know how to stream themselves.

A record subclasses `Streamable`, writes its fields one after the other with the stream types (or encoding functions)
of each field, and reads them back in the same order. There are no markers or field names in the output, the layout
is only what the record writes.

>>> from dataclasses import dataclass
>>> from bytestream.stream_types import BoolStreamType, Uint32StreamType
>>> @dataclass(frozen=True)
... class Foo(Streamable):
...     a: bool
...     b: int
...
...     def write_to(self, serializer, order, /):
...         BoolStreamType().write_to(serializer, self.a, order)
...         Uint32StreamType().write_to(serializer, self.b, order)
...
...     @classmethod
...     def read_from(cls, deserializer, order, /):
...         a = BoolStreamType().read_from(deserializer, order)
...         b = Uint32StreamType().read_from(deserializer, order)
...         return cls(a, b)
>>> data = Foo(True, 0x01020304).to_bytes(ByteOrder.LITTLE_ENDIAN)
>>> data.hex()
'0104030201'
>>> Foo.from_bytes(data, ByteOrder.LITTLE_ENDIAN)
Foo(a=True, b=16909060)
>>> Foo.from_bytes(data + b'\x00', ByteOrder.LITTLE_ENDIAN)
Traceback (most recent call last):
...
bytestream.serialization.exceptions.BadDataError: trailing data

Records nest through `stream_type()`, which can be used as a member of any compound stream type:

>>> from bytestream.stream_types import ListStreamType
>>> ListStreamType(Foo.stream_type()).to_bytes([Foo(False, 1)], ByteOrder.BIG_ENDIAN).hex()
'000000010000000001'
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, final

from typing_extensions import Self, override

from bytestream.byte_order import ByteOrder
from bytestream.serialization import Deserializer, Serializer
from bytestream.serialization.types import Buffer
from bytestream.stream_types.stream_type import StreamType

S = TypeVar('S', bound='Streamable')


class Streamable(ABC):
    """Base class for records that can be written to a Serializer and read from a Deserializer."""

    __slots__ = ()

    @abstractmethod
    def write_to(self, serializer: Serializer, order: ByteOrder, /) -> None:
        """Write all fields in declaration order, using the given byte order for each of them."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def read_from(cls, deserializer: Deserializer, order: ByteOrder, /) -> Self:
        """Read all fields in the same order `write_to` writes them and build a new instance."""
        raise NotImplementedError

    @final
    def to_bytes(self, order: ByteOrder) -> bytes:
        serializer = Serializer.build_bytes_serializer()
        self.write_to(serializer, order)
        return bytes(serializer.finalize())

    @final
    @classmethod
    def from_bytes(cls, data: Buffer, order: ByteOrder) -> Self:
        """Read an instance from `data`, raises `BadDataError` if anything is left over."""
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = cls.read_from(deserializer, order)
        deserializer.finalize()
        return value

    @classmethod
    def stream_type(cls) -> StreamableStreamType[Self]:
        return StreamableStreamType(cls)


class StreamableStreamType(StreamType[S], Generic[S]):
    """ Represents instances of a `Streamable` subclass, so records can be used inside lists, dicts, tuples, etc.
    """

    __slots__ = ('_is_hashable', '_cls')

    _cls: type[S]

    def __init__(self, cls: type[S], /) -> None:
        self._cls = cls
        self._is_hashable = cls.__hash__ is not None

    @override
    def _check_value(self, value: S, /, *, deep: bool) -> None:
        if not isinstance(value, self._cls):
            raise TypeError(f'expected {self._cls.__name__} instance')

    @override
    def _write_to(self, serializer: Serializer, value: S, order: ByteOrder, /) -> None:
        value.write_to(serializer, order)

    @override
    def _read_from(self, deserializer: Deserializer, order: ByteOrder, /) -> S:
        return self._cls.read_from(deserializer, order)
