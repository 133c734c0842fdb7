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

from __future__ import annotations

from typing import Any

from typing_extensions import override

from bytestream.byte_order import ByteOrder
from bytestream.serialization import Deserializer, Serializer
from bytestream.serialization.compound_encoding.tuple import decode_tuple, encode_tuple
from bytestream.stream_types.stream_type import StreamType


class TupleStreamType(StreamType[tuple[Any, ...]]):
    """ Represents fixed-size heterogeneous `tuple` values, like `tuple[bool, int]`.

    Each member is written with its own stream type, in order, with nothing in between, so the size is the sum of the
    members' sizes. Variable-size homogeneous tuples should use a collection stream type instead.
    """

    __slots__ = ('_is_hashable', '_members')

    _members: tuple[StreamType[Any], ...]

    def __init__(self, *members: StreamType[Any]) -> None:
        self._members = members
        self._is_hashable = all(member.is_hashable() for member in members)

    @override
    def _check_value(self, value: tuple[Any, ...], /, *, deep: bool) -> None:
        if not isinstance(value, tuple):
            raise TypeError('expected tuple type')
        if len(value) != len(self._members):
            raise TypeError(f'expected {len(self._members)} items, got {len(value)}')
        if deep:
            for member, item in zip(self._members, value):
                member._check_value(item, deep=True)

    @override
    def _write_to(self, serializer: Serializer, value: tuple[Any, ...], order: ByteOrder, /) -> None:
        encode_tuple(serializer, value, tuple(member.write_to for member in self._members), order)

    @override
    def _read_from(self, deserializer: Deserializer, order: ByteOrder, /) -> tuple[Any, ...]:
        return decode_tuple(deserializer, tuple(member.read_from for member in self._members), order)
