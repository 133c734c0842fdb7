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

from typing import TypeVar

from typing_extensions import override

from bytestream.byte_order import ByteOrder
from bytestream.serialization import Deserializer, Serializer
from bytestream.serialization.compound_encoding.optional import decode_optional, encode_optional
from bytestream.stream_types.stream_type import StreamType

V = TypeVar('V')


class OptionalStreamType(StreamType[V | None]):
    """ Represents a value that is either `V` or `None`.
    """

    __slots__ = ('_is_hashable', '_value')

    _value: StreamType[V]

    def __init__(self, stream_type: StreamType[V]) -> None:
        self._value = stream_type
        self._is_hashable = stream_type.is_hashable()

    @override
    def _check_value(self, value: V | None, /, *, deep: bool) -> None:
        if value is None:
            return
        self._value._check_value(value, deep=deep)

    @override
    def _write_to(self, serializer: Serializer, value: V | None, order: ByteOrder, /) -> None:
        encode_optional(serializer, value, self._value.write_to, order)

    @override
    def _read_from(self, deserializer: Deserializer, order: ByteOrder, /) -> V | None:
        return decode_optional(deserializer, self._value.read_from, order)
