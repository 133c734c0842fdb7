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

from typing import ClassVar

from typing_extensions import override

from bytestream.byte_order import ByteOrder
from bytestream.serialization import Deserializer, Serializer
from bytestream.serialization.encoding.int import decode_int, encode_int
from bytestream.stream_types.stream_type import StreamType


class _SizedIntStreamType(StreamType[int]):
    """ Base class for classes that represent builtin `int` values with a fixed size and signedness.
    """

    _is_hashable = True
    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]

    @classmethod
    def byte_size(cls) -> int:
        return cls._byte_size

    @classmethod
    def upper_bound(cls) -> int:
        if cls._signed:
            return 2**(cls._byte_size * 8 - 1) - 1
        else:
            return 2**(cls._byte_size * 8) - 1

    @classmethod
    def lower_bound(cls) -> int:
        if cls._signed:
            return -(2**(cls._byte_size * 8 - 1))
        else:
            return 0

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        # bool is a subclass of int, but a bool field should use BoolStreamType
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('expected integer')
        self._check_range(value)

    def _check_range(self, value: int) -> None:
        if value > self.upper_bound():
            raise ValueError('above upper bound')
        if value < self.lower_bound():
            raise ValueError('below lower bound')

    @override
    def _write_to(self, serializer: Serializer, value: int, order: ByteOrder, /) -> None:
        encode_int(serializer, value, length=self._byte_size, signed=self._signed, order=order)

    @override
    def _read_from(self, deserializer: Deserializer, order: ByteOrder, /) -> int:
        return decode_int(deserializer, length=self._byte_size, signed=self._signed, order=order)


class Int8StreamType(_SizedIntStreamType):
    _signed = True
    _byte_size = 1


class Int16StreamType(_SizedIntStreamType):
    _signed = True
    _byte_size = 2


class Int32StreamType(_SizedIntStreamType):
    _signed = True
    _byte_size = 4  # 4-bytes -> 32-bits


class Int64StreamType(_SizedIntStreamType):
    _signed = True
    _byte_size = 8


class Uint8StreamType(_SizedIntStreamType):
    _signed = False
    _byte_size = 1


class Uint16StreamType(_SizedIntStreamType):
    _signed = False
    _byte_size = 2


class Uint32StreamType(_SizedIntStreamType):
    _signed = False
    _byte_size = 4  # 4-bytes -> 32-bits


class Uint64StreamType(_SizedIntStreamType):
    _signed = False
    _byte_size = 8
