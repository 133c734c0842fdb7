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

from typing_extensions import override

from bytestream.byte_order import ByteOrder
from bytestream.conf.get_settings import get_global_settings
from bytestream.serialization import Deserializer, Serializer
from bytestream.serialization.encoding.bytes import decode_bytes, encode_bytes
from bytestream.serialization.encoding.length_prefix import check_length
from bytestream.stream_types.stream_type import StreamType


class BytesStreamType(StreamType[bytes]):
    """ Represents builtin `bytes` values, with a 4-byte length prefix.

    `max_length` limits the length accepted when writing and reading, when not given the `MAX_BYTES_LENGTH` setting is
    used.
    """

    __slots__ = ('_max_length',)

    _is_hashable = True
    _max_length: int | None

    def __init__(self, *, max_length: int | None = None) -> None:
        self._max_length = max_length

    def get_max_length(self) -> int:
        if self._max_length is not None:
            return self._max_length
        return get_global_settings().MAX_BYTES_LENGTH

    @override
    def _check_value(self, value: bytes, /, *, deep: bool) -> None:
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError('expected bytes type')
        check_length(len(value), max_length=self.get_max_length())

    @override
    def _write_to(self, serializer: Serializer, value: bytes, order: ByteOrder, /) -> None:
        encode_bytes(serializer, value, order)

    @override
    def _read_from(self, deserializer: Deserializer, order: ByteOrder, /) -> bytes:
        return decode_bytes(deserializer, order, max_length=self.get_max_length())
