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
from bytestream.serialization import Deserializer, Serializer
from bytestream.serialization.encoding.bool import decode_bool, encode_bool
from bytestream.stream_types.stream_type import StreamType


class BoolStreamType(StreamType[bool]):
    """ Represents builtin `bool` values, one byte, any non-zero byte reads as `True`.
    """

    _is_hashable = True

    @override
    def _check_value(self, value: bool, /, *, deep: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError('expected boolean')

    @override
    def _write_to(self, serializer: Serializer, value: bool, order: ByteOrder, /) -> None:
        encode_bool(serializer, value, order)

    @override
    def _read_from(self, deserializer: Deserializer, order: ByteOrder, /) -> bool:
        return decode_bool(deserializer, order)
