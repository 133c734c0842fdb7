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

from .deserializer import Deserializer
from .exceptions import BadDataError, OutOfDataError
from .types import Buffer


class BytesDeserializer(Deserializer):
    """Deserializer over an in-memory byte sequence.

    The data is not copied: reads return slices of a memoryview over it and only a position is advanced.
    """

    def __init__(self, data: Buffer) -> None:
        self._data = memoryview(data).cast('B')
        self._pos = 0

    def _bytes_left(self) -> int:
        return len(self._data) - self._pos

    @override
    def finalize(self) -> None:
        if self._bytes_left():
            raise BadDataError('trailing data')
        del self._data

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def is_empty(self) -> bool:
        return self._bytes_left() == 0

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> memoryview:
        if n < 0:
            raise ValueError('value cannot be negative')
        if exact and self._bytes_left() < n:
            raise OutOfDataError('not enough bytes to read')
        return self._data[self._pos:self._pos + n]

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> memoryview:
        view = self.peek_bytes(n, exact=exact)
        self._pos += len(view)
        return view

    @override
    def read_all(self) -> memoryview:
        view = self._data[self._pos:]
        self._pos = len(self._data)
        return view
