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

from types import TracebackType
from typing import Generic, TypeVar

from typing_extensions import Self, override

from bytestream.serialization.deserializer import Deserializer
from bytestream.serialization.exceptions import MaxBytesExceededError
from bytestream.serialization.serializer import Serializer

from ..types import Buffer

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


class _ByteBudget:
    """Counts down how many bytes can still go through an adapter."""

    __slots__ = ('_left',)

    def __init__(self, max_bytes: int) -> None:
        if max_bytes < 0:
            raise ValueError('max_bytes cannot be negative')
        self._left = max_bytes

    @property
    def left(self) -> int:
        return max(self._left, 0)

    def spend(self, size: int, action: str) -> None:
        self._left -= size
        if self._left < 0:
            raise MaxBytesExceededError(f'{action} of {size} bytes exceeds the limit')


class _AdapterContext:
    # allow using the adapters as context managers:

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        pass


class MaxBytesSerializer(_AdapterContext, Serializer, Generic[S]):
    """Wraps a serializer and refuses to write more than `max_bytes` through it.

    The limit is checked before a write is forwarded, so `inner` never receives the write that crosses it.
    """

    inner: S

    def __init__(self, serializer: S, max_bytes: int) -> None:
        self.inner = serializer
        self._budget = _ByteBudget(max_bytes)

    @property
    def bytes_left(self) -> int:
        return self._budget.left

    @override
    def finalize(self) -> Buffer:
        return self.inner.finalize()

    @override
    def cur_pos(self) -> int:
        return self.inner.cur_pos()

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data)
        self._budget.spend(view.nbytes, 'write')
        self.inner.write_bytes(view)


class MaxBytesDeserializer(_AdapterContext, Deserializer, Generic[D]):
    """Wraps a deserializer and refuses to read more than `max_bytes` through it.

    The limit is checked before anything is taken from `inner`. Peeking is not counted, it doesn't consume anything.
    """

    inner: D

    def __init__(self, deserializer: D, max_bytes: int) -> None:
        self.inner = deserializer
        self._budget = _ByteBudget(max_bytes)

    @property
    def bytes_left(self) -> int:
        return self._budget.left

    @override
    def finalize(self) -> None:
        self.inner.finalize()

    @override
    def cur_pos(self) -> int:
        return self.inner.cur_pos()

    @override
    def is_empty(self) -> bool:
        return self.inner.is_empty()

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        return self.inner.peek_bytes(n, exact=exact)

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        self._budget.spend(n, 'read')
        return self.inner.read_bytes(n, exact=exact)

    @override
    def read_all(self) -> Buffer:
        result = self.inner.read_bytes(self._budget.left, exact=False)
        self._budget.spend(memoryview(result).nbytes, 'read')
        if not self.inner.is_empty():
            raise MaxBytesExceededError('more data than the limit allows')
        return result
