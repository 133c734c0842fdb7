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

import struct
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, overload

from typing_extensions import Self

from bytestream.byte_order import ByteOrder

from .types import BinaryReader, Buffer

if TYPE_CHECKING:
    from .adapters import MaxBytesDeserializer
    from .bytes_deserializer import BytesDeserializer
    from .io_deserializer import IODeserializer


class Deserializer(ABC):
    """The byte source every decoder reads from.

    Reads are sequential and consume exactly what is asked, reading past the end raises `OutOfDataError`. Peeking
    returns the same bytes the next read would, without consuming them.

    Implementors provide `cur_pos`, `is_empty`, `peek_bytes`, `read_bytes` and `read_all`, single bytes and structs
    are read through `peek_bytes`/`read_bytes`.
    """

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data)

    @staticmethod
    def build_io_deserializer(fp: BinaryReader) -> IODeserializer:
        from .io_deserializer import IODeserializer
        return IODeserializer(fp)

    def finalize(self) -> None:
        """Check that all bytes were consumed, the deserializer cannot be used after this."""
        raise TypeError('this deserializer does not support finalization')

    @abstractmethod
    def cur_pos(self) -> int:
        """How many bytes were consumed so far."""
        raise NotImplementedError

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """Get the next n bytes without consuming them, see `read_bytes`."""
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """Consume n bytes.

        With `exact=True` having fewer than n bytes left raises `OutOfDataError`, otherwise whatever is left (up to n)
        is returned.
        """
        raise NotImplementedError

    @abstractmethod
    def read_all(self) -> Buffer:
        """Consume everything that is left."""
        raise NotImplementedError

    def peek_byte(self) -> int:
        return memoryview(self.peek_bytes(1))[0]

    def read_byte(self) -> int:
        """Consume a single byte and return it as an unsigned int."""
        return memoryview(self.read_bytes(1))[0]

    def peek_struct(self, format: str, *, order: ByteOrder | None = None) -> tuple[Any, ...]:
        if order is not None:
            format = order.struct_format(format)
        return struct.unpack(format, self.peek_bytes(struct.calcsize(format)))

    def read_struct(self, format: str, *, order: ByteOrder | None = None) -> tuple[Any, ...]:
        """Consume and unpack `struct.calcsize(format)` bytes.

        With an `order` the format gets that order's prefix, so it must not have its own byte order character.
        """
        if order is not None:
            format = order.struct_format(format)
        return struct.unpack(format, self.read_bytes(struct.calcsize(format)))

    def with_max_bytes(self, max_bytes: int) -> MaxBytesDeserializer[Self]:
        """Wrap this deserializer so that reading more than `max_bytes` through the wrapper fails."""
        from .adapters import MaxBytesDeserializer
        return MaxBytesDeserializer(self, max_bytes)

    @overload
    def with_optional_max_bytes(self, max_bytes: None) -> Self:
        ...

    @overload
    def with_optional_max_bytes(self, max_bytes: int) -> MaxBytesDeserializer[Self]:
        ...

    def with_optional_max_bytes(self, max_bytes: int | None) -> Self | MaxBytesDeserializer[Self]:
        if max_bytes is None:
            return self
        return self.with_max_bytes(max_bytes)
