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

from .types import BinaryWriter, Buffer

if TYPE_CHECKING:
    from .adapters import MaxBytesSerializer
    from .bytes_serializer import BytesSerializer
    from .io_serializer import IOSerializer


class Serializer(ABC):
    """The byte sink every encoder writes to.

    Writes only ever append, a serializer never seeks back. Implementors provide `write_bytes` and `cur_pos`, the
    other writes are built on top of `write_bytes`.
    """

    @staticmethod
    def build_bytes_serializer() -> BytesSerializer:
        from .bytes_serializer import BytesSerializer
        return BytesSerializer()

    @staticmethod
    def build_io_serializer(fp: BinaryWriter) -> IOSerializer:
        from .io_serializer import IOSerializer
        return IOSerializer(fp)

    def finalize(self) -> Buffer:
        """Get the resulting byte sequence, the serializer cannot be reused after this."""
        raise TypeError('this serializer does not support finalization')

    @abstractmethod
    def cur_pos(self) -> int:
        """How many bytes were written so far."""
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, data: Buffer) -> None:
        raise NotImplementedError

    def write_byte(self, data: int) -> None:
        """Write a single byte, `data` must be in `range(256)`."""
        # bytes() does the range check
        self.write_bytes(bytes((data,)))

    def write_struct(self, data: tuple[Any, ...], format: str, *, order: ByteOrder | None = None) -> None:
        """Pack `data` with `struct` and write it.

        With an `order` the format gets that order's prefix, so it must not have its own byte order character.
        """
        if order is not None:
            format = order.struct_format(format)
        self.write_bytes(struct.pack(format, *data))

    def with_max_bytes(self, max_bytes: int) -> MaxBytesSerializer[Self]:
        """Wrap this serializer so that writing more than `max_bytes` through the wrapper fails."""
        from .adapters import MaxBytesSerializer
        return MaxBytesSerializer(self, max_bytes)

    @overload
    def with_optional_max_bytes(self, max_bytes: None) -> Self:
        ...

    @overload
    def with_optional_max_bytes(self, max_bytes: int) -> MaxBytesSerializer[Self]:
        ...

    def with_optional_max_bytes(self, max_bytes: int | None) -> Self | MaxBytesSerializer[Self]:
        if max_bytes is None:
            return self
        return self.with_max_bytes(max_bytes)
