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

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, final

from bytestream.byte_order import ByteOrder
from bytestream.serialization import Deserializer, Serializer
from bytestream.serialization.types import Buffer

T = TypeVar('T')


class StreamType(ABC, Generic[T]):
    """ This class is used to model a type with a known layout and how it will be written/read.

    An instance knows how to write a value of `T` to a `Serializer` and how to read it back from a `Deserializer`,
    always in the byte order given to that call. Compound stream types (lists, dicts, optionals, ...) hold the stream
    types of their members and delegate to them in order, passing the same byte order along.

    Instances don't hold any state besides their configuration, the same instance can be shared and reused freely.
    """

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    # XXX: subclasses must initialize this property
    _is_hashable: bool

    @final
    def is_hashable(self) -> bool:
        """ Indicates whether the values of this type are expected to be hashable.

        This is used to prevent unhashable types from being used as keys in dicts or members in sets."""
        return self._is_hashable

    @final
    def check_value(self, value: T, /) -> None:
        """ Raises a TypeError if the value's type is not compatible, or a ValueError if it can't be represented.

        A value being compatible is more than just having the correct instance, for example if the value is a dict, all
        the dict's keys and values must be checked for compatibility.
        """
        # XXX: subclasses must implement StreamType._check_value, not StreamType.check_value
        self._check_value(value, deep=True)

    @final
    def write_to(self, serializer: Serializer, value: T, order: ByteOrder, /) -> None:
        """ Write a value using this type's layout and the given byte order.

        The value is "shallow checked" before anything is written, members of compound values are checked as they are
        written, so an invalid member deep inside a compound value can leave the serializer with a partial write.
        `to_bytes` checks everything before writing.
        """
        # XXX: subclasses must implement StreamType._write_to, not StreamType.write_to
        self._check_value(value, deep=False)
        self._write_to(serializer, value, order)

    @final
    def read_from(self, deserializer: Deserializer, order: ByteOrder, /) -> T:
        """ Read a value using this type's layout and the given byte order.

        Exactly the bytes that `write_to` would produce for the resulting value are consumed.
        """
        # XXX: subclasses must implement StreamType._read_from, not StreamType.read_from
        return self._read_from(deserializer, order)

    @final
    def to_bytes(self, value: T, order: ByteOrder, /) -> bytes:
        """ Shortcut to quickly convert a value T to `bytes` without handling a serializer.
        """
        self.check_value(value)
        serializer = Serializer.build_bytes_serializer()
        self.write_to(serializer, value, order)
        return bytes(serializer.finalize())

    @final
    def from_bytes(self, data: Buffer, order: ByteOrder, /) -> T:
        """ Shortcut to quickly parse a value T from `bytes`, all of the given data must be consumed.
        """
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = self.read_from(deserializer, order)
        deserializer.finalize()
        return value

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `StreamType.check_value`, should raise when the given value is invalid.

        Compound values should use `StreamType._check_value` on the inner type(s) instead of `StreamType.check_value`
        and pass the appropriate deep argument.
        """
        raise NotImplementedError

    @abstractmethod
    def _write_to(self, serializer: Serializer, value: T, order: ByteOrder, /) -> None:
        """ Inner implementation of `write_to`, you can assume that the given value has been "shallow checked".

        When implementing the serialization with compound encoders, `StreamType.write_to` should be passed as an
        `Encoder` instead of `StreamType._write_to`, so the members get checked too.
        """
        raise NotImplementedError

    @abstractmethod
    def _read_from(self, deserializer: Deserializer, order: ByteOrder, /) -> T:
        """ Inner implementation of `read_from`, it is expected that it always produces valid values.
        """
        raise NotImplementedError
