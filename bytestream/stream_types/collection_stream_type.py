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
from collections.abc import Collection, Hashable, Iterable, Set
from typing import TypeVar

from typing_extensions import override

from bytestream.byte_order import ByteOrder
from bytestream.conf.get_settings import get_global_settings
from bytestream.serialization import Deserializer, Serializer
from bytestream.serialization.compound_encoding.collection import decode_collection, encode_collection
from bytestream.serialization.encoding.length_prefix import check_length
from bytestream.stream_types.stream_type import StreamType

T = TypeVar('T')
H = TypeVar('H', bound=Hashable)


class _CollectionStreamType(StreamType[Collection[T]], ABC):
    """ Used as base for StreamType classes that represent collections: a 4-byte count followed by the items.

    `max_length` limits the count accepted when writing and reading, when not given the `MAX_COLLECTION_LENGTH`
    setting is used.
    """
    __slots__ = ('_item', '_max_length')

    _is_hashable = False
    _item: StreamType[T]
    _max_length: int | None

    def __init__(self, item_stream_type: StreamType[T], /, *, max_length: int | None = None) -> None:
        self._item = item_stream_type
        self._max_length = max_length

    @abstractmethod
    def _build(self, items: Iterable[T]) -> Collection[T]:
        """ How to build the concrete collection from an iterable of items.
        """
        raise NotImplementedError

    def get_max_length(self) -> int:
        if self._max_length is not None:
            return self._max_length
        return get_global_settings().MAX_COLLECTION_LENGTH

    def _check_item(self, item: T) -> None:
        self._item._check_value(item, deep=True)

    @override
    def _check_value(self, value: Collection[T], /, *, deep: bool) -> None:
        if not isinstance(value, Collection) or isinstance(value, (str, bytes, bytearray)):
            raise TypeError('expected Collection type')
        check_length(len(value), max_length=self.get_max_length())
        if deep:
            for i in value:
                self._check_item(i)

    @override
    def _write_to(self, serializer: Serializer, value: Collection[T], order: ByteOrder, /) -> None:
        encode_collection(serializer, value, self._item.write_to, order)

    @override
    def _read_from(self, deserializer: Deserializer, order: ByteOrder, /) -> Collection[T]:
        return decode_collection(
            deserializer,
            self._item.read_from,
            self._build,
            order,
            max_length=self.get_max_length(),
        )


class ListStreamType(_CollectionStreamType[T]):
    """ Represents builtin `list` values.
    """

    @override
    def _build(self, items: Iterable[T]) -> list[T]:
        return list(items)


class SetStreamType(_CollectionStreamType[H]):
    """ Represents builtin `set` values.

    Items are written in the set's iteration order, which isn't guaranteed to be the same for equal sets.
    """

    def __init__(self, item_stream_type: StreamType[H], /, *, max_length: int | None = None) -> None:
        if not item_stream_type.is_hashable():
            raise TypeError('set items must be hashable')
        super().__init__(item_stream_type, max_length=max_length)

    @override
    def _build(self, items: Iterable[H]) -> Set[H]:
        return set(items)

    @override
    def _check_value(self, value: Collection[H], /, *, deep: bool) -> None:
        if not isinstance(value, Set):
            raise TypeError('expected Set type')
        super()._check_value(value, deep=deep)


class FrozenSetStreamType(SetStreamType[H]):
    """ Represents builtin `frozenset` values.
    """

    # XXX: SetStreamType already enforces H to be hashable, but is not itself hashable, a frozenset, however, is
    _is_hashable = True

    @override
    def _build(self, items: Iterable[H]) -> frozenset[H]:
        return frozenset(items)
