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
from collections.abc import Hashable, Iterable, Mapping
from typing import TypeVar

from typing_extensions import override

from bytestream.byte_order import ByteOrder
from bytestream.conf.get_settings import get_global_settings
from bytestream.serialization import Deserializer, Serializer
from bytestream.serialization.compound_encoding.mapping import decode_mapping, encode_mapping
from bytestream.serialization.encoding.length_prefix import check_length
from bytestream.stream_types.stream_type import StreamType

T = TypeVar('T')
H = TypeVar('H', bound=Hashable)


class _MapStreamType(StreamType[Mapping[H, T]], ABC):
    """ Base class to help implement StreamType for mappings: a 4-byte count followed by key/value pairs.

    `sort_keys` decides whether entries are written sorted by key or in the mapping's iteration order, when not given
    the `SORT_MAP_KEYS` setting is used. `max_length` limits the count accepted when writing and reading, when not given
    the `MAX_COLLECTION_LENGTH` setting is used.
    """

    __slots__ = ('_key', '_value', '_sort_keys', '_max_length')

    _key: StreamType[H]
    _value: StreamType[T]
    _sort_keys: bool | None
    _max_length: int | None
    _is_hashable = False

    def __init__(
        self,
        key: StreamType[H],
        value: StreamType[T],
        *,
        sort_keys: bool | None = None,
        max_length: int | None = None,
    ) -> None:
        if not key.is_hashable():
            raise TypeError('map keys must be hashable')
        self._key = key
        self._value = value
        self._sort_keys = sort_keys
        self._max_length = max_length

    @abstractmethod
    def _build(self, items: Iterable[tuple[H, T]]) -> Mapping[H, T]:
        """ How to build the concrete map from an iterable of (key, value).
        """
        raise NotImplementedError

    def get_sort_keys(self) -> bool:
        if self._sort_keys is not None:
            return self._sort_keys
        return get_global_settings().SORT_MAP_KEYS

    def get_max_length(self) -> int:
        if self._max_length is not None:
            return self._max_length
        return get_global_settings().MAX_COLLECTION_LENGTH

    @override
    def _check_value(self, value: Mapping[H, T], /, *, deep: bool) -> None:
        if not isinstance(value, Mapping):
            raise TypeError('expected Mapping type')
        check_length(len(value), max_length=self.get_max_length())
        if deep:
            for k, v in value.items():
                self._key._check_value(k, deep=True)
                self._value._check_value(v, deep=True)

    @override
    def _write_to(self, serializer: Serializer, value: Mapping[H, T], order: ByteOrder, /) -> None:
        encode_mapping(
            serializer,
            value,
            self._key.write_to,
            self._value.write_to,
            order,
            sort_keys=self.get_sort_keys(),
        )

    @override
    def _read_from(self, deserializer: Deserializer, order: ByteOrder, /) -> Mapping[H, T]:
        return decode_mapping(
            deserializer,
            self._key.read_from,
            self._value.read_from,
            self._build,
            order,
            max_length=self.get_max_length(),
        )


class DictStreamType(_MapStreamType[H, T]):
    """ Represents builtin `dict` values.

    Entries are inserted in the order they are read, when a key is repeated in the stream the last entry wins.
    """

    @override
    def _build(self, items: Iterable[tuple[H, T]]) -> dict[H, T]:
        return dict(items)
