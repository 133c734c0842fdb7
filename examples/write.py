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

"""
Write a small record in little-endian and print the resulting bytes, then read it back.

Usage: python examples/write.py
"""

from dataclasses import dataclass

import structlog
from typing_extensions import Self

from bytestream import ByteOrder
from bytestream.serialization import Deserializer, Serializer
from bytestream.stream_types import BoolStreamType, Uint32StreamType
from bytestream.streamable import Streamable

logger = structlog.get_logger()


@dataclass(frozen=True)
class Foo(Streamable):
    flag: bool
    count: int

    def write_to(self, serializer: Serializer, order: ByteOrder, /) -> None:
        BoolStreamType().write_to(serializer, self.flag, order)
        Uint32StreamType().write_to(serializer, self.count, order)

    @classmethod
    def read_from(cls, deserializer: Deserializer, order: ByteOrder, /) -> Self:
        flag = BoolStreamType().read_from(deserializer, order)
        count = Uint32StreamType().read_from(deserializer, order)
        return cls(flag, count)


def main() -> None:
    log = logger.new()
    foo = Foo(flag=True, count=0x01020304)
    data = foo.to_bytes(ByteOrder.LITTLE_ENDIAN)
    print(list(data))
    log.info('record written', size=len(data), hex=data.hex())
    assert Foo.from_bytes(data, ByteOrder.LITTLE_ENDIAN) == foo


if __name__ == '__main__':
    main()
