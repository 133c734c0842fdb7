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
The byte order used for multi-byte integers.

There is no default order anywhere in this package, every read/write receives one explicitly and it has to be the same
on both sides, it is never written to the stream.

>>> ByteOrder.BIG_ENDIAN.value
'big'
>>> (0x0102).to_bytes(2, byteorder=ByteOrder.LITTLE_ENDIAN.value).hex()
'0201'
>>> ByteOrder.LITTLE_ENDIAN.struct_prefix
'<'
"""

from enum import Enum, unique
from typing import assert_never

_STRUCT_ORDER_CHARS = '@=<>!'


@unique
class ByteOrder(Enum):
    # the values are what `int.to_bytes`/`int.from_bytes` expect as `byteorder`
    BIG_ENDIAN = 'big'
    LITTLE_ENDIAN = 'little'

    @property
    def struct_prefix(self) -> str:
        """The `struct` format prefix for this order, it also disables native alignment."""
        match self:
            case ByteOrder.BIG_ENDIAN:
                return '>'
            case ByteOrder.LITTLE_ENDIAN:
                return '<'
            case _:
                assert_never(self)

    def struct_format(self, format: str) -> str:
        """Prefix a `struct` format with this order.

        >>> ByteOrder.BIG_ENDIAN.struct_format('HI')
        '>HI'
        """
        if format and format[0] in _STRUCT_ORDER_CHARS:
            raise ValueError(f'format {format!r} already has a byte order')
        return self.struct_prefix + format
