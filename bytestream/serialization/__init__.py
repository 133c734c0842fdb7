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

r"""
The byte sink/source abstractions that every encoder and decoder work with.

A `Serializer` is where bytes are written to and a `Deserializer` is where bytes are read from. Both have in-memory
implementations (`Serializer.build_bytes_serializer()`, `Deserializer.build_bytes_deserializer(data)`) and
implementations on top of binary file objects (`Serializer.build_io_serializer(fp)`,
`Deserializer.build_io_deserializer(fp)`), which also covers sockets through `socket.makefile`.

>>> se = Serializer.build_bytes_serializer()
>>> se.write_bytes(b'\x01\x02')
>>> se.write_struct((3,), 'H', order=ByteOrder.LITTLE_ENDIAN)
>>> bytes(se.finalize()).hex()
'01020300'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('01020300'))
>>> de.read_byte()
1
>>> de.read_struct('B', order=ByteOrder.BIG_ENDIAN)
(2,)
>>> de.read_struct('H', order=ByteOrder.LITTLE_ENDIAN)
(3,)
>>> de.finalize()
"""

from bytestream.byte_order import ByteOrder

from .deserializer import Deserializer
from .exceptions import BadDataError, MaxBytesExceededError, OutOfDataError, SerializationError, TooLongError
from .serializer import Serializer

__all__ = [
    'BadDataError',
    'ByteOrder',
    'Deserializer',
    'MaxBytesExceededError',
    'OutOfDataError',
    'SerializationError',
    'Serializer',
    'TooLongError',
]
