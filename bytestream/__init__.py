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
Positional binary serialization with an explicit byte order.

Values are written to a `Serializer` and read back from a `Deserializer` by a type that knows their layout: a
`StreamType` for builtin values (ints of fixed size, bool, str, bytes, lists, dicts, ...) or a `Streamable` subclass
for user-defined records. Nothing describing the types is written to the stream, both ends must agree on the layout
and on the `ByteOrder`, which is always passed explicitly.

The serialization machinery lives in `bytestream.serialization`, the builtin types in `bytestream.stream_types` and the
record base class in `bytestream.streamable`. This module only exposes what can be imported without third-party
dependencies.
"""

from bytestream.byte_order import ByteOrder
from bytestream.version import __version__

__all__ = [
    'ByteOrder',
    '__version__',
]
