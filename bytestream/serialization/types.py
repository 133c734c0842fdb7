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

from typing import BinaryIO, TypeAlias

from typing_extensions import Buffer

# anything with a `.write(data)` and `.flush()`, like `open(path, 'wb')`, `io.BytesIO` or `socket.makefile('wb')`
BinaryWriter: TypeAlias = BinaryIO

# anything with a `.read(n)`, like `open(path, 'rb')`, `io.BytesIO` or `socket.makefile('rb')`
BinaryReader: TypeAlias = BinaryIO

__all__ = [
    'BinaryReader',
    'BinaryWriter',
    'Buffer',
]
