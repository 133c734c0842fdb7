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

from structlog import get_logger
from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import BadDataError, OutOfDataError
from .types import BinaryReader

logger = get_logger()


class IODeserializer(Deserializer):
    """Implementation of Deserializer that reads from a binary file object.

    Reads ask the file object for exactly what is needed and loop until it arrives, if the stream ends first an
    `OutOfDataError` is raised. Peeking (and `is_empty`) has to read from the file object, those bytes are kept and
    handed out by the next reads, nothing else is read ahead.

    On a socket (`socket.makefile('rb')`) every read blocks until the bytes arrive or the peer closes the connection,
    this includes `is_empty()` and `finalize()`.
    """

    def __init__(self, fp: BinaryReader) -> None:
        self._fp = fp
        # bytes already taken from fp by a peek but not consumed yet
        self._pending = b''
        self._consumed = 0
        self.log = logger.new(fp=repr(fp))

    def _fill(self, n: int) -> None:
        """Make sure there are at least n pending bytes, or all that the stream had left."""
        while len(self._pending) < n:
            chunk = self._fp.read(n - len(self._pending))
            if not chunk:
                break
            self._pending += chunk

    def _consume(self, n: int) -> memoryview:
        data = memoryview(self._pending)[:n]
        self._pending = self._pending[n:]
        self._consumed += len(data)
        return data

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            self.log.debug('trailing data on finalize', pos=self._consumed)
            raise BadDataError('trailing data')

    @override
    def cur_pos(self) -> int:
        return self._consumed

    @override
    def is_empty(self) -> bool:
        self._fill(1)
        return not self._pending

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> memoryview:
        if n < 0:
            raise ValueError('value cannot be negative')
        self._fill(n)
        if exact and len(self._pending) < n:
            self.log.debug('short read', pos=self._consumed, requested=n, available=len(self._pending))
            raise OutOfDataError('not enough bytes to read')
        return memoryview(self._pending)[:n]

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> memoryview:
        self.peek_bytes(n, exact=exact)
        return self._consume(n)

    @override
    def read_all(self) -> memoryview:
        self._pending += self._fp.read() or b''
        return self._consume(len(self._pending))
