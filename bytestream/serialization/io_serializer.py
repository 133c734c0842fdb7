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

from .serializer import Serializer
from .types import BinaryWriter, Buffer

logger = get_logger()


class IOSerializer(Serializer):
    """Implementation of Serializer that writes straight into a binary file object.

    Nothing is buffered here, every write is forwarded to `fp.write` and errors raised by the file object (`OSError`,
    `ValueError` for a closed file, ...) propagate unchanged. Call `flush()` when the file object buffers on its own.
    """

    def __init__(self, fp: BinaryWriter) -> None:
        self._fp = fp
        self._pos: int = 0
        self.log = logger.new(fp=repr(fp))

    def flush(self) -> None:
        self._fp.flush()

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_bytes(self, data: Buffer) -> None:
        remaining = memoryview(data).cast('B')
        size = len(remaining)
        # raw (unbuffered) file objects are allowed to accept fewer bytes than given
        while remaining:
            written = self._fp.write(remaining)
            if written is None:
                self.log.debug('file object would block', pending=len(remaining))
                raise BlockingIOError('file object is non-blocking and did not accept the data')
            remaining = remaining[written:]
        self._pos += size
