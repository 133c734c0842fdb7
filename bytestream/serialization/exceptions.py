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


class SerializationError(Exception):
    """Base class for every error raised by the serialization machinery itself.

    Errors raised by an underlying file object (usually `OSError`) are not wrapped, they propagate unchanged.
    """


class OutOfDataError(SerializationError, EOFError):
    """The source has fewer bytes than what is being read.

    A short read is always reported with this error, regardless of the source being in-memory or a file object.
    """


class BadDataError(SerializationError, ValueError):
    """The bytes were read but they are not a valid representation of the expected value."""


class TooLongError(SerializationError, ValueError):
    """A length or count is too big for its prefix, or larger than the configured maximum."""


class MaxBytesExceededError(SerializationError):
    """A size-limited adapter was asked to move more bytes than its limit allows.

    The (de)serialization that hit the limit has failed as a whole: the adapter must not be used again, and the data
    already written to or read from the inner one should be discarded.
    """
