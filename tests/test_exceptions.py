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

import pytest

from bytestream.serialization import (
    BadDataError,
    MaxBytesExceededError,
    OutOfDataError,
    SerializationError,
    TooLongError,
)


@pytest.mark.parametrize('error_class, builtin_class', [
    (OutOfDataError, EOFError),
    (BadDataError, ValueError),
    (TooLongError, ValueError),
])
def test_builtin_bases(error_class: type[SerializationError], builtin_class: type[Exception]) -> None:
    assert issubclass(error_class, SerializationError)
    assert issubclass(error_class, builtin_class)


def test_max_bytes_exceeded() -> None:
    assert issubclass(MaxBytesExceededError, SerializationError)
    assert not issubclass(MaxBytesExceededError, ValueError)


def test_file_errors_are_not_wrapped() -> None:
    assert not issubclass(OSError, SerializationError)
    assert not issubclass(OutOfDataError, OSError)
