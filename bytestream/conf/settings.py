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

from pathlib import Path
from typing import Union

from pydantic import Field

from bytestream.utils.pydantic import BaseModel
from bytestream.utils.yaml import model_from_extended_yaml

# 16 MiB
DEFAULT_MAX_BYTES_LENGTH: int = 16 * 1024 * 1024

DEFAULT_MAX_COLLECTION_LENGTH: int = 1024 * 1024


class StreamSettings(BaseModel):
    """Limits and defaults used by the builtin stream types.

    There's no byte order here on purpose, it is always passed explicitly to each read/write.
    """

    # Longest str/bytes payload accepted when encoding or decoding, a decoded prefix is checked before the payload.
    MAX_BYTES_LENGTH: int = Field(default=DEFAULT_MAX_BYTES_LENGTH, ge=0)

    # Largest element/entry count accepted when encoding or decoding a collection or mapping.
    MAX_COLLECTION_LENGTH: int = Field(default=DEFAULT_MAX_COLLECTION_LENGTH, ge=0)

    # Whether maps are written sorted by key when their stream type doesn't say otherwise.
    SORT_MAP_KEYS: bool = False

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'StreamSettings':
        """Takes a filepath to a yaml file and returns a validated StreamSettings instance."""
        return model_from_extended_yaml(cls, filepath=filepath)
