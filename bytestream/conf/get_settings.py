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

import os
from typing import NamedTuple, Optional

from structlog import get_logger

from bytestream import conf
from bytestream.conf.settings import StreamSettings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'BYTESTREAM_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: str
    settings: StreamSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> StreamSettings:
    """
    Returns the process-wide settings, loading them on the first call.

    The yaml filepath is taken from the 'BYTESTREAM_CONFIG_YAML' env var, if it's not set the packaged defaults are
    used. Once loaded, asking for settings with the env var pointing to a different file is an error.
    """
    settings_yaml_filepath = os.environ.get(CONFIG_YAML_ENV_VAR, conf.DEFAULT_SETTINGS_FILEPATH)
    return _load_settings_singleton(settings_yaml_filepath)


def _load_settings_singleton(source: str) -> StreamSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')

        return _settings_singleton.settings

    settings = StreamSettings.from_yaml(filepath=source)
    logger.new().debug('settings loaded', source=source)
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)

    return _settings_singleton.settings
