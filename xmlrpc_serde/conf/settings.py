#  Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import sys
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, field_validator

from xmlrpc_serde.utils.yaml import dict_from_yaml

# upper estimate of the interpreter frames taken by one nesting level
FRAMES_PER_LEVEL = 6


class CodecSettings(BaseModel):
    """ Policy knobs of the codec, every field has a default so `CodecSettings()` is a valid configuration.
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    # Reject struct members that the requested dataclass doesn't declare. When False they're ignored.
    STRICT_FIELDS: bool = False

    # A missing struct member whose annotation is optional decodes to `None` instead of failing.
    MISSING_OPTIONAL_AS_NONE: bool = True

    # Accept an `<i4>` where a `float` is requested.
    DOUBLE_ACCEPTS_INT: bool = True

    # Maximum nesting of arrays/structs on both directions, deeper values fail instead of exhausting the stack.
    # Bounded by `sys.getrecursionlimit() // FRAMES_PER_LEVEL` at the time the settings are created.
    MAX_DEPTH: int = 128

    @field_validator('MAX_DEPTH')
    @classmethod
    def _validate_max_depth(cls, max_depth: int) -> int:
        if max_depth < 1:
            raise ValueError('MAX_DEPTH must be at least 1')
        upper_bound = sys.getrecursionlimit() // FRAMES_PER_LEVEL
        if max_depth > upper_bound:
            raise ValueError(f'MAX_DEPTH must be at most {upper_bound} with the current recursion limit')
        return max_depth

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodecSettings':
        """Takes a filepath to a yaml file and returns a validated CodecSettings instance."""
        settings_dict = dict_from_yaml(filepath=filepath)
        return cls.model_validate(settings_dict)


DEFAULT_SETTINGS = CodecSettings()
