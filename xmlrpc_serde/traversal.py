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

from contextlib import contextmanager
from typing import Iterator

from xmlrpc_serde.conf.settings import DEFAULT_SETTINGS, CodecSettings
from xmlrpc_serde.exceptions import CodecError, PathSegment, RecursionLimitError


class Traversal:
    """ State shared by a single encode or decode call.

    Instances are created per call and are never shared between threads, shapes themselves hold no state.
    """

    __slots__ = ('settings', '_depth')

    settings: CodecSettings
    _depth: int

    def __init__(self, settings: CodecSettings | None = None) -> None:
        self.settings = settings if settings is not None else DEFAULT_SETTINGS
        self._depth = 0

    @property
    def depth(self) -> int:
        return self._depth

    @contextmanager
    def nested(self, segment: PathSegment) -> Iterator[None]:
        """ Enter a child node (array index, struct member or variant name).

        Any CodecError raised inside gets the segment prepended to its path, and the maximum depth is enforced.
        """
        self._depth += 1
        try:
            if self._depth > self.settings.MAX_DEPTH:
                raise RecursionLimitError(f'maximum depth of {self.settings.MAX_DEPTH} exceeded')
            yield
        except CodecError as e:
            e.prepend_path(segment)
            raise
        finally:
            self._depth -= 1
