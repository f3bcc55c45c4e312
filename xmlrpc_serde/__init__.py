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

from xmlrpc_serde.api import decode, encode
from xmlrpc_serde.conf import DEFAULT_SETTINGS, CodecSettings
from xmlrpc_serde.exceptions import CodecError, DecodeError, EncodeError
from xmlrpc_serde.shapes import Shape, make_shape
from xmlrpc_serde.version import __version__

__all__ = [
    'CodecError',
    'CodecSettings',
    'DEFAULT_SETTINGS',
    'DecodeError',
    'EncodeError',
    'Shape',
    'decode',
    'encode',
    'make_shape',
    '__version__',
]
