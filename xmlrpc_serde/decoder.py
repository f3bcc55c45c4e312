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

from typing import TypeVar

from xmlrpc_serde.exceptions import TypeMismatchError
from xmlrpc_serde.traversal import Traversal
from xmlrpc_serde.value import Value

V = TypeVar('V', bound=Value)


class Decoder(Traversal):
    """ Drives the conversion of a `Value` into a Python value, shapes receive it on every `decode` call.
    """

    __slots__ = ()

    def expect(self, value: Value, value_class: type[V], expected: str) -> V:
        """ Narrow a wire value to the given kind or fail with a message naming what the caller asked for.

        >>> from xmlrpc_serde.value import Int, Str
        >>> Decoder().expect(Int(1), Int, 'integer')
        Int(value=1)
        >>> Decoder().expect(Str('1'), Int, 'integer')
        Traceback (most recent call last):
        ...
        xmlrpc_serde.exceptions.TypeMismatchError: expected integer (<i4>), got <string>
        """
        if not isinstance(value, value_class):
            got = getattr(value, 'kind', type(value).__name__)
            raise TypeMismatchError(f'expected {expected} (<{value_class.kind}>), got <{got}>')
        return value
