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

from __future__ import annotations

from typing import TypeVar

from typing_extensions import Self, override

from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import UnsupportedTypeError, ValueTypeError
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.utils.typing import is_subclass
from xmlrpc_serde.value import Value

V = TypeVar('V', bound=Value)


class ValueShape(Shape[V]):
    """ Passthrough for annotations that already are wire values, so a part of a message can be left undecoded.

    >>> from xmlrpc_serde.value import Array, Int, Struct
    >>> from xmlrpc_serde.shapes import make_shape
    >>> make_shape(Value).decode_value(Array.of(Int(1)))
    Array(items=(Int(value=1),))
    >>> make_shape(Struct).decode_value(Array.of(Int(1)))
    Traceback (most recent call last):
    ...
    xmlrpc_serde.exceptions.TypeMismatchError: expected Struct (<struct>), got <array>
    """

    __slots__ = ('_class',)

    _is_hashable = True
    _class: type[V]

    def __init__(self, class_: type[V]) -> None:
        self._class = class_

    @override
    @classmethod
    def _from_type(cls, type_: type[V], /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, Value):
            raise UnsupportedTypeError('expected a Value subclass')
        return cls(type_)

    @override
    def _check_value(self, value: V, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise ValueTypeError(f'expected {self._class.__name__}, got {type(value).__name__}')

    @override
    def _encode(self, encoder: Encoder, value: V, /) -> Value:
        return value

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> V:
        return decoder.expect(value, self._class, self._class.__name__)
