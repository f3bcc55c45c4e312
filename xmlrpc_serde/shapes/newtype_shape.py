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
from xmlrpc_serde.exceptions import UnsupportedTypeError
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.utils.typing import is_newtype
from xmlrpc_serde.value import Value

T = TypeVar('T')


class NewTypeShape(Shape[T]):
    """ Represents a `typing.NewType`, the wrapper is transparent and values are carried like the wrapped type.

    Only NewTypes that are not in the type map get this shape, the integer widths and `Char` have their own.
    """

    __slots__ = ('_is_hashable', '_inner')

    _inner: Shape[T]

    def __init__(self, inner: Shape[T]) -> None:
        self._inner = inner
        self._is_hashable = inner.is_hashable()

    @override
    @classmethod
    def _from_type(cls, type_: type[T], /, *, type_map: Shape.TypeMap) -> Self:
        if not is_newtype(type_):
            raise UnsupportedTypeError('expected a NewType')
        return cls(Shape.from_type(type_.__supertype__, type_map=type_map))

    @override
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        self._inner._check_value(value, deep=deep)

    @override
    def _encode(self, encoder: Encoder, value: T, /) -> Value:
        return self._inner.encode(encoder, value)

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> T:
        return self._inner.decode(decoder, value)
