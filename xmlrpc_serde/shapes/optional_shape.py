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

from functools import reduce
from operator import or_
from types import NoneType, UnionType
from typing import TypeVar, Union

from typing_extensions import Self, override

from xmlrpc_serde.codecs.optional import decode_optional, encode_optional
from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import UnsupportedTypeError
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.utils.typing import get_args, get_origin
from xmlrpc_serde.value import Value

V = TypeVar('V')


class OptionalShape(Shape[V | None]):
    """ Represents a shape that is either `V` or `None`.

    When the union has more than one type besides `None`, `V` is the union of those types, which is a tagged union.
    """

    __slots__ = ('_is_hashable', '_value')

    _value: Shape[V]

    def __init__(self, shape: Shape[V]) -> None:
        self._value = shape
        self._is_hashable = shape.is_hashable()

    @override
    @classmethod
    def _from_type(cls, type_: type[V | None], /, *, type_map: Shape.TypeMap) -> Self:
        # XXX: `NewType | None` and `Optional[T]` result in typing.Union, not types.UnionType
        if get_origin(type_) not in (Union, UnionType):
            raise UnsupportedTypeError('expected type union')
        args = get_args(type_)
        assert args, 'union always has args'
        if NoneType not in args:
            raise UnsupportedTypeError('type must be `T | None`')
        not_none_types = [arg for arg in args if arg is not NoneType]
        not_none_type = reduce(or_, not_none_types)
        return cls(Shape.from_type(not_none_type, type_map=type_map))

    @override
    def _check_value(self, value: V | None, /, *, deep: bool) -> None:
        if value is None:
            return
        if deep:
            self._value._check_value(value, deep=True)

    @override
    def _encode(self, encoder: Encoder, value: V | None, /) -> Value:
        return encode_optional(encoder, value, self._value.encode)

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> V | None:
        return decode_optional(decoder, value, self._value.decode)
