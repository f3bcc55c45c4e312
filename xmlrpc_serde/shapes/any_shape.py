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

"""
`typing.Any` is the dynamic shape: values are encoded according to their runtime type and wire values are decoded
to the plain Python value that matches their kind.

>>> from xmlrpc_serde.shapes import make_shape
>>> shape = make_shape(Any)
>>> shape.encode_value({'name': 'foo', 'sizes': [1, 2**40], 'extra': None})
Struct(members=(('name', Str(value='foo')), ('sizes', Array(items=(Int(value=1), Str(value='1099511627776')))), \
('extra', Struct(members=()))))
>>> shape.decode_value(Struct.of(a=Array.of(Bool(True), Double(0.5))))
{'a': [True, 0.5]}

Decoding is not the inverse of encoding here: a wide integer comes back as a string and `None` as an empty dict,
request a more precise type when that matters.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping
from typing import Any

from typing_extensions import Self, override

from xmlrpc_serde.codecs.collection import decode_collection, encode_collection
from xmlrpc_serde.codecs.mapping import decode_mapping, encode_mapping
from xmlrpc_serde.codecs.unit import encode_unit
from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import TypeMismatchError, UnsupportedTypeError, ValueTypeError
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.value import Array, Bool, Bytes, DateTime, Double, Int, Str, Struct, Value

_SEQUENCE_CLASSES = (list, deque, set, frozenset)


def _decode_name(decoder: Decoder, value: Value) -> str:
    return decoder.expect(value, Str, 'member name').value


class AnyShape(Shape[Any]):
    __slots__ = ('_type_map',)

    _is_hashable = True
    _type_map: Shape.TypeMap

    def __init__(self, type_map: Shape.TypeMap) -> None:
        self._type_map = type_map

    @override
    @classmethod
    def _from_type(cls, type_: type[Any], /, *, type_map: Shape.TypeMap) -> Self:
        if type_ is not Any:
            raise UnsupportedTypeError('expected Any')
        return cls(type_map)

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        # anything can be given, what can't be encoded fails when encoding
        pass

    def _runtime_shape(self, value: Any) -> Shape[Any]:
        try:
            return Shape.from_type(type(value), type_map=self._type_map)
        except UnsupportedTypeError as e:
            raise ValueTypeError(f'cannot encode a {type(value).__name__} without a more precise annotation') from e

    @override
    def _encode(self, encoder: Encoder, value: Any, /) -> Value:
        if value is None:
            return encode_unit()
        if isinstance(value, Value):
            return value
        if isinstance(value, Mapping):
            return encode_mapping(encoder, value, self.encode, self.encode)
        # NamedTuples and tuple subclasses go through their own shape
        if isinstance(value, _SEQUENCE_CLASSES) or type(value) is tuple:
            return encode_collection(encoder, value, self.encode)
        return self._runtime_shape(value).encode(encoder, value)

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> Any:
        match value:
            case Bool(inner) | Int(inner) | Str(inner) | Double(inner) | Bytes(inner) | DateTime(inner):
                return inner
            case Array():
                return decode_collection(decoder, value, self.decode, list)
            case Struct():
                return decode_mapping(decoder, value, _decode_name, self.decode, dict)
            case _:
                raise TypeMismatchError(f'expected a wire value, got {type(value).__name__}')
