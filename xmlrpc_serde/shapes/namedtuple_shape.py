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

from collections.abc import Iterable
from typing import TypeVar, get_type_hints

from typing_extensions import Self, override

from xmlrpc_serde.codecs.tuple import decode_tuple, encode_tuple
from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import UnsupportedTypeError, ValueTypeError
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.utils.typing import is_subclass
from xmlrpc_serde.value import Value

N = TypeVar('N', bound=tuple)


# XXX: we can't usefully describe the tuple type
class NamedTupleShape(Shape[N]):
    """ Represents `typing.NamedTuple` classes (tuple structs), carried as an array of their fields in order.

    Field names don't go on the wire. Fields with defaults are still required when decoding.
    """

    __slots__ = ('_is_hashable', '_args', '_actual_type')

    _args: tuple[Shape, ...]
    _actual_type: type[N]

    def __init__(self, namedtuple: type[N], args: Iterable[Shape]) -> None:
        self._actual_type = namedtuple
        self._args = tuple(args)
        self._is_hashable = all(arg_shape.is_hashable() for arg_shape in self._args)

    @override
    @classmethod
    def _from_type(cls, type_: type[N], /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, tuple) or not hasattr(type_, '_fields'):
            raise UnsupportedTypeError('expected NamedTuple type')
        hints = get_type_hints(type_)
        field_names: tuple[str, ...] = type_._fields  # type: ignore[attr-defined]
        # collections.namedtuple classes have no annotations
        if any(field_name not in hints for field_name in field_names):
            raise UnsupportedTypeError(f'every field of {type_.__name__} must be annotated')
        args = [hints[field_name] for field_name in field_names]
        return cls(type_, (Shape.from_type(arg, type_map=type_map) for arg in args))

    @override
    def _check_value(self, value: N, /, *, deep: bool) -> None:
        if not isinstance(value, self._actual_type):
            raise ValueTypeError(f'expected {self._actual_type.__name__}, got {type(value).__name__}')
        if deep:
            for i, arg_shape in zip(value, self._args):
                arg_shape._check_value(i, deep=True)

    @override
    def _encode(self, encoder: Encoder, value: N, /) -> Value:
        return encode_tuple(encoder, value, tuple(i.encode for i in self._args))

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> N:
        return self._actual_type(*decode_tuple(decoder, value, tuple(i.decode for i in self._args)))
