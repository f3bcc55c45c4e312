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

from typing_extensions import Self, override

from xmlrpc_serde.codecs.collection import decode_collection, encode_collection
from xmlrpc_serde.codecs.tuple import decode_tuple, encode_tuple
from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import UnsupportedTypeError, ValueTypeError
from xmlrpc_serde.shapes.collection_shape import check_collection
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.utils.typing import get_args, get_origin, is_subclass
from xmlrpc_serde.value import Value


# XXX: we can't usefully describe the tuple type
class TupleShape(Shape[tuple]):
    """ Represents tuple values, which can either be homogeneous-type variable size or heterogeneous-type fixed size.

    >>> from xmlrpc_serde.shapes import make_shape
    >>> from xmlrpc_serde.value import Array, Int
    >>> make_shape(tuple[int, str]).encode_value((1, 'a'))
    Array(items=(Int(value=1), Str(value='a')))
    >>> make_shape(tuple[int, ...]).decode_value(Array.of(Int(1), Int(2), Int(3)))
    (1, 2, 3)
    """

    __slots__ = ('_is_hashable', '_varsize', '_args')

    _varsize: bool
    _args: tuple[Shape, ...]

    def __init__(self, args: Shape | Iterable[Shape]) -> None:
        if isinstance(args, Shape):
            self._varsize = True
            self._args = (args,)
            self._is_hashable = args.is_hashable()
        else:
            self._varsize = False
            self._args = tuple(args)
            self._is_hashable = all(arg_shape.is_hashable() for arg_shape in self._args)

    @override
    @classmethod
    def _from_type(cls, type_: type[tuple], /, *, type_map: Shape.TypeMap) -> Self:
        origin_type: type = get_origin(type_) or type_
        if not is_subclass(origin_type, tuple):
            raise UnsupportedTypeError('expected tuple type')
        args = get_args(type_)
        if args is None:
            raise UnsupportedTypeError('expected tuple[<args...>]')
        if args and args[-1] is Ellipsis:
            if len(args) != 2:
                raise UnsupportedTypeError('ellipsis only allowed with one type: tuple[T, ...]')
            arg, _ellipsis = args
            return cls(Shape.from_type(arg, type_map=type_map))
        else:
            return cls(tuple(Shape.from_type(arg, type_map=type_map) for arg in args))

    @override
    def _check_value(self, value: tuple, /, *, deep: bool) -> None:
        if self._varsize:
            check_collection(value)
        elif not isinstance(value, (tuple, list)):
            raise ValueTypeError(f'expected tuple, got {type(value).__name__}')
        elif len(value) != len(self._args):
            raise ValueTypeError(f'expected a tuple with {len(self._args)} elements, got {len(value)}')
        if deep:
            if self._varsize:
                arg_shape, = self._args
                for i in value:
                    arg_shape._check_value(i, deep=True)
            else:
                for i, arg_shape in zip(value, self._args):
                    arg_shape._check_value(i, deep=True)

    @override
    def _encode(self, encoder: Encoder, value: tuple, /) -> Value:
        if self._varsize:
            return encode_collection(encoder, value, self._args[0].encode)
        else:
            return encode_tuple(encoder, tuple(value), tuple(i.encode for i in self._args))

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> tuple:
        if self._varsize:
            return decode_collection(decoder, value, self._args[0].decode, tuple)
        else:
            return decode_tuple(decoder, value, tuple(i.decode for i in self._args))
