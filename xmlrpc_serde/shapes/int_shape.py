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
Integer shapes.

Python has a single `int`, the width comes from the annotation (see `xmlrpc_serde.types`). Widths that always fit an
`<i4>` are carried as one, wider widths are carried as a decimal string even when the actual value is small, so the
wire kind never depends on the value. The plain `int` annotation has no width, it's carried as an `<i4>` when the value
fits and as a decimal string otherwise.

>>> from xmlrpc_serde.types import U16, U64
>>> from xmlrpc_serde.shapes import make_shape
>>> make_shape(U16).encode_value(65535)
Int(value=65535)
>>> make_shape(U64).encode_value(1)
Str(value='1')
>>> make_shape(int).encode_value(2**31 - 1), make_shape(int).encode_value(2**31)
(Int(value=2147483647), Str(value='2147483648'))
"""

from __future__ import annotations

from typing import ClassVar

from typing_extensions import Self, override

from xmlrpc_serde.codecs.integer import check_range, decode_decimal, encode_decimal, parse_decimal
from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import TypeMismatchError, UnsupportedTypeError, ValueTypeError
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.utils.typing import is_subclass, newtype_runtime_class
from xmlrpc_serde.value import Int, Str, Value, fits_int


def _check_int(value: int) -> None:
    # bool is a subclass of int, but True is not a valid U8
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueTypeError(f'expected integer, got {type(value).__name__}')


class _SizedIntShape(Shape[int]):
    """ Base class for shapes that represent `int` values with a fixed size and signedness.
    """

    _is_hashable = True
    # XXX: subclass must define these values:
    _type_name: ClassVar[str]
    _signed: ClassVar[bool]
    _bit_size: ClassVar[int]
    # whether values are carried as a decimal string instead of an <i4>
    _decimal: ClassVar[bool]

    @classmethod
    def _upper_bound_value(cls) -> int:
        if cls._signed:
            return 2**(cls._bit_size - 1) - 1
        else:
            return 2**cls._bit_size - 1

    @classmethod
    def _lower_bound_value(cls) -> int:
        if cls._signed:
            return -(2**(cls._bit_size - 1))
        else:
            return 0

    @override
    @classmethod
    def _from_type(cls, type_: type[int], /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(newtype_runtime_class(type_), int):
            raise UnsupportedTypeError('expected int type')
        return cls()

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        _check_int(value)

    def _check_range(self, value: int) -> int:
        return check_range(value, self._lower_bound_value(), self._upper_bound_value(), self._type_name)

    @override
    def _encode(self, encoder: Encoder, value: int, /) -> Value:
        self._check_range(value)
        if self._decimal:
            return encode_decimal(value)
        return Int(value)

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> int:
        if self._decimal:
            number = decode_decimal(decoder, value)
        else:
            number = decoder.expect(value, Int, f'{self._type_name} integer').value
        return self._check_range(number)


class Int8Shape(_SizedIntShape):
    _type_name = 'I8'
    _signed = True
    _bit_size = 8
    _decimal = False


class Int16Shape(_SizedIntShape):
    _type_name = 'I16'
    _signed = True
    _bit_size = 16
    _decimal = False


class Int32Shape(_SizedIntShape):
    _type_name = 'I32'
    _signed = True
    _bit_size = 32
    _decimal = False


class Int64Shape(_SizedIntShape):
    _type_name = 'I64'
    _signed = True
    _bit_size = 64
    _decimal = True


class Uint8Shape(_SizedIntShape):
    _type_name = 'U8'
    _signed = False
    _bit_size = 8
    _decimal = False


class Uint16Shape(_SizedIntShape):
    _type_name = 'U16'
    _signed = False
    _bit_size = 16
    _decimal = False


class Uint32Shape(_SizedIntShape):
    # XXX: values above 2**31 - 1 don't fit an <i4>, so the whole width goes as text
    _type_name = 'U32'
    _signed = False
    _bit_size = 32
    _decimal = True


class Uint64Shape(_SizedIntShape):
    _type_name = 'U64'
    _signed = False
    _bit_size = 64
    _decimal = True


class IntShape(Shape[int]):
    """ Represents builtin `int` values, which have no declared width.

    Decoding accepts both forms, regardless of the value.
    """

    _is_hashable = True

    @override
    @classmethod
    def _from_type(cls, type_: type[int], /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(newtype_runtime_class(type_), int):
            raise UnsupportedTypeError('expected int type')
        return cls()

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        _check_int(value)

    @override
    def _encode(self, encoder: Encoder, value: int, /) -> Value:
        if fits_int(value):
            return Int(value)
        return encode_decimal(value)

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> int:
        if isinstance(value, Int):
            return value.value
        if isinstance(value, Str):
            return parse_decimal(value.value)
        raise TypeMismatchError(f'expected integer (<i4> or <string>), got <{value.kind}>')
