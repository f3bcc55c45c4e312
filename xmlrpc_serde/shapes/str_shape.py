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

from typing_extensions import Self, override

from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import InvalidCharError, UnsupportedTypeError, ValueTypeError
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.utils.typing import newtype_runtime_class
from xmlrpc_serde.value import Str, Value


class StrShape(Shape[str]):
    """ Represents builtin `str` values.
    """

    _is_hashable = True

    @override
    @classmethod
    def _from_type(cls, type_: type[str], /, *, type_map: Shape.TypeMap) -> Self:
        if type_ is not str:
            raise UnsupportedTypeError('expected str type')
        return cls()

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise ValueTypeError(f'expected str, got {type(value).__name__}')

    @override
    def _encode(self, encoder: Encoder, value: str, /) -> Value:
        return Str(value)

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> str:
        return decoder.expect(value, Str, 'text').value


class CharShape(StrShape):
    """ Represents a `str` with exactly one Unicode scalar value.

    >>> from xmlrpc_serde.types import Char
    >>> from xmlrpc_serde.shapes import make_shape
    >>> make_shape(Char).decode_value(Str('ab'))
    Traceback (most recent call last):
    ...
    xmlrpc_serde.exceptions.InvalidCharError: expected a single character, got 2
    """

    @override
    @classmethod
    def _from_type(cls, type_: type[str], /, *, type_map: Shape.TypeMap) -> Self:
        if newtype_runtime_class(type_) is not str:
            raise UnsupportedTypeError('expected a NewType of str')
        return cls()

    @staticmethod
    def _check_char(text: str) -> str:
        if len(text) != 1:
            raise InvalidCharError(f'expected a single character, got {len(text)}')
        # lone surrogates are code points but not scalar values
        if 0xD800 <= ord(text) <= 0xDFFF:
            raise InvalidCharError(f'expected a single character, got the surrogate {ord(text):#x}')
        return text

    @override
    def _encode(self, encoder: Encoder, value: str, /) -> Value:
        return super()._encode(encoder, self._check_char(value))

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> str:
        return self._check_char(decoder.expect(value, Str, 'char').value)
