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

from enum import Enum
from typing import TypeVar

from typing_extensions import Self, override

from xmlrpc_serde.codecs import DecodeFn
from xmlrpc_serde.codecs.unit import decode_unit, encode_unit
from xmlrpc_serde.codecs.variant import decode_variant, encode_variant
from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import UnsupportedTypeError, ValueTypeError
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.utils.typing import is_subclass
from xmlrpc_serde.value import Value

E = TypeVar('E', bound=Enum)


def _unit_payload_encoder(encoder: Encoder, value: object) -> Value:
    return encode_unit()


def _member_decoder(member: E) -> DecodeFn[E]:
    def decode_member(decoder: Decoder, value: Value) -> E:
        decode_unit(decoder, value)
        return member
    return decode_member


class EnumShape(Shape[E]):
    """ Represents `enum.Enum` subclasses, every member is a unit variant named after the member name.

    The member value is not carried, `Color.RED` goes as `{'RED': {}}` whatever `Color.RED.value` is.
    """

    __slots__ = ('_class', '_decoders')

    _is_hashable = True
    _class: type[E]
    _decoders: dict[str, DecodeFn[E]]

    def __init__(self, enum_class: type[E]) -> None:
        self._class = enum_class
        # aliases are accepted when decoding, encoding always uses the canonical name
        self._decoders = {name: _member_decoder(member) for name, member in enum_class.__members__.items()}

    @override
    @classmethod
    def _from_type(cls, type_: type[E], /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, Enum):
            raise UnsupportedTypeError('expected Enum subclass')
        if not type_.__members__:
            raise UnsupportedTypeError(f'{type_.__name__} has no members')
        return cls(type_)

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise ValueTypeError(f'expected {self._class.__name__}, got {type(value).__name__}')

    @override
    def _encode(self, encoder: Encoder, value: E, /) -> Value:
        return encode_variant(encoder, value.name, None, _unit_payload_encoder)

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> E:
        return decode_variant(decoder, value, self._decoders)
