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

from types import NoneType

from typing_extensions import Self, override

from xmlrpc_serde.codecs.unit import decode_unit, encode_unit
from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import UnsupportedTypeError, ValueTypeError
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.value import Value


class UnitShape(Shape[None]):
    _is_hashable = True

    @override
    @classmethod
    def _from_type(cls, type_: type[None], /, *, type_map: Shape.TypeMap) -> Self:
        # XXX: usually we expect NoneType as type_, but in some cases it can come-in as None, and we take that too
        if type_ is None or type_ is NoneType:
            return cls()
        raise UnsupportedTypeError('expected None type')

    @override
    def _check_value(self, value: None, /, *, deep: bool) -> None:
        if value is not None:
            raise ValueTypeError(f'expected None, got {type(value).__name__}')

    @override
    def _encode(self, encoder: Encoder, value: None, /) -> Value:
        return encode_unit()

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> None:
        decode_unit(decoder, value)
