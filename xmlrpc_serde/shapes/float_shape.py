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
from xmlrpc_serde.exceptions import UnsupportedTypeError, ValueTypeError
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.value import Double, Int, Value


class FloatShape(Shape[float]):
    """ Represents builtin `float` values, an `int` is accepted where a `float` is expected, like the type checkers do.
    """

    _is_hashable = True

    @override
    @classmethod
    def _from_type(cls, type_: type[float], /, *, type_map: Shape.TypeMap) -> Self:
        if type_ is not float:
            raise UnsupportedTypeError('expected float type')
        return cls()

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        if not isinstance(value, (float, int)) or isinstance(value, bool):
            raise ValueTypeError(f'expected float, got {type(value).__name__}')

    @override
    def _encode(self, encoder: Encoder, value: float, /) -> Value:
        return Double(float(value))

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> float:
        if isinstance(value, Int) and decoder.settings.DOUBLE_ACCEPTS_INT:
            return float(value.value)
        return decoder.expect(value, Double, 'float').value
