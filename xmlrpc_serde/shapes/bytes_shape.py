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
from xmlrpc_serde.value import Bytes, Value


class BytesShape(Shape[bytes]):
    """ Represents builtin `bytes` and `bytearray` values, decoding builds the annotated class.
    """

    __slots__ = ('_is_hashable', '_class')

    _class: type[bytes] | type[bytearray]

    def __init__(self, class_: type[bytes] | type[bytearray]) -> None:
        self._class = class_
        self._is_hashable = class_ is bytes

    @override
    @classmethod
    def _from_type(cls, type_: type[bytes], /, *, type_map: Shape.TypeMap) -> Self:
        if type_ is not bytes and type_ is not bytearray:
            raise UnsupportedTypeError('expected bytes or bytearray type')
        return cls(type_)

    @override
    def _check_value(self, value: bytes, /, *, deep: bool) -> None:
        if not isinstance(value, (bytes, bytearray)):
            raise ValueTypeError(f'expected bytes, got {type(value).__name__}')

    @override
    def _encode(self, encoder: Encoder, value: bytes, /) -> Value:
        return Bytes(bytes(value))

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> bytes:
        return self._class(decoder.expect(value, Bytes, 'byte sequence').value)
