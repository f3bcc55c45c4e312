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

from datetime import datetime

from typing_extensions import Self, override

from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import UnsupportedTypeError, ValueTypeError
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.value import DateTime, Value


class DateTimeShape(Shape[datetime]):
    """ Represents `datetime.datetime` values with the `<dateTime.iso8601>` extension.

    The wire format has no timezone, handling the offset (if any) is left to the XML layer.
    """

    _is_hashable = True

    @override
    @classmethod
    def _from_type(cls, type_: type[datetime], /, *, type_map: Shape.TypeMap) -> Self:
        if type_ is not datetime:
            raise UnsupportedTypeError('expected datetime type')
        return cls()

    @override
    def _check_value(self, value: datetime, /, *, deep: bool) -> None:
        if not isinstance(value, datetime):
            raise ValueTypeError(f'expected datetime, got {type(value).__name__}')

    @override
    def _encode(self, encoder: Encoder, value: datetime, /) -> Value:
        return DateTime(value)

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> datetime:
        return decoder.expect(value, DateTime, 'datetime').value
