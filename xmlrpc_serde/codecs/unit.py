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

r"""
Unit values (`None`, dataclasses without fields, unit variants) are carried as an empty struct.

>>> encode_unit()
Struct(members=())
>>> decode_unit(Decoder(), Struct(()))
>>> from xmlrpc_serde.value import Int
>>> decode_unit(Decoder(), Struct.of(x=Int(1)))
Traceback (most recent call last):
...
xmlrpc_serde.exceptions.InvalidUnitShapeError: expected an empty struct for a unit value, got members ['x']
"""

from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.exceptions import InvalidUnitShapeError
from xmlrpc_serde.value import Struct, Value

_EMPTY_STRUCT = Struct(())


def encode_unit() -> Struct:
    return _EMPTY_STRUCT


def decode_unit(decoder: Decoder, value: Value) -> None:
    struct = decoder.expect(value, Struct, 'unit')
    if len(struct) != 0:
        raise InvalidUnitShapeError(f'expected an empty struct for a unit value, got members {list(struct.names())}')
