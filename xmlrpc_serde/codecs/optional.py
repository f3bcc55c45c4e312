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
XML-RPC has no null, an optional value is carried as an array with zero or one element.

Layout: `None` is `<array><data/></array>`, `x` is `<array><data>[x]</data></array>`

>>> from xmlrpc_serde.value import Int
>>> def encode_int(encoder, value):
...     return Int(value)
>>> def decode_int(decoder, value):
...     return value.value
>>> encode_optional(Encoder(), None, encode_int)
Array(items=())
>>> encode_optional(Encoder(), 5, encode_int)
Array(items=(Int(value=5),))

>>> decode_optional(Decoder(), Array(()), decode_int) is None
True
>>> decode_optional(Decoder(), Array((Int(5),)), decode_int)
5
>>> decode_optional(Decoder(), Array((Int(5), Int(6))), decode_int)
Traceback (most recent call last):
...
xmlrpc_serde.exceptions.InvalidOptionShapeError: expected an array with 0 or 1 elements for an option, got 2

Since `None` is the absent marker, nested options collapse: `Some(None)` can't be told apart from `None` in Python.
"""

from typing import TypeVar

from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import InvalidOptionShapeError
from xmlrpc_serde.value import Array, Value

from . import DecodeFn, EncodeFn

T = TypeVar('T')


def encode_optional(encoder: Encoder, value: T | None, inner_encoder: EncodeFn[T]) -> Array:
    if value is None:
        return Array(())
    with encoder.nested(0):
        return Array((inner_encoder(encoder, value),))


def decode_optional(decoder: Decoder, value: Value, inner_decoder: DecodeFn[T]) -> T | None:
    array = decoder.expect(value, Array, 'option')
    match len(array):
        case 0:
            return None
        case 1:
            with decoder.nested(0):
                return inner_decoder(decoder, array.items[0])
        case size:
            raise InvalidOptionShapeError(f'expected an array with 0 or 1 elements for an option, got {size}')
