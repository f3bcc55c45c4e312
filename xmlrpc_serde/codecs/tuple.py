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
In Python a tuple type can be used in annotations in 2 different ways:

1. `tuple[A, B, C]`: known fixed length and heterogeneous types
2. `tuple[X, ...]`: variable length and homogeneous type

This module implements the first case (also used by NamedTuples), the second case is a collection. On the wire both
are an array, the difference is that decoding a fixed size tuple checks the length.

>>> from xmlrpc_serde.value import Bool, Int
>>> def encode_int(encoder, value):
...     return Int(value)
>>> def encode_bool(encoder, value):
...     return Bool(value)
>>> def decode_any(decoder, value):
...     return value.value
>>> encode_tuple(Encoder(), (1, True), (encode_int, encode_bool))
Array(items=(Int(value=1), Bool(value=True)))
>>> decode_tuple(Decoder(), Array.of(Int(1), Bool(True)), (decode_any, decode_any))
(1, True)
>>> decode_tuple(Decoder(), Array.of(Int(1)), (decode_any, decode_any))
Traceback (most recent call last):
...
xmlrpc_serde.exceptions.ArityMismatchError: expected an array with 2 elements, got 1
"""

from typing import Any

from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import ArityMismatchError
from xmlrpc_serde.value import Array, Value

from . import DecodeFn, EncodeFn


def encode_tuple(encoder: Encoder, values: tuple[Any, ...], encoders: tuple[EncodeFn[Any], ...]) -> Array:
    assert len(values) == len(encoders)
    items: list[Value] = []
    for index, (value, value_encoder) in enumerate(zip(values, encoders)):
        with encoder.nested(index):
            items.append(value_encoder(encoder, value))
    return Array(tuple(items))


def decode_tuple(decoder: Decoder, value: Value, decoders: tuple[DecodeFn[Any], ...]) -> tuple[Any, ...]:
    array = decoder.expect(value, Array, 'tuple')
    if len(array) != len(decoders):
        raise ArityMismatchError(f'expected an array with {len(decoders)} elements, got {len(array)}')
    items: list[Any] = []
    for index, (item, item_decoder) in enumerate(zip(array, decoders)):
        with decoder.nested(index):
            items.append(item_decoder(decoder, item))
    return tuple(items)
