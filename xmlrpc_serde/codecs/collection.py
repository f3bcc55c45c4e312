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
A variable size collection is carried as an array, in iteration order.

>>> from xmlrpc_serde.value import Str
>>> def encode_str(encoder, value):
...     return Str(value)
>>> def decode_str(decoder, value):
...     return decoder.expect(value, Str, 'text').value
>>> encoded = encode_collection(Encoder(), ['a', 'b'], encode_str)
>>> encoded
Array(items=(Str(value='a'), Str(value='b')))
>>> decode_collection(Decoder(), encoded, decode_str, tuple)
('a', 'b')

Errors inside an element carry the element index:

>>> try:
...     decode_collection(Decoder(), Array.of(Str('a'), Array()), decode_str, list)
... except Exception as e:
...     print(e)
at $[1]: expected text (<string>), got <array>
"""

from collections.abc import Iterable
from typing import Callable, TypeVar

from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.value import Array, Value

from . import DecodeFn, EncodeFn

T = TypeVar('T')
R = TypeVar('R', bound=Iterable)


def encode_collection(encoder: Encoder, values: Iterable[T], value_encoder: EncodeFn[T]) -> Array:
    items: list[Value] = []
    for index, value in enumerate(values):
        with encoder.nested(index):
            items.append(value_encoder(encoder, value))
    return Array(tuple(items))


def decode_collection(
    decoder: Decoder,
    value: Value,
    item_decoder: DecodeFn[T],
    builder: Callable[[Iterable[T]], R],
) -> R:
    array = decoder.expect(value, Array, 'sequence')
    items: list[T] = []
    for index, item in enumerate(array):
        with decoder.nested(index):
            items.append(item_decoder(decoder, item))
    return builder(items)
