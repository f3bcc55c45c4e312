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
An enum variant is carried as a struct with exactly one member, the member name is the variant name and the member
value is the variant payload.

Layout: `<struct><member><name>[variant]</name>[payload]</member></struct>`

The payload depends on the kind of variant: an empty struct for a unit variant, the inner value for a newtype
variant, and the encoding of the payload fields for tuple and struct variants. The wire pattern is the same as a
struct with a single field, only the requested type can tell them apart, so this module must only be used when an
enum was requested.

>>> from xmlrpc_serde.value import Double
>>> def encode_double(encoder, value):
...     return Double(value)
>>> def decode_double(decoder, value):
...     return value.value
>>> encoded = encode_variant(Encoder(), 'Circle', 2.0, encode_double)
>>> encoded
Struct(members=(('Circle', Double(value=2.0)),))
>>> decode_variant(Decoder(), encoded, {'Circle': decode_double, 'Square': decode_double})
2.0

>>> decode_variant(Decoder(), Struct.of(Triangle=Double(1.0)), {'Circle': decode_double})
Traceback (most recent call last):
...
xmlrpc_serde.exceptions.UnknownVariantError: unknown variant 'Triangle', expected one of: 'Circle'
>>> decode_variant(Decoder(), Struct(()), {'Circle': decode_double})
Traceback (most recent call last):
...
xmlrpc_serde.exceptions.InvalidVariantShapeError: expected a struct with exactly 1 member for an enum variant, got 0
>>> twice = Struct.from_pairs([('Circle', Double(1.0)), ('Circle', Double(2.0))])
>>> decode_variant(Decoder(), twice, {'Circle': decode_double})
Traceback (most recent call last):
...
xmlrpc_serde.exceptions.DuplicateFieldError: duplicate struct member 'Circle'
"""

from collections.abc import Mapping
from typing import TypeVar

from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import InvalidVariantShapeError, UnknownVariantError
from xmlrpc_serde.value import Struct, Value

from . import DecodeFn, EncodeFn

T = TypeVar('T')
R = TypeVar('R')


def encode_variant(encoder: Encoder, name: str, payload: T, payload_encoder: EncodeFn[T]) -> Struct:
    with encoder.nested(name):
        return Struct(((name, payload_encoder(encoder, payload)),))


def split_variant(decoder: Decoder, value: Value) -> tuple[str, Value]:
    """ Check the wire pattern of a variant and return its name and raw payload.
    """
    struct = decoder.expect(value, Struct, 'enum variant')
    # duplicate names are reported as such, not as a wrong member count
    struct.to_dict()
    if len(struct) != 1:
        raise InvalidVariantShapeError(
            f'expected a struct with exactly 1 member for an enum variant, got {len(struct)}'
        )
    (name, payload), = struct.members
    return name, payload


def decode_variant(decoder: Decoder, value: Value, payload_decoders: Mapping[str, DecodeFn[R]]) -> R:
    name, payload = split_variant(decoder, value)
    payload_decoder = payload_decoders.get(name)
    if payload_decoder is None:
        expected = ', '.join(repr(variant) for variant in payload_decoders)
        raise UnknownVariantError(f'unknown variant {name!r}, expected one of: {expected}')
    with decoder.nested(name):
        return payload_decoder(decoder, payload)
