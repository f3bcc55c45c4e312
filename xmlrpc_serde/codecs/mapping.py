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
A mapping is carried as a struct, each entry is a member, in iteration order.

Member names are text, so every key must encode to something that can be written as text. Keys are encoded with the
key encoder: a string is used as the member name as is, and integers and booleans are written as their decimal or
`true`/`false` text. That way `dict[U64, T]`, `dict[I32, T]` and `dict[bool, T]` all work. On the way back the key
decoder is applied to the member name wrapped as a string value, and when the key shape wants an integer or a
boolean instead, the name is read back as one.

>>> from xmlrpc_serde.value import Bool, Double, Int, Str
>>> def encode_str(encoder, value):
...     return Str(value)
>>> def encode_int(encoder, value):
...     return Int(value)
>>> def encode_bool(encoder, value):
...     return Bool(value)
>>> def encode_double(encoder, value):
...     return Double(value)
>>> def decode_str(decoder, value):
...     return decoder.expect(value, Str, 'text').value
>>> def decode_int(decoder, value):
...     return decoder.expect(value, Int, 'integer').value
>>> def decode_bool(decoder, value):
...     return decoder.expect(value, Bool, 'boolean').value
>>> encoded = encode_mapping(Encoder(), {'foo': False, 'bar': True}, encode_str, encode_bool)
>>> encoded
Struct(members=(('foo', Bool(value=False)), ('bar', Bool(value=True))))
>>> decode_mapping(Decoder(), encoded, decode_str, decode_bool, dict)
{'foo': False, 'bar': True}

>>> encoded = encode_mapping(Encoder(), {12: True, -33: False}, encode_int, encode_bool)
>>> encoded
Struct(members=(('12', Bool(value=True)), ('-33', Bool(value=False))))
>>> decode_mapping(Decoder(), encoded, decode_int, decode_bool, dict)
{12: True, -33: False}
>>> encode_mapping(Encoder(), {True: 1, False: 0}, encode_bool, encode_int)
Struct(members=(('true', Int(value=1)), ('false', Int(value=0))))

>>> encode_mapping(Encoder(), {1.5: True}, encode_double, encode_bool)
Traceback (most recent call last):
...
xmlrpc_serde.exceptions.UnsupportedKeyError: map key 1.5 encodes as <double>, struct member names must be text
>>> decode_mapping(Decoder(), Struct.from_pairs([('a', Bool(True)), ('a', Bool(False))]), decode_str, decode_bool, dict)
Traceback (most recent call last):
...
xmlrpc_serde.exceptions.DuplicateFieldError: duplicate struct member 'a'
"""

from collections.abc import Iterable, Mapping
from typing import Callable, TypeVar

from xmlrpc_serde.codecs.integer import parse_decimal
from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import EncodeError, InvalidIntegerError, TypeMismatchError, UnsupportedKeyError
from xmlrpc_serde.value import Bool, Int, Str, Struct, Value

from . import DecodeFn, EncodeFn

KT = TypeVar('KT')
VT = TypeVar('VT')
R = TypeVar('R', bound=Mapping)

_BOOL_NAMES = {'true': True, 'false': False}


def encode_key(encoder: Encoder, key: KT, key_encoder: EncodeFn[KT]) -> str:
    """ Encode a map key into a struct member name.
    """
    encoded = key_encoder(encoder, key)
    match encoded:
        case Str(text):
            return text
        case Int(number):
            return str(number)
        case Bool(flag):
            return 'true' if flag else 'false'
        case _:
            raise UnsupportedKeyError(f'map key {key!r} encodes as <{encoded.kind}>, struct member names must be text')


def _name_as_value(name: str) -> Value | None:
    """ Read a member name back as the scalar it was written from, if it looks like one.
    """
    if name in _BOOL_NAMES:
        return Bool(_BOOL_NAMES[name])
    try:
        number = parse_decimal(name)
    except InvalidIntegerError:
        return None
    return Int(number)


def decode_key(decoder: Decoder, name: str, key_decoder: DecodeFn[KT]) -> KT:
    """ Decode a struct member name into a map key.
    """
    try:
        return key_decoder(decoder, Str(name))
    except TypeMismatchError:
        value = _name_as_value(name)
        if value is None:
            raise
    return key_decoder(decoder, value)


def encode_mapping(
    encoder: Encoder,
    values_mapping: Mapping[KT, VT],
    key_encoder: EncodeFn[KT],
    value_encoder: EncodeFn[VT],
) -> Struct:
    members: dict[str, Value] = {}
    for key, value in values_mapping.items():
        name = encode_key(encoder, key, key_encoder)
        if name in members:
            raise EncodeError(f'map key {key!r} collides with another key as member name {name!r}')
        with encoder.nested(name):
            members[name] = value_encoder(encoder, value)
    return Struct(tuple(members.items()))


def decode_mapping(
    decoder: Decoder,
    value: Value,
    key_decoder: DecodeFn[KT],
    value_decoder: DecodeFn[VT],
    mapping_builder: Callable[[Iterable[tuple[KT, VT]]], R],
) -> R:
    struct = decoder.expect(value, Struct, 'map')
    items: list[tuple[KT, VT]] = []
    for name, member in struct.to_dict().items():
        with decoder.nested(name):
            items.append((decode_key(decoder, name, key_decoder), value_decoder(decoder, member)))
    return mapping_builder(items)
