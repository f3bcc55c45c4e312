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
A struct with named fields (a dataclass) is carried as a struct, fields in declaration order.

Decoding addresses members by name, so the order of the incoming members doesn't matter. What to do with members
that have no matching field and with fields that have no matching member is a policy decision of the caller: this
module rejects unknown members only when asked to, and returns the decoded members so the caller can check what's
missing.

>>> from xmlrpc_serde.value import Int
>>> def encode_int(encoder, value):
...     return Int(value)
>>> def decode_int(decoder, value):
...     return decoder.expect(value, Int, 'integer').value
>>> encode_struct(Encoder(), [('x', 1, encode_int), ('y', 2, encode_int)])
Struct(members=(('x', Int(value=1)), ('y', Int(value=2))))
>>> decode_struct(Decoder(), Struct.of(y=Int(2), x=Int(1)), {'x': decode_int, 'y': decode_int}, strict=True)
{'y': 2, 'x': 1}
>>> decode_struct(Decoder(), Struct.of(x=Int(1), z=Int(3)), {'x': decode_int, 'y': decode_int}, strict=False)
{'x': 1}
>>> decode_struct(Decoder(), Struct.of(x=Int(1), z=Int(3)), {'x': decode_int, 'y': decode_int}, strict=True)
Traceback (most recent call last):
...
xmlrpc_serde.exceptions.UnknownFieldError: unknown field 'z', expected one of: 'x', 'y'
"""

from collections.abc import Iterable, Mapping
from typing import Any

from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import UnknownFieldError
from xmlrpc_serde.value import Struct, Value

from . import DecodeFn, EncodeFn


def encode_struct(encoder: Encoder, fields: Iterable[tuple[str, Any, EncodeFn[Any]]]) -> Struct:
    members: list[tuple[str, Value]] = []
    for name, value, value_encoder in fields:
        with encoder.nested(name):
            members.append((name, value_encoder(encoder, value)))
    return Struct(tuple(members))


def decode_struct(
    decoder: Decoder,
    value: Value,
    field_decoders: Mapping[str, DecodeFn[Any]],
    *,
    strict: bool,
) -> dict[str, Any]:
    struct = decoder.expect(value, Struct, 'struct')
    decoded: dict[str, Any] = {}
    for name, member in struct.to_dict().items():
        field_decoder = field_decoders.get(name)
        if field_decoder is None:
            if strict:
                expected = ', '.join(repr(field_name) for field_name in field_decoders)
                raise UnknownFieldError(f'unknown field {name!r}, expected one of: {expected}')
            continue
        with decoder.nested(name):
            decoded[name] = field_decoder(decoder, member)
    return decoded
