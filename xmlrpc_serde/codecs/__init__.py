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

"""
This package holds the wire patterns that both directions must agree on.

Each submodule deals with a single pattern and is organized like this:

    def encode_x(encoder: Encoder, value: PythonType, ...config params...) -> Value:
        ...

    def decode_x(decoder: Decoder, value: Value, ...config params...) -> PythonType:
        ...

Compound patterns (options, variants, arrays, structs) delegate the inner values to callables that follow the
`EncodeFn`/`DecodeFn` protocols, usually the bound `Shape.encode`/`Shape.decode` of the inner shape. Submodules do
not know how annotations are mapped to shapes.
"""

from typing import Protocol, TypeVar

from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.value import Value

T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)


class DecodeFn(Protocol[T_co]):
    def __call__(self, decoder: Decoder, value: Value, /) -> T_co:
        ...


class EncodeFn(Protocol[T_contra]):
    def __call__(self, encoder: Encoder, value: T_contra, /) -> Value:
        ...
