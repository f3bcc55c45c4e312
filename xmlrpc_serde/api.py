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

from typing import Any, TypeVar, overload

from xmlrpc_serde.conf.settings import CodecSettings
from xmlrpc_serde.shapes import make_shape
from xmlrpc_serde.value import Value

T = TypeVar('T')


def encode(value: Any, type_: Any = Any, /, *, settings: CodecSettings | None = None) -> Value:
    """ Encode a Python value into an XML-RPC value, guided by the given annotation.

    Without an annotation the runtime type of the value is used, which is enough for builtin values, dataclasses,
    enums and named tuples, but can't tell `U64` from `int` or `Char` from `str`.

    >>> from xmlrpc_serde.types import I32, U64
    >>> encode(5, I32 | None)
    Array(items=(Int(value=5),))
    >>> encode(None, str | None)
    Array(items=())
    >>> encode(18_446_744_073_709_551_615, U64)
    Str(value='18446744073709551615')
    """
    return make_shape(type_).encode_value(value, settings=settings)


@overload
def decode(value: Value, type_: type[T], /, *, settings: CodecSettings | None = None) -> T:
    ...


@overload
def decode(value: Value, type_: Any, /, *, settings: CodecSettings | None = None) -> Any:
    ...


def decode(value: Value, type_: Any, /, *, settings: CodecSettings | None = None) -> Any:
    """ Decode an XML-RPC value into the given annotation.

    The same wire value can decode into different things depending on the annotation, there is no guessing
    involved: an array with one element is a list when a list is requested and an option when an option is.

    >>> from xmlrpc_serde.types import I32
    >>> from xmlrpc_serde.value import Array, Int
    >>> decode(Array.of(Int(5)), I32 | None)
    5
    >>> decode(Array.of(Int(5)), list[int])
    [5]
    """
    return make_shape(type_).decode_value(value, settings=settings)
