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
Value-level model of XML-RPC calls and responses, and the typed conversion of their parameters.

Rendering these as XML documents and sending them around is left to the transport layer.

>>> from xmlrpc_serde.types import I32
>>> request = Request.build('sample.add', (I32, I32), (5, 3))
>>> request
Request(name='sample.add', params=(Int(value=5), Int(value=3)))
>>> request.decode_params((int, int))
(5, 3)
>>> Response.failure(4, 'Too many parameters.').to_fault_value()
Struct(members=(('faultCode', Int(value=4)), ('faultString', Str(value='Too many parameters.'))))
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from xmlrpc_serde.conf.settings import CodecSettings
from xmlrpc_serde.exceptions import FaultError, ValueTypeError
from xmlrpc_serde.shapes import make_shape
from xmlrpc_serde.types import I32
from xmlrpc_serde.value import Array, Struct, Value


def encode_params(
    types: Sequence[Any],
    values: Sequence[Any],
    *,
    settings: CodecSettings | None = None,
) -> tuple[Value, ...]:
    """ Encode positional parameters, each with its own annotation.
    """
    if len(types) != len(values):
        raise ValueTypeError(f'expected {len(types)} parameters, got {len(values)}')
    encoded = make_shape(tuple[*types]).encode_value(tuple(values), settings=settings)
    assert isinstance(encoded, Array)
    return encoded.items


def decode_params(
    types: Sequence[Any],
    params: Sequence[Value],
    *,
    settings: CodecSettings | None = None,
) -> tuple[Any, ...]:
    """ Decode positional parameters, the number of parameters must match the number of annotations.

    >>> from xmlrpc_serde.value import Int
    >>> decode_params((int,), (Int(1), Int(2)))
    Traceback (most recent call last):
    ...
    xmlrpc_serde.exceptions.ArityMismatchError: expected an array with 1 elements, got 2
    """
    return make_shape(tuple[*types]).decode_value(Array(tuple(params)), settings=settings)


@dataclass(frozen=True, slots=True)
class Fault:
    code: I32 = field(metadata={'rename': 'faultCode'})
    message: str = field(metadata={'rename': 'faultString'})


@dataclass(frozen=True, slots=True)
class Request:
    """ A method call: the method name and its parameters.
    """

    name: str
    params: tuple[Value, ...] = ()

    @classmethod
    def build(
        cls,
        name: str,
        types: Sequence[Any],
        values: Sequence[Any],
        *,
        settings: CodecSettings | None = None,
    ) -> Request:
        return cls(name, encode_params(types, values, settings=settings))

    def decode_params(self, types: Sequence[Any], *, settings: CodecSettings | None = None) -> tuple[Any, ...]:
        return decode_params(types, self.params, settings=settings)


@dataclass(frozen=True, slots=True)
class Response:
    """ A method response, either the result parameters or a fault.
    """

    params: tuple[Value, ...] = ()
    fault: Fault | None = None

    @classmethod
    def success(cls, params: Sequence[Value]) -> Response:
        return cls(params=tuple(params))

    @classmethod
    def failure(cls, code: int, message: str) -> Response:
        return cls(fault=Fault(I32(code), message))

    @property
    def is_fault(self) -> bool:
        return self.fault is not None

    def result(self) -> tuple[Value, ...]:
        """ The result parameters, raises FaultError if this is a fault response.
        """
        if self.fault is not None:
            raise FaultError(self.fault.code, self.fault.message)
        return self.params

    def decode_result(self, types: Sequence[Any], *, settings: CodecSettings | None = None) -> tuple[Any, ...]:
        return decode_params(types, self.result(), settings=settings)

    def to_fault_value(self, *, settings: CodecSettings | None = None) -> Struct:
        """ The struct that goes inside `<fault>`.
        """
        if self.fault is None:
            raise ValueError('not a fault response')
        encoded = make_shape(Fault).encode_value(self.fault, settings=settings)
        assert isinstance(encoded, Struct)
        return encoded

    @classmethod
    def from_fault_value(cls, value: Value, *, settings: CodecSettings | None = None) -> Response:
        """ Build a fault response from the struct found inside `<fault>`.

        >>> from xmlrpc_serde.value import Int, Str
        >>> Response.from_fault_value(Struct.of(faultString=Str('boom'), faultCode=Int(1)))
        Response(params=(), fault=Fault(code=1, message='boom'))
        """
        return cls(fault=make_shape(Fault).decode_value(value, settings=settings))
