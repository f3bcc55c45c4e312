from dataclasses import dataclass

import pytest

from xmlrpc_serde.exceptions import ArityMismatchError, FaultError, MissingFieldError, TypeMismatchError, ValueTypeError
from xmlrpc_serde.messages import Fault, Request, Response, decode_params, encode_params
from xmlrpc_serde.types import I32, U64
from xmlrpc_serde.value import Array, Double, Int, Str, Struct


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def test_fault_struct() -> None:
    response = Response.failure(4, 'Too many parameters.')
    assert response.is_fault
    assert response.fault == Fault(I32(4), 'Too many parameters.')
    assert response.to_fault_value() == Struct.from_pairs([
        ('faultCode', Int(4)),
        ('faultString', Str('Too many parameters.')),
    ])


def test_fault_round_trip() -> None:
    response = Response.failure(-32601, 'server error. requested method not found')
    assert Response.from_fault_value(response.to_fault_value()) == response


def test_fault_requires_both_members() -> None:
    with pytest.raises(MissingFieldError):
        Response.from_fault_value(Struct.of(faultCode=Int(1)))
    with pytest.raises(TypeMismatchError):
        Response.from_fault_value(Struct.of(faultCode=Str('1'), faultString=Str('boom')))


def test_result_raises_fault() -> None:
    with pytest.raises(FaultError) as exc_info:
        Response.failure(1, 'boom').result()
    assert exc_info.value.code == 1
    assert exc_info.value.message == 'boom'


def test_success() -> None:
    response = Response.success([Int(1), Str('a')])
    assert not response.is_fault
    assert response.result() == (Int(1), Str('a'))
    assert response.decode_result((int, str)) == (1, 'a')
    with pytest.raises(ValueError):
        response.to_fault_value()


def test_request() -> None:
    request = Request.build('geometry.move', (Point, U64), (Point(1.0, 2.5), 2**40))
    assert request.name == 'geometry.move'
    assert request.params == (Struct.of(x=Double(1.0), y=Double(2.5)), Str('1099511627776'))
    assert request.decode_params((Point, U64)) == (Point(1.0, 2.5), 2**40)


def test_params_arity() -> None:
    with pytest.raises(ValueTypeError):
        encode_params((int, int), (1,))
    with pytest.raises(ArityMismatchError):
        decode_params((int,), ())
    assert encode_params((), ()) == ()
    assert decode_params((), ()) == ()


def test_params_error_path() -> None:
    with pytest.raises(TypeMismatchError) as exc_info:
        decode_params((int, str), (Int(1), Array(())))
    assert exc_info.value.path == (1,)
