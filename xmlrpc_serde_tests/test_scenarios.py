from dataclasses import dataclass
from typing import Optional

import pytest

from xmlrpc_serde import decode, encode
from xmlrpc_serde.exceptions import (
    InvalidOptionShapeError,
    InvalidUnitShapeError,
    InvalidVariantShapeError,
    UnknownVariantError,
)
from xmlrpc_serde.types import I32, U64
from xmlrpc_serde.value import Array, Double, Int, Str, Struct


@dataclass(frozen=True)
class Circle:
    radius: float


@dataclass(frozen=True)
class Square:
    side: float


Figure = Circle | Square


@dataclass(frozen=True)
class UnitStruct:
    pass


def test_some_i32() -> None:
    assert encode(5, Optional[I32]) == Array.of(Int(5))
    assert decode(Array.of(Int(5)), Optional[I32]) == 5


def test_none_string() -> None:
    assert encode(None, Optional[str]) == Array.of()


def test_u64_max() -> None:
    assert encode(18_446_744_073_709_551_615, U64) == Str('18446744073709551615')


def test_struct_variant() -> None:
    expected = Struct.of(Circle=Struct.of(radius=Double(2.0)))
    assert encode(Circle(2.0), Figure) == expected
    assert decode(expected, Figure) == Circle(2.0)


def test_unit_struct() -> None:
    assert decode(Struct(()), UnitStruct) == UnitStruct()
    with pytest.raises(InvalidUnitShapeError):
        decode(Struct.of(x=Int(1)), UnitStruct)


def test_option_laws() -> None:
    assert encode(None, Optional[int]) == Array(())
    assert encode(7, Optional[int]) == Array((encode(7, int),))
    for size in (2, 3):
        with pytest.raises(InvalidOptionShapeError):
            decode(Array(tuple(Int(i) for i in range(size))), Optional[int])


def test_option_requires_array() -> None:
    from xmlrpc_serde.exceptions import TypeMismatchError
    with pytest.raises(TypeMismatchError):
        decode(Int(5), Optional[int])


def test_unit_law() -> None:
    assert encode(None, None) == Struct(())
    with pytest.raises(InvalidUnitShapeError):
        decode(Struct.of(a=Int(1)), None)


def test_variant_law() -> None:
    encoded = encode(Square(1.0), Figure)
    assert isinstance(encoded, Struct)
    assert encoded.names() == ('Square',)
    with pytest.raises(UnknownVariantError):
        decode(Struct.of(Triangle=Struct.of(side=Double(1.0))), Figure)


def test_variant_needs_exactly_one_member() -> None:
    with pytest.raises(InvalidVariantShapeError):
        decode(Struct(()), Figure)
    two = Struct.of(Circle=Struct.of(radius=Double(1.0)), Square=Struct.of(side=Double(1.0)))
    with pytest.raises(InvalidVariantShapeError):
        decode(two, Figure)


def test_one_member_struct_is_not_a_variant() -> None:
    # the same wire value decodes differently depending on what is requested
    value = Struct.of(radius=Double(2.0))
    assert decode(value, Circle) == Circle(2.0)
    with pytest.raises(UnknownVariantError):
        decode(value, Figure)


def test_one_element_array_is_not_an_option() -> None:
    value = Array.of(Int(5))
    assert decode(value, list[int]) == [5]
    assert decode(value, Optional[int]) == 5
