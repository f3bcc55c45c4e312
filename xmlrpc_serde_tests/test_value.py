import pytest

from xmlrpc_serde.exceptions import DuplicateFieldError, IntegerOutOfRangeError
from xmlrpc_serde.value import INT_MAX, INT_MIN, Array, Bytes, Int, Str, Struct


def test_int_bounds() -> None:
    Int(INT_MIN)
    Int(INT_MAX)
    with pytest.raises(IntegerOutOfRangeError):
        Int(INT_MAX + 1)
    with pytest.raises(IntegerOutOfRangeError):
        Int(INT_MIN - 1)


def test_array_order_matters() -> None:
    assert Array.of(Int(1), Int(2)) != Array.of(Int(2), Int(1))
    assert list(Array.of(Int(1), Int(2))) == [Int(1), Int(2)]


def test_struct_lookup() -> None:
    struct = Struct.of(a=Int(1), b=Str('x'))
    assert struct.get('b') == Str('x')
    assert struct.get('c') is None
    assert struct.to_dict() == {'a': Int(1), 'b': Str('x')}
    assert len(struct) == 2


def test_struct_duplicates() -> None:
    struct = Struct.from_pairs([('a', Int(1)), ('a', Int(2))])
    assert struct.names() == ('a', 'a')
    with pytest.raises(DuplicateFieldError):
        struct.to_dict()


def test_immutable() -> None:
    from dataclasses import FrozenInstanceError
    value = Bytes(b'\x00')
    with pytest.raises(FrozenInstanceError):
        value.value = b'\x01'  # type: ignore[misc]


def test_hashable() -> None:
    assert len({Struct.of(a=Int(1)), Struct.of(a=Int(1))}) == 1
