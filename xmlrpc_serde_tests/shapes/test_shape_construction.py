from collections import abc, namedtuple
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple, NewType, Optional

from xmlrpc_serde.exceptions import UnsupportedTypeError, ValueTypeError
from xmlrpc_serde.shapes import (
    AnyShape,
    DictShape,
    ListShape,
    NewTypeShape,
    OptionalShape,
    Shape,
    TaggedUnionShape,
    make_shape,
)
from xmlrpc_serde.types import U64
from xmlrpc_serde.value import Array, Int, Struct
from xmlrpc_serde_tests import unittest

Celsius = NewType('Celsius', float)
Fahrenheit = NewType('Fahrenheit', float)


class Empty(Enum):
    pass


@dataclass(frozen=True)
class Left:
    value: int


@dataclass(frozen=True)
class Right:
    value: int


@dataclass
class Mutable:
    value: int


class Pair(NamedTuple):
    first: str
    second: Optional[int]


Untyped = namedtuple('Untyped', ['a', 'b'])


@dataclass
class Unresolvable:
    value: 'DoesNotExist'  # type: ignore[name-defined]  # noqa: F821


class ShapeConstructionTestCase(unittest.TestCase):
    def test_missing_type_arguments(self) -> None:
        for type_ in (list, set, dict, tuple, frozenset, abc.Sequence):
            with self.assertRaises(UnsupportedTypeError):
                make_shape(type_)

    def test_unsupported_types(self) -> None:
        for type_ in (object, complex, 'int', Empty, Untyped, Unresolvable):
            with self.assertRaises(UnsupportedTypeError):
                make_shape(type_)

    def test_unsupported_is_type_error(self) -> None:
        with self.assertRaises(TypeError):
            make_shape(object)

    def test_unhashable_members(self) -> None:
        with self.assertRaises(UnsupportedTypeError):
            make_shape(set[list[int]])
        with self.assertRaises(UnsupportedTypeError):
            make_shape(dict[Mutable, int])
        make_shape(frozenset[tuple[int, str]])

    def test_ambiguous_unions(self) -> None:
        # both are floats at runtime
        with self.assertRaises(UnsupportedTypeError):
            make_shape(Celsius | Fahrenheit)
        with self.assertRaises(UnsupportedTypeError):
            make_shape(list[int] | list[str])

    def test_shapes_for_unions(self) -> None:
        self.assertIsInstance(make_shape(Optional[int]), OptionalShape)
        self.assertIsInstance(make_shape(Left | Right), TaggedUnionShape)
        self.assertIsInstance(make_shape(Left | Right | None), OptionalShape)

    def test_aliases(self) -> None:
        self.assertIsInstance(make_shape(abc.Sequence[int]), ListShape)
        self.assertIsInstance(make_shape(abc.Mapping[str, int]), DictShape)
        self.assertEqual(make_shape(abc.Set[int]).decode_value(Array.of(Int(1), Int(1))), frozenset({1}))

    def test_newtype_and_any(self) -> None:
        self.assertIsInstance(make_shape(Celsius), NewTypeShape)
        self.assertIsInstance(make_shape(Any), AnyShape)

    def test_default_shapes_are_cached(self) -> None:
        self.assertIs(make_shape(dict[str, U64]), make_shape(dict[str, U64]))

    def test_custom_type_map(self) -> None:
        from xmlrpc_serde.shapes import DEFAULT_SHAPES_MAP, DEFAULT_TYPE_ALIAS_MAP
        from xmlrpc_serde.shapes.int_shape import IntShape

        type_map = Shape.TypeMap(DEFAULT_TYPE_ALIAS_MAP, {**DEFAULT_SHAPES_MAP, Celsius: IntShape})
        with self.assertRaises(UnsupportedTypeError):
            # float is not an int
            Shape.from_type(Celsius, type_map=type_map)
        type_map = Shape.TypeMap(DEFAULT_TYPE_ALIAS_MAP, {bool: DEFAULT_SHAPES_MAP[bool]})
        with self.assertRaises(UnsupportedTypeError):
            Shape.from_type(int, type_map=type_map)

    def test_check_value(self) -> None:
        shape = make_shape(dict[str, list[Pair]])
        shape.check_value({'a': [Pair('x', None), Pair('y', 1)]})
        with self.assertRaises(ValueTypeError):
            shape.check_value({'a': [Pair('x', 'not an int')]})  # type: ignore[arg-type]
        with self.assertRaises(ValueTypeError):
            shape.check_value({'a': 'not a list'})  # type: ignore[dict-item]

    def test_encode_checks_values(self) -> None:
        with self.assertRaises(ValueTypeError):
            make_shape(list[int]).encode_value('abc')
        with self.assertRaises(ValueTypeError):
            make_shape(Left | Right).encode_value(Mutable(1))
        with self.assertRaises(ValueTypeError):
            make_shape(Any).encode_value(object())

    def test_hashable(self) -> None:
        self.assertTrue(make_shape(tuple[int, str]).is_hashable())
        self.assertFalse(make_shape(tuple[int, list[str]]).is_hashable())
        self.assertTrue(make_shape(Left).is_hashable())
        self.assertFalse(make_shape(Mutable).is_hashable())

    def test_value_shapes(self) -> None:
        self.assertEqual(make_shape(Struct).encode_value(Struct(())), Struct(()))
        with self.assertRaises(ValueTypeError):
            make_shape(Struct).encode_value(Array(()))
