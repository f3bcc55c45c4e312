from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from xmlrpc_serde import decode, encode
from xmlrpc_serde.exceptions import (
    ArityMismatchError,
    DuplicateFieldError,
    IntegerOutOfRangeError,
    InvalidCharError,
    InvalidIntegerError,
    MissingFieldError,
    RecursionLimitError,
    TypeMismatchError,
    UnknownFieldError,
    UnsupportedKeyError,
)
from xmlrpc_serde.types import I8, I32, I64, U8, U16, U32, Char
from xmlrpc_serde.value import Array, Bool, Double, Int, Str, Struct
from xmlrpc_serde_tests import unittest


class Color(Enum):
    RED = 1
    GREEN = 2


@dataclass
class Point:
    x: int
    y: int


@dataclass
class Account:
    name: str
    balance: U32 = field(metadata={'rename': 'currentBalance'})
    nickname: Optional[str]
    tags: list[str] = field(default_factory=list)


@dataclass
class Polygon:
    label: str
    points: list[Point]


@dataclass
class Node:
    value: int
    children: list['Node']


class DecodeTestCase(unittest.TestCase):
    def test_field_order_independence(self) -> None:
        a = Struct.from_pairs([('x', Int(1)), ('y', Int(2))])
        b = Struct.from_pairs([('y', Int(2)), ('x', Int(1))])
        self.assertEqual(decode(a, Point), Point(1, 2))
        self.assertEqual(decode(b, Point), Point(1, 2))
        self.assertEqual(decode(a, dict[str, int]), decode(b, dict[str, int]))

    def test_duplicate_fields(self) -> None:
        value = Struct.from_pairs([('a', Int(1)), ('a', Int(2))])
        with self.assertRaises(DuplicateFieldError):
            decode(value, dict[str, int])
        with self.assertRaises(DuplicateFieldError):
            decode(Struct.from_pairs([('x', Int(1)), ('y', Int(2)), ('x', Int(3))]), Point)

    def test_unknown_fields(self) -> None:
        value = Struct.of(x=Int(1), y=Int(2), z=Int(3))
        self.assertEqual(decode(value, Point), Point(1, 2))
        with self.assertRaises(UnknownFieldError):
            decode(value, Point, settings=self.make_settings(STRICT_FIELDS=True))

    def test_missing_fields(self) -> None:
        with self.assertRaises(MissingFieldError):
            decode(Struct.of(x=Int(1)), Point)
        value = Struct.of(name=Str('bob'), currentBalance=Str('10'))
        self.assertEqual(decode(value, Account), Account('bob', U32(10), None, []))
        with self.assertRaises(MissingFieldError):
            decode(value, Account, settings=self.make_settings(MISSING_OPTIONAL_AS_NONE=False))

    def test_renamed_field(self) -> None:
        encoded = encode(Account('bob', U32(4_200_000_000), 'b', ['x']), Account)
        assert isinstance(encoded, Struct)
        self.assertEqual(encoded.names(), ('name', 'currentBalance', 'nickname', 'tags'))
        self.assertEqual(encoded.get('currentBalance'), Str('4200000000'))
        self.assertEqual(encoded.get('nickname'), Array.of(Str('b')))
        # the attribute name is not accepted in place of the wire name
        with self.assertRaises(MissingFieldError):
            decode(Struct.of(name=Str('bob'), balance=Str('10')), Account)

    def test_error_path(self) -> None:
        value = Struct.of(
            label=Str('triangle'),
            points=Array.of(
                Struct.of(x=Int(0), y=Int(0)),
                Struct.of(x=Int(1), y=Int(0)),
                Struct.of(x=Bool(True), y=Int(1)),
            ),
        )
        with self.assertRaises(TypeMismatchError) as cm:
            decode(value, Polygon)
        self.assertEqual(cm.exception.path, ('points', 2, 'x'))
        self.assertEqual(cm.exception.path_str(), '$.points[2].x')
        self.assertTrue(str(cm.exception).startswith('at $.points[2].x: '))

    def test_narrow_int_only_accepts_int(self) -> None:
        self.assertEqual(decode(Int(200), U8), 200)
        with self.assertRaises(TypeMismatchError):
            decode(Str('200'), U8)
        with self.assertRaises(IntegerOutOfRangeError):
            decode(Int(256), U8)
        with self.assertRaises(IntegerOutOfRangeError):
            decode(Int(-1), U16)

    def test_wide_int_only_accepts_str(self) -> None:
        self.assertEqual(decode(Str('-9223372036854775808'), I64), -2**63)
        with self.assertRaises(TypeMismatchError):
            decode(Int(5), I64)
        with self.assertRaises(InvalidIntegerError):
            decode(Str('12a'), I64)
        with self.assertRaises(InvalidIntegerError):
            decode(Str(''), U32)
        with self.assertRaises(IntegerOutOfRangeError):
            decode(Str('9223372036854775808'), I64)
        with self.assertRaises(IntegerOutOfRangeError):
            decode(Str('-1'), U32)

    def test_unsized_int_accepts_both(self) -> None:
        self.assertEqual(decode(Int(5), int), 5)
        self.assertEqual(decode(Str('5'), int), 5)
        with self.assertRaises(TypeMismatchError):
            decode(Double(5.0), int)

    def test_encode_out_of_range(self) -> None:
        with self.assertRaises(IntegerOutOfRangeError):
            encode(128, I8)
        with self.assertRaises(IntegerOutOfRangeError):
            encode(-1, U32)

    def test_float_accepts_int(self) -> None:
        self.assertEqual(decode(Int(3), float), 3.0)
        with self.assertRaises(TypeMismatchError):
            decode(Int(3), float, settings=self.make_settings(DOUBLE_ACCEPTS_INT=False))

    def test_bool_is_strict(self) -> None:
        with self.assertRaises(TypeMismatchError):
            decode(Int(1), bool)
        with self.assertRaises(TypeError):
            encode(True, int)

    def test_char(self) -> None:
        self.assertEqual(encode('a', Char), Str('a'))
        with self.assertRaises(InvalidCharError):
            encode('ab', Char)
        with self.assertRaises(InvalidCharError):
            decode(Str(''), Char)

    def test_arity_mismatch(self) -> None:
        with self.assertRaises(ArityMismatchError):
            decode(Array.of(Int(1)), tuple[int, int])
        with self.assertRaises(ArityMismatchError):
            decode(Array.of(Int(1), Bool(True), Int(2)), tuple[int, bool])

    def test_map_keys_as_member_names(self) -> None:
        self.assertEqual(encode({'a': 1}, dict[str, int]), Struct.of(a=Int(1)))
        pairs = [('12', Array(())), ('-33', Array.of(Int(1)))]
        self.assertEqual(encode({12: [], -33: [1]}, dict[int, list[int]]), Struct.from_pairs(pairs))
        self.assertEqual(encode({True: 1, False: 0}), Struct.from_pairs([('true', Int(1)), ('false', Int(0))]))
        self.assertEqual(decode(Struct.from_pairs([('true', Int(1))]), dict[bool, int]), {True: 1})
        self.assertEqual(decode(Struct.from_pairs([('12', Int(1))]), dict[I32, int]), {12: 1})
        self.assertEqual(decode(Struct.from_pairs([('-33', Int(1))]), dict[int, int]), {-33: 1})

    def test_unsupported_map_keys(self) -> None:
        with self.assertRaises(UnsupportedKeyError):
            encode({1.5: 1})
        with self.assertRaises(UnsupportedKeyError):
            encode({(1, 2): 1})
        with self.assertRaises(UnsupportedKeyError):
            encode({b'\x00': 1})

    def test_map_key_names_that_do_not_parse(self) -> None:
        with self.assertRaises(TypeMismatchError) as cm:
            decode(Struct.from_pairs([('yes', Int(1))]), dict[bool, int])
        self.assertEqual(cm.exception.path, ('yes',))
        with self.assertRaises(TypeMismatchError):
            decode(Struct.from_pairs([('1.5', Int(1))]), dict[I32, int])
        with self.assertRaises(IntegerOutOfRangeError):
            decode(Struct.from_pairs([('300', Int(1))]), dict[U8, int])

    def test_duplicate_variant_members(self) -> None:
        twice = Struct.from_pairs([('RED', Struct(())), ('RED', Struct(()))])
        with self.assertRaises(DuplicateFieldError):
            decode(twice, Color)

    def test_recursive_dataclass(self) -> None:
        tree = Node(1, [Node(2, []), Node(3, [Node(4, [])])])
        self.assertEqual(decode(encode(tree, Node), Node), tree)

    def test_recursion_limit(self) -> None:
        value: list = []
        for _ in range(300):
            value = [value]
        with self.assertRaises(RecursionLimitError):
            encode(value)

    def test_max_depth_setting(self) -> None:
        nested = Array.of(Array.of(Array.of(Array.of(Int(1)))))
        type_ = list[list[list[list[int]]]]
        self.assertEqual(decode(nested, type_, settings=self.make_settings(MAX_DEPTH=4)), [[[[1]]]])
        with self.assertRaises(RecursionLimitError):
            decode(nested, type_, settings=self.make_settings(MAX_DEPTH=3))
