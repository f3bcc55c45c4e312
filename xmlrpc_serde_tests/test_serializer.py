from collections import OrderedDict, deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, NamedTuple, NewType, Optional, TypeVar

from xmlrpc_serde.shapes import Shape, make_shape
from xmlrpc_serde.types import I8, I16, I32, I64, U8, U16, U32, U64, Char
from xmlrpc_serde.value import Array, Bool, Bytes, DateTime, Double, Int, Str, Struct
from xmlrpc_serde_tests import unittest

T = TypeVar('T')

UserId = NewType('UserId', int)


class Color(Enum):
    RED = 'r'
    GREEN = 'g'


class Point(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class Meters:
    pass


@dataclass(frozen=True)
class Circle:
    radius: float


@dataclass
class Inventory:
    owner: str
    items: dict[str, U64]
    tags: set[str] = field(default_factory=set)
    note: Optional[str] = None


@dataclass
class Ledger:
    account: Optional[U64]
    limit: I32 | None
    initial: Optional[Char] = None


class SerializerTestCase(unittest.TestCase):
    def _run_test(self, type_: type[T], result: T) -> None:
        shape = make_shape(type_)
        encoded = shape.encode_value(result)
        result2: T = shape.decode_value(encoded)
        self.assertEqual(result, result2)

    def _run_test_shape(self, shape: Shape[T], result: T) -> None:
        encoded = shape.encode_value(result)
        result2: T = shape.decode_value(encoded)
        self.assertEqual(result, result2)

    def test_invalid_type(self):
        # XXX: list must be given a type argument, otherwise we cannot choose the inner shape, which is needed even if
        #      the list is empty, in this test we're checking that it will error
        with self.assertRaises(TypeError):
            self._run_test(list, [])

    def test_bool(self):
        self._run_test(bool, True)
        self._run_test(bool, False)

    def test_str_empty(self):
        self._run_test(str, '')

    def test_str_valid(self):
        self._run_test(str, 'hathor')

    def test_str_accents(self):
        self._run_test(str, 'áéíóúçãõ')

    def test_char(self):
        self._run_test(Char, 'ç')
        self._run_test(Char, '🎉')

    def test_bytes_empty(self):
        self._run_test(bytes, b'')

    def test_bytes_valid(self):
        self._run_test(bytes, b'\x01\x02')

    def test_bytes_not_utf8(self):
        self._run_test(bytes, b'\xff\xfe\x80\x00')

    def test_bytes_random(self):
        for _ in range(20):
            self._run_test(bytes, self.rng.randbytes(self.rng.randrange(0, 64)))

    def test_bytearray(self):
        self._run_test(bytearray, bytearray(b'\x00\xff'))

    def test_int_negative(self):
        self._run_test(int, -100)

    def test_int_zero(self):
        self._run_test(int, 0)

    def test_int_large(self):
        self._run_test(int, 2**100)
        self._run_test(int, -2**100)

    def test_sized_ints(self):
        self._run_test(I8, -128)
        self._run_test(I16, 32767)
        self._run_test(I32, -2**31)
        self._run_test(I64, -2**63)
        self._run_test(U8, 255)
        self._run_test(U16, 65535)
        self._run_test(U32, 4_200_000_000)
        self._run_test(U64, 2**64 - 1)

    def test_float(self):
        self._run_test(float, 1.5)
        self._run_test(float, -0.0)

    def test_datetime(self):
        self._run_test(datetime, datetime(1998, 7, 17, 14, 8, 55))

    def test_none(self):
        self._run_test(None, None)  # type: ignore[arg-type]

    def test_optional(self):
        self._run_test(Optional[str], None)
        self._run_test(Optional[str], 'hathor')
        self._run_test(int | None, 2**40)

    def test_list(self):
        self._run_test(list[int], [])
        self._run_test(list[int], [1, 2, 3])
        self._run_test(list[list[str]], [['a'], [], ['b', 'c']])

    def test_deque(self):
        self._run_test(deque[str], deque(['a', 'b']))

    def test_set(self):
        self._run_test(set[int], {1, 2, 3})
        self._run_test(frozenset[str], frozenset({'a', 'b'}))

    def test_tuple(self):
        self._run_test(tuple[int, str, bool], (1, 'a', True))
        self._run_test(tuple[int, ...], (1, 2, 3))
        self._run_test(tuple[()], ())

    def test_dict(self):
        self._run_test(dict[str, int], {'a': 1, 'b': 2})
        self._run_test(dict[str, list[int]], {})
        self._run_test(dict[U64, bool], {2**64 - 1: True, 0: False})

    def test_ordered_dict(self):
        value = OrderedDict([('b', 1), ('a', 2)])
        self._run_test(OrderedDict[str, int], value)

    def test_newtype(self):
        self._run_test(UserId, UserId(7))

    def test_enum(self):
        self._run_test(Color, Color.GREEN)

    def test_namedtuple(self):
        self._run_test(Point, Point(1, -1))

    def test_dataclass(self):
        self._run_test(Circle, Circle(2.0))
        self._run_test(Meters, Meters())
        self._run_test(Inventory, Inventory('alice', {'coins': U64(2**63)}, {'rare'}, 'ok'))

    def test_tagged_union(self):
        self._run_test(Circle | Meters | Point, Circle(0.5))
        self._run_test(Circle | Meters | Point, Meters())
        self._run_test(Circle | Meters | Point, Point(3, 4))
        self._run_test(Optional[Circle | Meters], None)

    def test_newtype_variant(self):
        shape = make_shape(UserId | str)
        self.assertEqual(shape.encode_value(UserId(7)), Struct.of(UserId=Int(7)))
        self.assertEqual(shape.encode_value('seven'), Struct.of(str=Str('seven')))
        self.assertEqual(shape.decode_value(Struct.of(UserId=Int(7))), 7)
        self._run_test(UserId | str, UserId(7))
        self._run_test(UserId | str, 'seven')

    def test_newtype_optional(self):
        self._run_test(Optional[U64], U64(2**64 - 1))
        self._run_test(U64 | None, None)
        self._run_test(I32 | None, I32(-5))
        self._run_test(Optional[Char], 'x')
        self._run_test(Ledger, Ledger(U64(2**40), I32(10), 'L'))
        self._run_test(Ledger, Ledger(None, None))
        encoded = make_shape(Ledger).encode_value(Ledger(U64(1), None))
        self.assertEqual(encoded, Struct.of(account=Array.of(Str('1')), limit=Array(()), initial=Array(())))

    def test_map_keys_as_text(self):
        self._run_test(dict[int, list[int]], {12: [], -33: [1], 2**40: [2]})
        self._run_test(dict[I32, str], {I32(12): 'a', I32(-33): 'b'})
        self._run_test(dict[U8, str], {U8(0): 'a', U8(255): 'b'})
        self._run_test(dict[bool, int], {True: 1, False: 0})
        self._run_test(dict[U64, bool], {U64(2**64 - 1): True})

    def test_any(self):
        self._run_test(Any, {'a': [1, 'b', True, 1.5], 'c': {'d': b'\x00'}})

    def test_value_passthrough(self):
        value = Struct.of(a=Array.of(Int(1), Bool(False)), b=Double(1.0), c=Bytes(b''), d=Str('x'))
        self._run_test(Struct, value)
        self._run_test(DateTime, DateTime(datetime(2025, 1, 1)))
