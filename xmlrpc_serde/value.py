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
The XML-RPC value tree.

Each wire type is a frozen dataclass. Containers hold tuples so a value can't be mutated after construction, and
there are no back references, so every value is a strict tree.

>>> Struct.of(radius=Double(2.0))
Struct(members=(('radius', Double(value=2.0)),))
>>> Array.of(Int(5), Str('foo')).items
(Int(value=5), Str(value='foo'))
>>> Int(2**31)
Traceback (most recent call last):
...
xmlrpc_serde.exceptions.IntegerOutOfRangeError: 2147483648 does not fit a 32-bit signed <i4>

Struct members are kept in insertion order, but are addressed by name:

>>> s = Struct.from_pairs([('b', Int(2)), ('a', Int(1))])
>>> s.names()
('b', 'a')
>>> s.get('a')
Int(value=1)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from xmlrpc_serde.exceptions import DuplicateFieldError, IntegerOutOfRangeError

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def fits_int(number: int) -> bool:
    """ Whether the number can be carried by an `<i4>`.

    >>> fits_int(2**31 - 1), fits_int(2**31), fits_int(-(2**31))
    (True, False, True)
    """
    return INT_MIN <= number <= INT_MAX


@dataclass(frozen=True, slots=True)
class Value:
    """ Base class of all XML-RPC values, never instantiated directly.
    """

    # name of the XML element that carries this kind, used in error messages
    kind: ClassVar[str] = 'value'


@dataclass(frozen=True, slots=True)
class Bool(Value):
    kind: ClassVar[str] = 'boolean'
    value: bool


@dataclass(frozen=True, slots=True)
class Int(Value):
    kind: ClassVar[str] = 'i4'
    value: int

    def __post_init__(self) -> None:
        if not fits_int(self.value):
            raise IntegerOutOfRangeError(f'{self.value} does not fit a 32-bit signed <i4>')


@dataclass(frozen=True, slots=True)
class Str(Value):
    kind: ClassVar[str] = 'string'
    value: str


@dataclass(frozen=True, slots=True)
class Double(Value):
    kind: ClassVar[str] = 'double'
    value: float


@dataclass(frozen=True, slots=True)
class Bytes(Value):
    """ Binary data, base64 is only the wire form, `value` holds the raw bytes.
    """
    kind: ClassVar[str] = 'base64'
    value: bytes


@dataclass(frozen=True, slots=True)
class DateTime(Value):
    kind: ClassVar[str] = 'dateTime.iso8601'
    value: datetime


@dataclass(frozen=True, slots=True)
class Array(Value):
    kind: ClassVar[str] = 'array'
    items: tuple[Value, ...] = ()

    @classmethod
    def of(cls, *items: Value) -> Array:
        return cls(items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)


@dataclass(frozen=True, slots=True)
class Struct(Value):
    """ Named members, in the order they were inserted (or read from the wire).

    Duplicate names are not rejected here, a parser must be able to represent what it received, but every lookup
    that needs unique names goes through `to_dict` which rejects them.
    """
    kind: ClassVar[str] = 'struct'
    members: tuple[tuple[str, Value], ...] = ()

    @classmethod
    def of(cls, **members: Value) -> Struct:
        return cls(tuple(members.items()))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Value]]) -> Struct:
        return cls(tuple(pairs))

    def __len__(self) -> int:
        return len(self.members)

    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.members)

    def get(self, name: str) -> Value | None:
        for member_name, member_value in self.members:
            if member_name == name:
                return member_value
        return None

    def to_dict(self) -> dict[str, Value]:
        """ Index members by name, failing on duplicate names.

        >>> Struct.from_pairs([('a', Int(1)), ('a', Int(2))]).to_dict()
        Traceback (most recent call last):
        ...
        xmlrpc_serde.exceptions.DuplicateFieldError: duplicate struct member 'a'
        """
        result: dict[str, Value] = {}
        for name, value in self.members:
            if name in result:
                raise DuplicateFieldError(f'duplicate struct member {name!r}')
            result[name] = value
        return result
