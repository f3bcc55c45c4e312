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
A union of types that doesn't include `None` is an enum whose variants are the types of the union.

Each variant is named after its type's `__name__` and its payload is whatever that type encodes to:

- a dataclass with no fields is a unit variant, its payload is an empty struct
- a NewType is a newtype variant, its payload is the wrapped value
- a NamedTuple is a tuple variant, its payload is an array
- a dataclass with fields is a struct variant, its payload is a struct

>>> from dataclasses import dataclass
>>> from xmlrpc_serde.shapes import make_shape
>>> @dataclass
... class Circle:
...     radius: float
>>> @dataclass
... class Empty:
...     pass
>>> shape = make_shape(Circle | Empty)
>>> shape.encode_value(Circle(2.0))
Struct(members=(('Circle', Struct(members=(('radius', Double(value=2.0)),))),))
>>> shape.encode_value(Empty())
Struct(members=(('Empty', Struct(members=())),))

Encoding picks the variant from the runtime class of the value, so the variants of a union must be told apart by it.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from typing_extensions import Self, override

from xmlrpc_serde.codecs.variant import decode_variant, encode_variant
from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import UnsupportedTypeError, ValueTypeError
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.shapes.utils import pretty_type
from xmlrpc_serde.utils.typing import get_args, newtype_runtime_class
from xmlrpc_serde.value import Value


class _Variant(NamedTuple):
    name: str
    class_: type
    shape: Shape[Any]


class TaggedUnionShape(Shape[Any]):
    __slots__ = ('_is_hashable', '_variants', '_by_class', '_by_name')

    _variants: tuple[_Variant, ...]
    _by_class: dict[type, _Variant]
    _by_name: dict[str, _Variant]

    def __init__(self, variants: tuple[_Variant, ...]) -> None:
        self._variants = variants
        self._by_class = {variant.class_: variant for variant in variants}
        self._by_name = {variant.name: variant for variant in variants}
        self._is_hashable = all(variant.shape.is_hashable() for variant in variants)

    @override
    @classmethod
    def _from_type(cls, type_: type[Any], /, *, type_map: Shape.TypeMap) -> Self:
        args = get_args(type_)
        if not args or len(args) < 2:
            raise UnsupportedTypeError('expected an union of at least 2 types')
        variants: list[_Variant] = []
        names: set[str] = set()
        classes: set[type] = set()
        for arg in args:
            name = getattr(arg, '__name__', None)
            class_ = newtype_runtime_class(arg)
            if name is None or not isinstance(class_, type):
                raise UnsupportedTypeError(f'{pretty_type(arg)} cannot be used as an enum variant')
            if name in names:
                raise UnsupportedTypeError(f'more than one variant is named {name!r} in {pretty_type(type_)}')
            if class_ in classes:
                raise UnsupportedTypeError(
                    f'more than one variant has values of class {class_.__name__} in {pretty_type(type_)}'
                )
            names.add(name)
            classes.add(class_)
            variants.append(_Variant(name, class_, Shape.from_type(arg, type_map=type_map)))
        return cls(tuple(variants))

    def _find_variant(self, value: Any) -> _Variant:
        variant = self._by_class.get(type(value))
        if variant is not None:
            return variant
        # subclasses are matched in declaration order
        for variant in self._variants:
            if isinstance(value, variant.class_):
                return variant
        expected = ', '.join(variant.name for variant in self._variants)
        raise ValueTypeError(f'expected one of {expected}, got {type(value).__name__}')

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        variant = self._find_variant(value)
        if deep:
            variant.shape._check_value(value, deep=True)

    @override
    def _encode(self, encoder: Encoder, value: Any, /) -> Value:
        variant = self._find_variant(value)
        return encode_variant(encoder, variant.name, value, variant.shape.encode)

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> Any:
        return decode_variant(
            decoder,
            value,
            {name: variant.shape.decode for name, variant in self._by_name.items()},
        )
