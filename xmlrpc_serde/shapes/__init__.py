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

from collections import OrderedDict, abc, deque
from datetime import datetime
from enum import Enum
from functools import lru_cache
from types import NoneType, UnionType
from typing import Any, NamedTuple, NewType, TypeVar, Union

from xmlrpc_serde.shapes.any_shape import AnyShape
from xmlrpc_serde.shapes.bool_shape import BoolShape
from xmlrpc_serde.shapes.bytes_shape import BytesShape
from xmlrpc_serde.shapes.collection_shape import DequeShape, FrozenSetShape, ListShape, SetShape
from xmlrpc_serde.shapes.dataclass_shape import DataclassShape
from xmlrpc_serde.shapes.datetime_shape import DateTimeShape
from xmlrpc_serde.shapes.enum_shape import EnumShape
from xmlrpc_serde.shapes.float_shape import FloatShape
from xmlrpc_serde.shapes.int_shape import (
    Int8Shape,
    Int16Shape,
    Int32Shape,
    Int64Shape,
    IntShape,
    Uint8Shape,
    Uint16Shape,
    Uint32Shape,
    Uint64Shape,
)
from xmlrpc_serde.shapes.map_shape import DictShape, OrderedDictShape
from xmlrpc_serde.shapes.namedtuple_shape import NamedTupleShape
from xmlrpc_serde.shapes.newtype_shape import NewTypeShape
from xmlrpc_serde.shapes.optional_shape import OptionalShape
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.shapes.str_shape import CharShape, StrShape
from xmlrpc_serde.shapes.tuple_shape import TupleShape
from xmlrpc_serde.shapes.union_shape import TaggedUnionShape
from xmlrpc_serde.shapes.unit_shape import UnitShape
from xmlrpc_serde.shapes.utils import Dataclass, TaggedUnion, TypeAliasMap, TypeToShapeMap
from xmlrpc_serde.shapes.value_shape import ValueShape
from xmlrpc_serde.types import I8, I16, I32, I64, U8, U16, U32, U64, Char
from xmlrpc_serde.value import Value

__all__ = [
    'DEFAULT_SHAPES_MAP',
    'DEFAULT_TYPE_ALIAS_MAP',
    'DEFAULT_TYPE_MAP',
    'ESSENTIAL_TYPE_ALIAS_MAP',
    'AnyShape',
    'BoolShape',
    'BytesShape',
    'CharShape',
    'DataclassShape',
    'DateTimeShape',
    'DequeShape',
    'DictShape',
    'EnumShape',
    'FloatShape',
    'FrozenSetShape',
    'Int8Shape',
    'Int16Shape',
    'Int32Shape',
    'Int64Shape',
    'IntShape',
    'ListShape',
    'NamedTupleShape',
    'NewTypeShape',
    'OptionalShape',
    'OrderedDictShape',
    'SetShape',
    'Shape',
    'StrShape',
    'TaggedUnionShape',
    'TupleShape',
    'TypeAliasMap',
    'TypeToShapeMap',
    'Uint8Shape',
    'Uint16Shape',
    'Uint32Shape',
    'Uint64Shape',
    'UnitShape',
    'ValueShape',
    'make_shape',
]

T = TypeVar('T')

# this is the minimum type-alias-map needed for everything to work as intended
ESSENTIAL_TYPE_ALIAS_MAP: TypeAliasMap = {
    # XXX: technically types.UnionType is not a type, so mypy complains, but for our purposes it is a type
    Union: UnionType,  # type: ignore[dict-item]
}

# abstract collections are decoded into the builtin that implements them
DEFAULT_TYPE_ALIAS_MAP: TypeAliasMap = {
    **ESSENTIAL_TYPE_ALIAS_MAP,
    abc.Sequence: list,
    abc.MutableSequence: list,
    abc.Set: frozenset,
    abc.MutableSet: set,
    abc.Mapping: dict,
    abc.MutableMapping: dict,
}

# Mapping between types and Shape classes.
DEFAULT_SHAPES_MAP: TypeToShapeMap = {
    # builtin types:
    bool: BoolShape,
    bytearray: BytesShape,
    bytes: BytesShape,
    dict: DictShape,
    float: FloatShape,
    frozenset: FrozenSetShape,
    int: IntShape,
    list: ListShape,
    set: SetShape,
    str: StrShape,
    tuple: TupleShape,
    # XXX: ignored dict-item because technically None is not a type, type[None]/NoneType is
    None: UnitShape,  # type: ignore[dict-item]
    NoneType: UnitShape,
    # other Python types:
    # XXX: ignored dict-item because Union is not considered a type, so mypy fails it, but it works for our case
    Union: OptionalShape,  # type: ignore[dict-item]
    UnionType: OptionalShape,
    Any: AnyShape,
    OrderedDict: OrderedDictShape,
    datetime: DateTimeShape,
    deque: DequeShape,
    # markers, see `get_usable_origin_type`:
    Dataclass: DataclassShape,
    Enum: EnumShape,
    NamedTuple: NamedTupleShape,
    NewType: NewTypeShape,
    TaggedUnion: TaggedUnionShape,
    Value: ValueShape,
    # width annotations:
    I8: Int8Shape,
    I16: Int16Shape,
    I32: Int32Shape,
    I64: Int64Shape,
    U8: Uint8Shape,
    U16: Uint16Shape,
    U32: Uint32Shape,
    U64: Uint64Shape,
    Char: CharShape,
}

DEFAULT_TYPE_MAP = Shape.TypeMap(DEFAULT_TYPE_ALIAS_MAP, DEFAULT_SHAPES_MAP)


@lru_cache(maxsize=1024)
def _make_default_shape(type_: Any, /) -> Shape[Any]:
    return Shape.from_type(type_, type_map=DEFAULT_TYPE_MAP)


def make_shape(type_: type[T], /, *, extra_shapes_map: TypeToShapeMap | None = None) -> Shape[T]:
    """ Like Shape.from_type, but with the default maps, shapes are cached unless extra mappings are given.

    The `extra_shapes_map` takes precedence over the defaults, for example `{U32: MyU32Shape}` changes how `U32`
    is carried. If you need to change the aliases too use `Shape.from_type` instead.
    """
    if extra_shapes_map:
        type_map = Shape.TypeMap(DEFAULT_TYPE_ALIAS_MAP, {**DEFAULT_SHAPES_MAP, **extra_shapes_map})
        return Shape.from_type(type_, type_map=type_map)
    try:
        hash(type_)
    except TypeError:
        # some annotations, like Annotated with unhashable metadata, can't be cache keys
        return Shape.from_type(type_, type_map=DEFAULT_TYPE_MAP)
    return _make_default_shape(type_)
