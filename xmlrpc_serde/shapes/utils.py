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

from collections.abc import Hashable, Mapping
from dataclasses import is_dataclass
from enum import Enum
from functools import reduce
from operator import or_
from types import MappingProxyType as mappingproxy, NoneType, UnionType
from typing import TYPE_CHECKING, Any, Iterator, NamedTuple, NewType, TypeAlias, TypeVar, Union

from structlog import get_logger

from xmlrpc_serde.exceptions import UnsupportedTypeError
from xmlrpc_serde.utils.typing import get_args, get_origin, is_newtype, is_subclass
from xmlrpc_serde.value import Value

if TYPE_CHECKING:
    from xmlrpc_serde.shapes.shape import Shape


logger = get_logger()

T = TypeVar('T')
TypeAliasMap: TypeAlias = Mapping[Any, type]
TypeToShapeMap: TypeAlias = Mapping[Any, type['Shape']]


class Dataclass:
    """ Key used in a `TypeToShapeMap` for any dataclass, they can't be listed one by one.
    """


class TaggedUnion:
    """ Key used in a `TypeToShapeMap` for unions that don't include `None`, those are enums, not options.
    """


def get_origin_classes(type_: type) -> Iterator[type]:
    """ This util function is useful to generalize over a type T and unions A | B.

    A simple type T is yielded directly, and an union yields each type in it. Only origin types are yielded,
    arguments are discarded.

    >>> list(get_origin_classes(int))
    [<class 'int'>]
    >>> list(get_origin_classes(int | str))
    [<class 'int'>, <class 'str'>]
    >>> list(get_origin_classes(set[int] | dict[int, str]))
    [<class 'set'>, <class 'dict'>]
    """
    origin_type: type = get_origin(type_) or type_
    if origin_type is UnionType or origin_type is Union:
        for arg_type in get_args(type_) or tuple():
            yield get_origin(arg_type) or arg_type
    else:
        yield origin_type


def is_origin_hashable(type_: type) -> bool:
    """ Checks whether the given type signature satisfies `collections.abc.Hashable`.

    This check ignores type arguments, but takes into account all types of an union.

    >>> is_origin_hashable(int | str | bytes)
    True
    >>> is_origin_hashable(int | str | bytes | set)
    False
    >>> is_origin_hashable(frozenset[int])
    True
    >>> is_origin_hashable(dict)
    False
    >>> is_origin_hashable(mappingproxy)
    False

    NewTypes are hashable when the type they wrap is:

    >>> from xmlrpc_serde.types import U64
    >>> is_origin_hashable(U64)
    True
    """
    return all(_is_origin_hashable(origin_class) for origin_class in get_origin_classes(type_))


def _is_origin_hashable(origin_class: Any) -> bool:
    """ Inner implementation of is_origin_hashable, only checks a single origin class. """
    if is_newtype(origin_class):
        return is_origin_hashable(origin_class.__supertype__)
    # XXX: `hash(mappingproxy(...))` fails even though some Python versions consider it a subclass of Hashable
    if origin_class is mappingproxy:
        return False
    if origin_class is Any or origin_class is NoneType or origin_class is None:
        return True
    return is_subclass(origin_class, Hashable)


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(None), pretty_type(int), pretty_type(dict[str, int])
    ('None', 'int', 'dict[str, int]')
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    else:
        return getattr(type_, '__name__', str(type_))


def get_aliased_type(type_: Any, alias_map: TypeAliasMap, *, _verbose: bool = True) -> Any:
    """ Map a type to its usable alias including the type's arguments.

    >>> from typing import Optional
    >>> from collections import deque
    >>> get_aliased_type(tuple[str, Optional[deque[int]]], {deque: list}, _verbose=False)
    tuple[str, list[int] | None]
    """
    new_type, replaced = _get_aliased_type(type_, alias_map)
    if replaced and _verbose:
        logger.debug('type replaced', old=pretty_type(type_), new=pretty_type(new_type))
    return new_type


def _get_aliased_type(type_: Any, alias_map: TypeAliasMap) -> tuple[Any, bool]:
    """ Implementation of get_aliased_type with indication of whether there was a replacement.
    """
    origin_type = get_origin(type_) or type_
    aliased_origin: Any
    replaced = False

    # XXX: special case, typing.Union is always replaced by types.UnionType, it's not a user visible replacement
    if origin_type is Union:
        aliased_origin = UnionType
    elif _is_alias_key(origin_type) and origin_type in alias_map:
        aliased_origin = alias_map[origin_type]
        replaced = True
    else:
        aliased_origin = origin_type

    type_args = get_args(type_)
    # tuple[()] has empty arguments and must be kept as is
    if not type_args:
        return (type_ if not replaced else aliased_origin), replaced

    # use _get_aliased_type for recursion so we don't log multiple times when a replacement happens
    aliased_args_replaced = [_get_aliased_type(arg, alias_map) for arg in type_args]
    aliased_args, args_replaced = zip(*aliased_args_replaced)
    replaced |= any(args_replaced)

    # XXX: special case, UnionType can't be instantiated directly, this is the simplest way to do it
    if aliased_origin is UnionType:
        return reduce(or_, aliased_args), replaced

    if not replaced:
        return type_, replaced

    assert hasattr(aliased_origin, '__class_getitem__'), 'we must have an indexable class at this point'
    return aliased_origin[*aliased_args], replaced


def _is_alias_key(type_: Any) -> bool:
    try:
        hash(type_)
    except TypeError:
        return False
    return True


def get_usable_origin_type(type_: Any, /, *, type_map: 'Shape.TypeMap', _verbose: bool = True) -> Any:
    """ The purpose of this function is to map a given type into a key that is usable in a Shape.TypeMap

    It takes into account type-aliasing according to Shape.TypeMap.alias_map. If the given type cannot be used in the
    given type_map, an UnsupportedTypeError (which is a TypeError) is raised.

    The returned key is guaranteed to exist in `type_map.shapes_map`.

    >>> from xmlrpc_serde.shapes import DEFAULT_TYPE_MAP
    >>> get_usable_origin_type(set[int], type_map=DEFAULT_TYPE_MAP, _verbose=False)
    <class 'set'>
    >>> get_usable_origin_type(int | str, type_map=DEFAULT_TYPE_MAP, _verbose=False).__name__
    'TaggedUnion'
    """
    if isinstance(type_, str):
        raise UnsupportedTypeError(f'string annotations are not supported: {type_!r}')

    shapes_map = type_map.shapes_map

    # exact matches first, this is how NewTypes like `U64` or special forms like `Any` get their own shape
    if _is_alias_key(type_) and type_ in shapes_map:
        return type_

    aliased_type = get_aliased_type(type_, type_map.alias_map, _verbose=_verbose)
    origin_aliased_type = get_origin(aliased_type) or aliased_type
    if origin_aliased_type is Union:
        origin_aliased_type = UnionType

    if origin_aliased_type is UnionType:
        args = get_args(aliased_type)
        assert args is not None
        if NoneType not in args:
            origin_aliased_type = TaggedUnion

    if _is_alias_key(origin_aliased_type) and origin_aliased_type in shapes_map:
        return origin_aliased_type

    for marker, matches in _MARKERS:
        if marker in shapes_map and matches(aliased_type):
            return marker

    raise UnsupportedTypeError(f'type {pretty_type(type_)} is not supported by any Shape class')


def _is_namedtuple(type_: Any) -> bool:
    return is_subclass(type_, tuple) and hasattr(type_, '_fields')


def _is_dataclass_type(type_: Any) -> bool:
    return isinstance(type_, type) and is_dataclass(type_)


# order matters, a NamedTuple is also a tuple subclass and an Enum can also be a dataclass
_MARKERS: tuple[tuple[Any, Any], ...] = (
    (NewType, is_newtype),
    (Value, lambda type_: is_subclass(type_, Value)),
    (Enum, lambda type_: is_subclass(type_, Enum)),
    (NamedTuple, _is_namedtuple),
    (Dataclass, _is_dataclass_type),
)
