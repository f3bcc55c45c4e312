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

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Collection, Hashable, Iterable, Mapping, Set
from typing import TypeVar

from typing_extensions import Self, override

from xmlrpc_serde.codecs.collection import decode_collection, encode_collection
from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import UnsupportedTypeError, ValueTypeError
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.shapes.utils import is_origin_hashable
from xmlrpc_serde.utils.typing import get_args, get_origin, is_subclass
from xmlrpc_serde.value import Value

T = TypeVar('T')
H = TypeVar('H', bound=Hashable)


def check_collection(value: object) -> None:
    """ Text and bytes are collections too, but they are never accepted where a sequence is expected.
    """
    if not isinstance(value, Collection) or isinstance(value, (str, bytes, bytearray, Mapping)):
        raise ValueTypeError(f'expected a collection, got {type(value).__name__}')


class _CollectionShape(Shape[Collection[T]], ABC):
    """ Used as base for Shape classes that represent collections.
    """
    __slots__ = ('_item',)

    _is_hashable = False
    _item: Shape[T]

    def __init__(self, item_shape: Shape[T], /) -> None:
        self._item = item_shape

    @abstractmethod
    def _build(self, items: Iterable[T]) -> Collection[T]:
        """ How to build the concrete collection from an iterable of items.
        """
        raise NotImplementedError

    @override
    @classmethod
    def _from_type(cls, type_: type[Collection[T]], /, *, type_map: Shape.TypeMap) -> Self:
        member_type = cls._get_member_type(type_)
        member_shape = Shape.from_type(member_type, type_map=type_map)
        return cls(member_shape)

    @classmethod
    def _get_member_type(cls, type_: type[Collection[T]]) -> type[T]:
        origin_type: type = get_origin(type_) or type_
        if not is_subclass(origin_type, Collection):
            raise UnsupportedTypeError('expected Collection type')
        args = get_args(type_)
        if not args or len(args) != 1:
            raise UnsupportedTypeError(f'expected {origin_type.__name__}[<type>]')
        return args[0]

    def _check_item(self, item: T) -> None:
        self._item._check_value(item, deep=True)

    @override
    def _check_value(self, value: Collection[T], /, *, deep: bool) -> None:
        check_collection(value)
        if deep:
            for i in value:
                self._check_item(i)

    @override
    def _encode(self, encoder: Encoder, value: Collection[T], /) -> Value:
        return encode_collection(encoder, value, self._item.encode)

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> Collection[T]:
        return decode_collection(decoder, value, self._item.decode, self._build)


class ListShape(_CollectionShape[T]):
    """ Represents builtin `list` values.
    """

    @override
    def _build(self, items: Iterable[T]) -> list[T]:
        return list(items)


class DequeShape(_CollectionShape[T]):
    """ Represents `collections.deque` values.
    """

    @override
    def _build(self, items: Iterable[T]) -> deque[T]:
        return deque(items)


class SetShape(_CollectionShape[H]):
    """ Represents builtin `set` values.

    The wire order is the iteration order of the set, which is arbitrary. Repeated items in the incoming array are
    merged.
    """

    @override
    def _build(self, items: Iterable[H]) -> Set[H]:
        return set(items)

    @override
    @classmethod
    def _get_member_type(cls, type_: type[Collection[T]]) -> type[T]:
        origin_type: type = get_origin(type_) or type_
        if not is_subclass(origin_type, Set):
            raise UnsupportedTypeError('expected Set type')
        args = get_args(type_)
        if not args or len(args) != 1:
            raise UnsupportedTypeError(f'expected {origin_type.__name__}[<type>]')
        member_type, = args
        if not is_origin_hashable(member_type):
            raise UnsupportedTypeError(f'{member_type} is not hashable')
        return member_type

    @override
    def _check_item(self, item: H) -> None:
        if not isinstance(item, Hashable):
            raise ValueTypeError('expected Hashable type')
        super()._check_item(item)


class FrozenSetShape(SetShape[H]):
    """ Represents builtin `frozenset` values.
    """

    # XXX: SetShape already enforces H to be hashable, but is not itself hashable, a frozenset, however, is hashable
    _is_hashable = True

    @override
    def _build(self, items: Iterable[H]) -> frozenset[H]:
        return frozenset(items)
