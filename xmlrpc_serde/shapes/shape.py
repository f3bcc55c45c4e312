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
from typing import TYPE_CHECKING, Generic, NamedTuple, TypeVar, final

from structlog import get_logger
from typing_extensions import Self

from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import CodecError
from xmlrpc_serde.shapes.utils import TypeAliasMap, TypeToShapeMap, get_aliased_type, get_usable_origin_type
from xmlrpc_serde.value import Value

if TYPE_CHECKING:
    from xmlrpc_serde.conf.settings import CodecSettings

logger = get_logger()

T = TypeVar('T')


class Shape(ABC, Generic[T]):
    """ This class is used to model a type with a known type signature and how it is converted to/from a `Value`.

    A shape is built once from an annotation (see `Shape.from_type`) and can then be used for any number of
    conversions, from any number of threads: shapes hold no state besides the inner shapes they were built from.
    The per call state (settings, depth, path) lives in the `Encoder`/`Decoder` that is passed to every call.
    """

    class TypeMap(NamedTuple):
        alias_map: TypeAliasMap
        shapes_map: TypeToShapeMap

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    # XXX: subclasses must initialize this property
    _is_hashable: bool

    @final
    @staticmethod
    def from_type(type_: type[T], /, *, type_map: TypeMap) -> Shape[T]:
        """ Instantiate a Shape instance from a type signature using the given maps.

        The `shapes_map` associates types to concrete Shape classes, while the `alias_map` associates types with
        substitute types to use instead.
        """
        usable_origin = get_usable_origin_type(type_, type_map=type_map)
        shape_class = type_map.shapes_map[usable_origin]
        # the replacement was already logged by get_usable_origin_type
        aliased_type = get_aliased_type(type_, type_map.alias_map, _verbose=False)
        return shape_class._from_type(aliased_type, type_map=type_map)

    @classmethod
    def _from_type(cls, type_: type[T], /, *, type_map: TypeMap) -> Self:
        """ Instantiate a Shape instance from a type signature.

        The implementation is expected to inspect the given type's origin and args to check for compatibility and to
        use `Shape.from_type` for the inner types, forwarding the given `type_map`, this is the case for compound
        shapes like OptionalShape or MapShape.
        """
        # XXX: a Shape that is only meant for local use does not need to implement _from_type
        raise TypeError(f'{cls.__name__} is not compatible with use in a Shape.TypeMap')

    @final
    def is_hashable(self) -> bool:
        """ Indicates whether the type being abstracted over is expected to be hashable.

        This is used to prevent unhashable types from being used as map keys or set members."""
        return self._is_hashable

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise a ValueTypeError (which is a TypeError) if the value is not compatible with this shape.

        The check is deep: all the items of a collection and the fields of a dataclass are checked too.
        """
        # XXX: subclasses must implement Shape._check_value, not Shape.check_value
        self._check_value(value, deep=True)

    @final
    def encode(self, encoder: Encoder, value: T, /) -> Value:
        """ Encode a value according to the signature that was abstracted.

        The value is shallow checked before being encoded, inner values are checked by the inner shapes as the
        encoding goes, so calling check_value before encode is not needed.
        """
        # XXX: subclasses must implement Shape._encode, not Shape.encode
        self._check_value(value, deep=False)
        return self._encode(encoder, value)

    @final
    def decode(self, decoder: Decoder, value: Value, /) -> T:
        """ Decode a value according to the signature that was abstracted.

        Decoders always produce valid values, the shallow check that follows is only a double check.
        """
        # XXX: subclasses must implement Shape._decode, not Shape.decode
        result = self._decode(decoder, value)
        self._check_value(result, deep=False)
        return result

    @final
    def encode_value(self, value: T, /, *, settings: CodecSettings | None = None) -> Value:
        """ Shortcut to encode a value without having to create an Encoder.
        """
        try:
            return self.encode(Encoder(settings), value)
        except CodecError as e:
            logger.debug('encode failed', error=type(e).__name__, path=e.path_str(), reason=e.message)
            raise

    @final
    def decode_value(self, value: Value, /, *, settings: CodecSettings | None = None) -> T:
        """ Shortcut to decode a value without having to create a Decoder.
        """
        try:
            return self.decode(Decoder(settings), value)
        except CodecError as e:
            logger.debug('decode failed', error=type(e).__name__, path=e.path_str(), reason=e.message)
            raise

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `Shape.check_value`, should raise ValueTypeError when the value is invalid.

        Compound values should use `Shape._check_value` on the inner shape(s) instead of `Shape.check_value` and pass
        the appropriate deep argument.
        """
        raise NotImplementedError

    @abstractmethod
    def _encode(self, encoder: Encoder, value: T, /) -> Value:
        """ Inner implementation of `encode`, you can assume that the given value has been "shallow checked".

        Compound shapes should pass the inner `Shape.encode` (not `Shape._encode`) to the codecs, that way the next
        `_encode` implementation can also assume that its value was checked.
        """
        raise NotImplementedError

    @abstractmethod
    def _decode(self, decoder: Decoder, value: Value, /) -> T:
        """ Inner implementation of `decode`.

        Compound shapes should pass the inner `Shape.decode` to the codecs, so every level gets its result checked.
        """
        raise NotImplementedError
