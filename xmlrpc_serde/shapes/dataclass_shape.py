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
Dataclasses are structs, each field is a member named after the field, in declaration order.

A dataclass without fields is a unit struct and is carried as an empty struct, which is decoded strictly: members are
rejected even when unknown fields are otherwise ignored.

A field can go on the wire with a different name:

>>> from dataclasses import dataclass, field
>>> from xmlrpc_serde.shapes import make_shape
>>> @dataclass
... class Fault:
...     code: int = field(metadata={'rename': 'faultCode'})
...     message: str = field(metadata={'rename': 'faultString'})
>>> make_shape(Fault).encode_value(Fault(4, 'Too many parameters.'))
Struct(members=(('faultCode', Int(value=4)), ('faultString', Str(value='Too many parameters.'))))

Decoding fills missing fields from the field defaults, and with `None` for optional fields when
`CodecSettings.MISSING_OPTIONAL_AS_NONE` is set. Fields that are not part of `__init__` are not carried at all.

A dataclass can refer to itself, directly or through other dataclasses, as long as the annotations can be resolved
with `typing.get_type_hints`.
"""

from __future__ import annotations

import threading
from dataclasses import MISSING, fields, is_dataclass
from types import NoneType, UnionType
from typing import TYPE_CHECKING, Any, NamedTuple, TypeVar, Union, get_type_hints

from typing_extensions import Self, override

from xmlrpc_serde.codecs.struct import decode_struct, encode_struct
from xmlrpc_serde.codecs.unit import decode_unit, encode_unit
from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.encoder import Encoder
from xmlrpc_serde.exceptions import MissingFieldError, UnsupportedTypeError, ValueTypeError
from xmlrpc_serde.shapes.shape import Shape
from xmlrpc_serde.utils.typing import get_args, get_origin
from xmlrpc_serde.value import Value

if TYPE_CHECKING:
    from _typeshed import DataclassInstance

D = TypeVar('D', bound='DataclassInstance')

# dataclass shapes being built on the current thread, used to tie the knot on self-referencing dataclasses
_building = threading.local()


class _Field(NamedTuple):
    name: str
    wire_name: str
    shape: Shape[Any]
    has_default: bool
    is_optional: bool


def _is_optional_type(type_: Any) -> bool:
    if type_ is None or type_ is NoneType:
        return True
    return get_origin(type_) in (Union, UnionType) and NoneType in (get_args(type_) or ())


class DataclassShape(Shape[D]):
    __slots__ = ('_is_hashable', '_fields', '_class')

    _fields: tuple[_Field, ...]
    _class: type[D]

    def __init__(self, class_: type[D], fields_: tuple[_Field, ...] = ()) -> None:
        self._class = class_
        self._fields = fields_
        # eq=True without frozen=True sets __hash__ to None
        self._is_hashable = getattr(class_, '__hash__', None) is not None

    @override
    @classmethod
    def _from_type(cls, type_: type[D], /, *, type_map: Shape.TypeMap) -> Self:
        if not isinstance(type_, type) or not is_dataclass(type_):
            raise UnsupportedTypeError('expected a dataclass')
        in_progress: dict[type, Any] = getattr(_building, 'shapes', None) or {}
        _building.shapes = in_progress
        if type_ in in_progress:
            return in_progress[type_]
        shape = cls(type_)
        in_progress[type_] = shape
        try:
            shape._fields = cls._make_fields(type_, type_map=type_map)
        finally:
            del in_progress[type_]
        return shape

    @staticmethod
    def _make_fields(class_: type[D], /, *, type_map: Shape.TypeMap) -> tuple[_Field, ...]:
        try:
            hints = get_type_hints(class_)
        except NameError as e:
            raise UnsupportedTypeError(f'cannot resolve the annotations of {class_.__name__}: {e}') from e
        result: list[_Field] = []
        wire_names: set[str] = set()
        # XXX: the order is important, but `fields` has a stable order
        for field in fields(class_):
            if not field.init:
                continue
            wire_name = field.metadata.get('rename', field.name)
            if wire_name in wire_names:
                raise UnsupportedTypeError(f'{class_.__name__} has more than one field named {wire_name!r}')
            wire_names.add(wire_name)
            field_type = hints[field.name]
            result.append(_Field(
                name=field.name,
                wire_name=wire_name,
                shape=Shape.from_type(field_type, type_map=type_map),
                has_default=field.default is not MISSING or field.default_factory is not MISSING,
                is_optional=_is_optional_type(field_type),
            ))
        return tuple(result)

    @override
    def _check_value(self, value: D, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise ValueTypeError(f'expected {self._class.__name__}, got {type(value).__name__}')
        if deep:
            for field in self._fields:
                field.shape._check_value(getattr(value, field.name), deep=True)

    @override
    def _encode(self, encoder: Encoder, value: D, /) -> Value:
        if not self._fields:
            return encode_unit()
        return encode_struct(
            encoder,
            ((field.wire_name, getattr(value, field.name), field.shape.encode) for field in self._fields),
        )

    @override
    def _decode(self, decoder: Decoder, value: Value, /) -> D:
        if not self._fields:
            decode_unit(decoder, value)
            return self._class()
        decoded = decode_struct(
            decoder,
            value,
            {field.wire_name: field.shape.decode for field in self._fields},
            strict=decoder.settings.STRICT_FIELDS,
        )
        kwargs: dict[str, Any] = {}
        for field in self._fields:
            if field.wire_name in decoded:
                kwargs[field.name] = decoded[field.wire_name]
            elif field.has_default:
                continue
            elif field.is_optional and decoder.settings.MISSING_OPTIONAL_AS_NONE:
                kwargs[field.name] = None
            else:
                raise MissingFieldError(f'missing field {field.wire_name!r} of {self._class.__name__}')
        return self._class(**kwargs)
