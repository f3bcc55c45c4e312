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

import typing
from typing import Any


def get_origin(type_: Any) -> Any:
    """ Same as `typing.get_origin`, kept here so every module inspects annotations the same way.

    >>> get_origin(dict[str, int])
    <class 'dict'>
    >>> get_origin(int) is None
    True
    """
    return typing.get_origin(type_)


def get_args(type_: Any) -> tuple[Any, ...] | None:
    """ Like `typing.get_args` but returns `None` when the annotation is not parametrized at all.

    This allows telling `tuple` apart from `tuple[()]`:

    >>> get_args(tuple) is None
    True
    >>> get_args(tuple[()])
    ()
    >>> get_args(dict[str, int])
    (<class 'str'>, <class 'int'>)
    """
    if not hasattr(type_, '__args__'):
        return None
    return typing.get_args(type_)


def is_subclass(type_: Any, class_or_tuple: type | tuple[type, ...]) -> bool:
    """ Like `issubclass` but returns False instead of failing when `type_` is not a class.

    >>> is_subclass(bool, int)
    True
    >>> is_subclass(list[int], list)
    False
    """
    # XXX: some parametrized aliases pass the isinstance check but are refused by issubclass
    try:
        return isinstance(type_, type) and issubclass(type_, class_or_tuple)
    except TypeError:
        return False


def is_newtype(type_: Any) -> bool:
    """ Whether the annotation was created with `typing.NewType`.

    >>> from typing import NewType
    >>> is_newtype(NewType('UserId', int))
    True
    >>> is_newtype(int)
    False
    """
    return isinstance(type_, typing.NewType)


def newtype_runtime_class(type_: Any) -> type:
    """ The class that values of a NewType have at runtime, following chained NewTypes.

    >>> from typing import NewType
    >>> A = NewType('A', bytes)
    >>> B = NewType('B', A)
    >>> newtype_runtime_class(B)
    <class 'bytes'>
    """
    while is_newtype(type_):
        type_ = type_.__supertype__
    return get_origin(type_) or type_
