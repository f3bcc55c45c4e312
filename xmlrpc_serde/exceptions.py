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
Exceptions raised while converting between typed Python values and XML-RPC values.

All conversion failures inherit from `CodecError` and carry the path from the root value to the node where the
failure was detected, for example `('points', 2, 'x')`. Compound shapes prepend their own segment while the error
propagates, so the code that raises only needs to describe the local problem.

Problems with the annotation itself (as opposed to the data) are reported as `TypeError` subclasses, because they
are programming errors that would fail for every input.
"""

from typing import TypeAlias

PathSegment: TypeAlias = str | int


class CodecError(Exception):
    """Base class for every failure while encoding or decoding a value."""

    path: tuple[PathSegment, ...]

    def __init__(self, message: str, *, path: tuple[PathSegment, ...] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def prepend_path(self, segment: PathSegment) -> None:
        self.path = (segment, *self.path)

    def path_str(self) -> str:
        """Render the path in a way that can be read back by a person.

        >>> err = CodecError('boom', path=('points', 2, 'x'))
        >>> err.path_str()
        '$.points[2].x'
        """
        parts = ['$']
        for segment in self.path:
            if isinstance(segment, int):
                parts.append(f'[{segment}]')
            else:
                parts.append(f'.{segment}')
        return ''.join(parts)

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f'at {self.path_str()}: {self.message}'


class EncodeError(CodecError):
    """Raised when a Python value cannot be represented as an XML-RPC value."""


class DecodeError(CodecError):
    """Raised when an XML-RPC value cannot be materialized as the requested type."""


class UnsupportedKeyError(EncodeError):
    """A map key did not encode to a string."""


class TypeMismatchError(DecodeError):
    """The wire value kind is incompatible with the requested type."""


class UnknownVariantError(DecodeError):
    """The single field name of an encoded variant does not name any variant of the requested enum."""


class InvalidVariantShapeError(DecodeError):
    """An encoded variant must be a struct with exactly one field."""


class InvalidOptionShapeError(DecodeError):
    """An encoded option must be an array with zero or one element."""


class InvalidUnitShapeError(DecodeError):
    """An encoded unit must be a struct with zero fields."""


class InvalidIntegerError(DecodeError):
    """A string that should hold a decimal integer does not."""


class InvalidCharError(CodecError):
    """A string that should hold a single character does not."""


class ArityMismatchError(DecodeError):
    """An array does not have the number of elements of the requested fixed-size tuple."""


class MissingFieldError(DecodeError):
    """A required struct field is absent."""


class UnknownFieldError(DecodeError):
    """A struct field is not declared by the requested type (only raised in strict mode)."""


class DuplicateFieldError(DecodeError):
    """A struct has the same field name more than once."""


class IntegerOutOfRangeError(CodecError):
    """An integer does not fit the declared width, on either direction."""


class RecursionLimitError(CodecError):
    """The value is nested deeper than the configured maximum depth."""


class UnsupportedTypeError(TypeError):
    """The annotation cannot be mapped to any shape."""


class ValueTypeError(TypeError):
    """A Python value given for encoding does not match its annotation."""


class FaultError(Exception):
    """The remote end answered with a fault instead of a result."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f'fault {code}: {message}')
        self.code = code
        self.message = message
