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
Integers that don't fit an `<i4>` are carried as their decimal representation in a string.

The accepted grammar is strict: an optional sign followed by ASCII digits, no whitespace, no underscores, no other
bases. This is narrower than what `int()` accepts on purpose, the text comes from the wire.

>>> encode_decimal(18_446_744_073_709_551_615)
Str(value='18446744073709551615')
>>> decode_decimal(Decoder(), Str('-8000000000000000000'))
-8000000000000000000
>>> decode_decimal(Decoder(), Str('+42'))
42
>>> decode_decimal(Decoder(), Str(' 42'))
Traceback (most recent call last):
...
xmlrpc_serde.exceptions.InvalidIntegerError: ' 42' is not a decimal integer
>>> decode_decimal(Decoder(), Str('1_000'))
Traceback (most recent call last):
...
xmlrpc_serde.exceptions.InvalidIntegerError: '1_000' is not a decimal integer
"""

import re

from xmlrpc_serde.decoder import Decoder
from xmlrpc_serde.exceptions import IntegerOutOfRangeError, InvalidIntegerError
from xmlrpc_serde.value import Str, Value

_DECIMAL_RE = re.compile(r'[+-]?[0-9]+')


def encode_decimal(number: int) -> Str:
    return Str(str(number))


def parse_decimal(text: str) -> int:
    if _DECIMAL_RE.fullmatch(text) is None:
        raise InvalidIntegerError(f'{text!r} is not a decimal integer')
    return int(text)


def decode_decimal(decoder: Decoder, value: Value) -> int:
    text = decoder.expect(value, Str, 'decimal integer').value
    return parse_decimal(text)


def check_range(number: int, lower_bound: int, upper_bound: int, type_name: str) -> int:
    """ Fail with IntegerOutOfRangeError when the number is outside the closed interval.

    >>> check_range(255, 0, 255, 'U8')
    255
    >>> check_range(256, 0, 255, 'U8')
    Traceback (most recent call last):
    ...
    xmlrpc_serde.exceptions.IntegerOutOfRangeError: 256 is out of range for U8 [0, 255]
    """
    if not lower_bound <= number <= upper_bound:
        raise IntegerOutOfRangeError(f'{number} is out of range for {type_name} [{lower_bound}, {upper_bound}]')
    return number
