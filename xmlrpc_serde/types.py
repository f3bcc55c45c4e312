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
Annotations for the categories Python doesn't have a builtin type for.

Python has a single `int`, these aliases declare the width that the value is expected to have, which decides
whether it goes on the wire as `<i4>` or as a decimal string. At runtime they're plain `int`/`str`.
"""

from typing import NewType

I8 = NewType('I8', int)
I16 = NewType('I16', int)
I32 = NewType('I32', int)
I64 = NewType('I64', int)
U8 = NewType('U8', int)
U16 = NewType('U16', int)
U32 = NewType('U32', int)
U64 = NewType('U64', int)

# a string with exactly one code point
Char = NewType('Char', str)

__all__ = [
    'I8',
    'I16',
    'I32',
    'I64',
    'U8',
    'U16',
    'U32',
    'U64',
    'Char',
]
