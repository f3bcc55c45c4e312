#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import os
import re

from setuptools import find_packages, setup

with open(os.path.join(os.path.dirname(__file__), 'xmlrpc_serde', 'version.py')) as fp:
    version_match = re.search(r"^__version__ = '([^']+)'$", fp.read(), re.MULTILINE)
assert version_match is not None

setup(
    name='xmlrpc-serde',
    version=version_match.group(1),
    description='Type-directed conversion between Python values and XML-RPC values',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License 2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(exclude=('xmlrpc_serde_tests', 'xmlrpc_serde_tests.*')),
    install_requires=[
        'pydantic>=2',
        'pyyaml',
        'structlog',
        'typing_extensions',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
