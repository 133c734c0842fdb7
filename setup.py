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

from setuptools import find_packages, setup

from bytestream import __version__

setup(
    name='bytestream',
    version=__version__,
    description='Explicit, byte-order aware binary streaming of values and records',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(exclude=('tests', 'tests.*', 'examples', 'examples.*')),
    package_data={
        'bytestream.conf': ['*.yml'],
    },
    install_requires=[
        'pydantic>=2',
        'pyyaml',
        'structlog',
        'typing_extensions>=4.6',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
