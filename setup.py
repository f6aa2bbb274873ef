#!/usr/bin/env python

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from setuptools import find_packages
from setuptools import setup


setup(
    name="kanacombiner",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="Combine kana key events into composed hiragana, with dakuten, small forms and undo",
    long_description=(
        "A stateful combiner for soft-keyboard input: turns a stream of kana key events into composed hiragana, "
        "applying dakuten and handakuten, small ya/yu/yo and small tsu, with backspace undoing one combining step at a time."
    ),
    author="Rose Davidson",
    author_email="rose@metaclassical.com",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Natural Language :: Japanese",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Text Processing :: General",
    ],
    keywords=[
        "kana",
        "hiragana",
        "input method",
    ],
    python_requires=">=3.10",
    install_requires=[
        "cattrs>=22.2.0",
        "msgspec",
        "trio>=0.23.0",
    ],
    tests_require=["pytest>=6.2.4", "pytest-trio>=0.8.0"],
    extras_require={
        "test": ["pytest>=6.2.4", "pytest-trio>=0.8.0"],
    },
    entry_points={
        "console_scripts": [
            "kana-combine = kanacombiner.scripts:combine_cli",
        ],
    },
)
