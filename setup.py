#!/usr/bin/env python

from setuptools import setup


VERSION = "0.1a1"

setup(
    name="lxml-selection",
    version=VERSION,
    description="A jQuery-like API to query and manipulate HTML documents with lxml.",
    license="AGPL-3.0-or-later",
    packages=["lxml_selection"],
    python_requires=">=3.10",
    install_requires=["cssselect", "lxml"],
    extras_require={"tests": ["pytest"]},
)
