#!/usr/bin/env python3
"""
kv Setup Script
===============
Allows installation of the kv package.

Usage:
    pip install -e .           # Development install
    pip install -e .[test]     # Development install with test tools
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="kv",
    version="1.0.0",
    description="A key-value store for the command line, kept in one plain-text file.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "kv=kv.cli:main",
        ],
    },
)
