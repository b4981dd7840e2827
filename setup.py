#!/usr/bin/env python3
"""
AssociativeArray Setup Script
=============================
Allows installation of the associative-array package.

Usage:
    pip install -e .           # Development install
    pip install -e ".[test]"   # Development install with test tools
"""

from setuptools import setup, find_packages

setup(
    name="associative-array",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
)
