#!/usr/bin/env python3
"""
diskv Setup Script
==================
Allows installation of the diskv package.

Usage:
    pip install -e .           # Development install
    pip install -e .[test]     # Development install with test tools
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="diskv",
    version="1.0.0",
    packages=find_packages(include=["diskv", "diskv.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "diskv-demo=diskv.demo:main",
        ],
    },
)
