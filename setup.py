#!/usr/bin/env python
"""
Setup.py for indexgraph.
"""

from setuptools import find_packages, setup

setup(
    name="indexgraph",
    version="0.1.0",
    description="In-memory directed graphs with stable index handles",
    author="indexgraph maintainers",
    packages=find_packages(include=["indexgraph", "indexgraph.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
