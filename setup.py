#!/usr/bin/env python
"""
Setup.py for the topograph directed graph library.
"""

from setuptools import setup, find_packages

setup(
    name="pytopograph",
    version="0.1.0",
    description="In-memory directed graph with closure and subgraph queries",
    packages=find_packages(include=["topograph", "topograph.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pydantic>=2",
        "pydantic-settings>=2",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
