#!/usr/bin/env python
"""
Setup.py for graphkit.
"""

from setuptools import setup, find_packages

setup(
    name="graphkit",
    version="0.1.0",
    description="Graph construction, analysis and algorithm tracing",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
