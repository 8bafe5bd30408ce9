#!/usr/bin/env python

from setuptools import setup

setup(
    name="xcodeproj",
    version="0.1.0",
    description="Read and edit Xcode project.pbxproj files",
    packages=[
        "xcodeproj",
        "xcodeproj.parser",
        "xcodeproj.pbxproj",
    ],
    python_requires=">=3.9",
    extras_require={"test": ["pytest"]},
)
