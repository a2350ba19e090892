#!/usr/bin/env python
from setuptools import find_packages, setup

setup(
    name="blendsplit",
    version="1.0.0",
    description="Merge images with auto-selected blend modes and split images "
    "into block-randomized layers.",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "attrs>=22.2.0",
        "numpy",
        "Pillow>=9.1.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["blendsplit=blendsplit.__main__:main"],
    },
)
