#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="clbuiltins",
    version="0.1.0",
    description="OpenCL C builtin recognition: mangled symbol decoding and builtin classification",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={
        "clbuiltins": ["config.json5", "catalog/builtins.yaml"],
    },
    python_requires=">=3.10",
    install_requires=[
        "PyYAML",
        "json5",
    ],
    extras_require={
        "dev": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "clbuiltins=clbuiltins.cli:main",
        ],
    },
)
