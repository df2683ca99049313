#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

setup(
    name="glsl_linter",
    version="1.0.0",
    description="Shader stage detection and glslangValidator diagnostic parsing",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    package_dir={"": "python/tools"},
    packages=find_packages(where="python/tools"),
    python_requires=">=3.11",
    install_requires=[
        "loguru>=0.6.0",
        "pydantic>=2.0",
        "typer>=0.9.0",
        "rich>=13.0.0",
        "termcolor>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "glsl-lint=glsl_linter.utils.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Quality Assurance",
    ],
)
