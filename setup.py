# SPDX-License-Identifier: MIT
# Copyright (c) 2025 WUD contributors

"""Setup configuration for wud-reporting package."""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file if it exists
this_directory = Path(__file__).parent
readme_path = this_directory / "README.md"
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")
else:
    long_description = "Error reporting client that posts application errors to a Slack webhook"

setup(
    name="wud-reporting",
    version="0.1.0",
    author="WUD Contributors",
    description="Error reporting client that posts application errors to a Slack webhook",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["wud", "wud.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
)
