#!/usr/bin/env python3
"""
Setup script for xorcrack - XOR cryptanalysis toolkit
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Read version from a version file
version = "1.0.0"
version_file = Path(__file__).parent / "xorcrack" / "__version__.py"
if version_file.exists():
    exec(version_file.read_text())
    version = __version__  # noqa: F821

setup(
    name="xorcrack",
    version=version,
    description="Break single-byte and repeating-key XOR by English frequency analysis",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="xorcrack Contributors",
    license="MIT",
    packages=find_packages(include=["xorcrack", "xorcrack.*"]),
    py_modules=["main"],
    python_requires=">=3.7",
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "hypothesis>=6.82.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
        "test": [
            "pytest>=7.4.0",
            "hypothesis>=6.82.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "xorcrack=main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Security :: Cryptography",
    ],
    keywords="ctf cryptanalysis xor cryptopals base64 hex",
    zip_safe=False,
)
