#!/usr/bin/env python3
"""
Setup configuration for the Pinboard to Raindrop.io converter
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="pinboard-to-raindrop",
    version="1.0.0",
    author="",
    author_email="",
    description="Convert Pinboard bookmarks into a Raindrop.io import CSV file",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pinboard_to_raindrop", "pinboard_to_raindrop.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "pinboard-to-raindrop=pinboard_to_raindrop.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
