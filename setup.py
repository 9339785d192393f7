#!/usr/bin/env python3
import re

from setuptools import setup, find_packages

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("src/accept_language/__init__.py", "r") as fh:
    version = re.search(r"^__version__ = '([^']+)'", fh.read(), re.M).group(1)

setup(
    name="accept-language",
    version=version,
    author="raember",
    author_email="raember@users.noreply.github.com",
    description="Parse the Accept-Language header and match it against supported languages",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/raember/accept-language",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "loguru",
        "requests",
    ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.6',
)
