#!/usr/bin/env python
from setuptools import setup, find_packages

setup(
    name="subcrawler",
    version="1.0.0",
    description="Subdomain Reconnaissance Tool",
    author="SubCrawler Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "dnspython",
        "tqdm",
        "colorama>=0.4.6",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "subcrawler=subcrawler.cli:main",
        ],
    },
    python_requires=">=3.9",
)
