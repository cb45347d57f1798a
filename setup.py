#!/usr/bin/env python
"""
cgv2 - Typed accessors for the Linux cgroup v2 interface files
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Define required packages
required_packages = [
    "pydantic>=2.0.0",  # For settings validation
    "psutil>=5.9.0",    # For locating the cgroup2 mount
    "pyyaml>=6.0",      # For configuration file support
]

setup(
    name="cgv2",
    version="0.1.0",
    author="DarsheeeGamer",
    author_email="cleaverdeath@gmail.com",
    description="Typed accessors for the Linux cgroup v2 interface files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=required_packages,
    include_package_data=True,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
    ],
)
