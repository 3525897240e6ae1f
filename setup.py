#!/usr/bin/env python3

import pathlib

from setuptools import find_packages, setup

HERE = pathlib.Path(__file__).parent

# Handle README.md that might not exist in Docker build
try:
    README = (HERE / "README.md").read_text()
except FileNotFoundError:
    README = "Read-only text view of libtcd tide constituent databases"

setup(
    name="tcdinspect",
    version="1.0.0",
    description="Read-only text view of libtcd tide constituent databases",
    long_description=README,
    long_description_content_type="text/markdown",
    author="tcdinspect contributors",
    url="https://github.com/tcdinspect/tcdinspect",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.13",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.10",
    install_requires=[
        "click>=8.1.7",
        "rich>=13.7.0",
        "colorlog>=6.8.0",
        "pyfiglet>=0.8.post1",
        "python-magic>=0.4.27",
    ],
    extras_require={
        "test": ["pytest>=7.4.0"],
    },
    entry_points={
        "console_scripts": [
            "tcdinspect=tcdinspect.__main__:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
