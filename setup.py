#!/usr/bin/env python
from pathlib import Path

from setuptools import find_packages, setup

here = Path(__file__).parent.absolute()
long_description = (here / "README.md").read_text(encoding="utf-8")

setup(
    name="uniquotepy",
    version="0.1.0",
    description="""uniquotepy: Off-chain swap and liquidity quotes for V2 pairs""",
    long_description=long_description,
    long_description_content_type="text/markdown",
    include_package_data=True,
    install_requires=[
        "eth-abi>=5.0.1,<6",
        "eth-pydantic-types>=0.2.2,<0.3",
        "eth-utils>=5.1.0,<6",
        "pydantic>=2.10.4,<3",
    ],
    python_requires=">=3.10,<4",
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-timeout>=2.2.0,<3",
        ],
        "lint": [
            "ruff>=0.11.7",
            "mypy>=1.18.2,<2",
        ],
        "release": [
            "setuptools>=75.6.0",
            "wheel",
            "twine",
        ],
    },
    license="Apache-2.0",
    zip_safe=False,
    keywords="ethereum",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    package_data={"uniquote": ["py.typed"]},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Operating System :: MacOS",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
)
