""" blskeylib build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import blskeylib

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=blskeylib.name,
    version=blskeylib.__version__,
    license=blskeylib.__license__,
    author=blskeylib.__author__,
    author_email=blskeylib.__author_email__,
    description="EIP-2333 hierarchical deterministic BLS12-381 secret keys",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "bls12-381 bls-signatures eip-2333 eip-2334 hkdf lamport "
        "hierarchical-deterministic key-derivation"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
