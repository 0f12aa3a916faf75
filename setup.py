import os
import sys

import setuptools
from setuptools import find_packages

root = os.path.abspath(os.path.dirname(__file__))
sys.path.append(root)

from naturedopes_cli.version import __version__

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()


def read_requirements(path):
    if not isinstance(path, list):
        path = [path]
    requirements = []
    for p in path:
        with open(p) as fh:
            requirements.extend([line.strip() for line in fh if line.strip()])
    return requirements


setuptools.setup(
    name="naturedopes-cli",
    version=__version__,
    description="Command-line client for the Nature Dopes image and species catalog API.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(
        where=".",
        exclude=(
            "requirements",
            "tests",
            "tests.*",
        ),
    ),
    entry_points={
        "console_scripts": [
            "naturedopes=naturedopes_cli.main:app",
            "naturedopes-cli=naturedopes_cli.main:app",
        ],
    },
    install_requires=read_requirements("requirements/requirements.cli.txt"),
    extras_require={
        "test": read_requirements("requirements/requirements.test.unit.txt"),
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
)
