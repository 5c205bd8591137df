"""Setup script for methdev, the meth compiler workflow runner."""

import re
from pathlib import Path

from setuptools import find_packages, setup


def read_version():
    """Read __version__ from the package without importing it."""
    init = Path(__file__).parent / "methdev" / "__init__.py"
    match = re.search(r'^__version__ = "([^"]+)"', init.read_text(), re.MULTILINE)
    if match:
        return match.group(1)
    return "0.0.0"


setup(
    name="methdev",
    version=read_version(),
    description="Build, stage and run the meth compiler during development",
    python_requires=">=3.10",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "dependency-injector>=4.41",
        "tomli>=2.0; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "methdev=methdev.__main__:main",
        ],
    },
)
