import re
from pathlib import Path

from setuptools import find_packages, setup

_HERE = Path(__file__).parent


def _read_version() -> str:
    source = (_HERE / "pysrc" / "chronos" / "_pychronos.py").read_text()
    match = re.search(r'^__version__ = "([^"]+)"', source, re.MULTILINE)
    if match is None:
        raise RuntimeError("Unable to find the version of chronos")
    return match.group(1)


setup(
    name="chronos",
    version=_read_version(),
    description="Fluent, immutable date and time arithmetic for Python",
    license="MIT",
    python_requires=">=3.9",
    package_dir={"": "pysrc"},
    packages=find_packages("pysrc"),
    install_requires=[
        # ZoneInfo needs tzdata on platforms without a system tz database
        "tzdata>=2020.1",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "hypothesis>=6",
            "time-machine>=2.10",
        ],
        "benchmark": [
            "pytest-benchmark>=4",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
)
