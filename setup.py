import pathlib

from setuptools import find_packages
from setuptools import setup


def find_required(filename="requirements.txt"):
    with open(filename) as f:
        return f.read().splitlines()


def get_version(filename='devcycle/version'):
    return open(filename, "r").read().strip()


HERE = pathlib.Path(__file__).parent
README = open("README.md").read()
setup(
    name="devcycle",
    version=get_version(),
    description="development environment lifecycle orchestrator over docker compose, sqlx and cargo",
    long_description=README,
    long_description_content_type="text/markdown",
    python_requires=">=3.10.0",
    license="Apache-2.0",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=find_required(),
    extras_require={
        "tests": find_required("requirements-tests.txt"),
    },
    entry_points={
        "console_scripts": [
            "devcycle = devcycle.cli:run",
        ],
    },
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    package_data={
        'devcycle': ['version'],
    },
)
