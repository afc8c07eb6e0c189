"""Packaging settings."""
from codecs import open as codecs_open
from os.path import abspath, dirname, isfile, join

from setuptools import find_packages, setup

THIS_DIR = abspath(dirname(__file__))

LONG_DESCRIPTION = ""
if isfile(join(THIS_DIR, "README.md")):
    with codecs_open(join(THIS_DIR, "README.md"), encoding="utf-8") as readfile:
        LONG_DESCRIPTION = readfile.read()


INSTALL_REQUIRES = [
    "click>=8.0",
    "coloredlogs",
    "humanfriendly",  # terminal color detection
    "pydantic>=2.0,<3.0",
    "PyYAML>=5.1",
    "requests",
]

TESTS_REQUIRE = [
    "pytest>=7.0",
    "pytest-mock",
]


setup(
    name="kcloud",
    version="0.1.0",
    description="Manage KraftCloud images from the command line",
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    license="BSD-3-Clause",
    classifiers=[
        "Intended Audience :: Developers",
        "Topic :: Utilities",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    keywords="cli",
    packages=find_packages(exclude=("tests*",)),
    install_requires=INSTALL_REQUIRES,
    extras_require={"test": TESTS_REQUIRE},
    entry_points={"console_scripts": ["kcloud=kcloud._cli.main:cli"]},
)
