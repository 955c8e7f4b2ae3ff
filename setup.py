#!/usr/bin/env python3
#
# This file is part of acme-certutils.
#
# acme-certutils is free software: you can redistribute it and/or modify it under the terms of the GNU
# General Public License as published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# acme-certutils is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without
# even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with acme-certutils.  If not,
# see <http://www.gnu.org/licenses/>.

"""setuptools based setup.py file for acme-certutils."""

from setuptools import find_packages
from setuptools import setup

setup(
    name="acme-certutils",
    version="1.1.0",
    description="Read and write X.509 certificates, certificate chains and CSRs as PEM files.",
    license="GPL-3.0-or-later",
    python_requires=">=3.10",
    packages=find_packages("ca", exclude=("acme_certutils.tests", "acme_certutils.tests.base")),
    package_dir={"": "ca"},
    install_requires=[
        "annotated-types>=0.6",
        "asn1crypto>=1.5",
        "cryptography>=42",
        "packaging",
        "pydantic>=2.6",
    ],
    extras_require={
        "test": ["pytest>=8", "pytest-cov"],
    },
)
