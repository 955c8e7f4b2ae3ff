# This file is part of acme-certutils.
#
# acme-certutils is free software: you can redistribute it and/or modify it under the terms of the GNU General
# Public License as published by the Free Software Foundation, either version 3 of the License, or (at your
# option) any later version.
#
# acme-certutils is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the
# implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU General Public License
# for more details.
#
# You should have received a copy of the GNU General Public License along with acme-certutils. If not, see
# <http://www.gnu.org/licenses/>.

"""pytest configuration."""

# pylint: disable=redefined-outer-name  # requested pytest fixtures show up this way.

import importlib.metadata
import sys
from collections.abc import Callable, Iterator
from datetime import datetime, timedelta, timezone as tz
from typing import Any

from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.types import CertificateIssuerPrivateKeyTypes
from cryptography.x509.oid import NameOID

import pytest
from _pytest.config import Config as PytestConfig

from acme_certutils.conf import model_settings


def pytest_configure(config: "PytestConfig") -> None:  # pylint: disable=unused-argument
    """Output libraries used for testing."""
    print("Testing with:")
    print("* Python: ", sys.version.replace("\n", ""))
    installed_versions = {p.metadata["Name"]: p.version for p in importlib.metadata.distributions()}
    for pkg in sorted(["asn1crypto", "cryptography", "pydantic"]):
        print(f"* {pkg}: {installed_versions.get(pkg, 'not installed')}")


def _name(common_name: str) -> x509.Name:
    return x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])


def _sign(
    subject: x509.Name,
    public_key: ec.EllipticCurvePublicKey,
    issuer: x509.Name,
    signing_key: CertificateIssuerPrivateKeyTypes,
    ca: bool,
) -> x509.Certificate:
    now = datetime.now(tz=tz.utc)
    builder = (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(issuer)
        .public_key(public_key)
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=90))
        .add_extension(x509.BasicConstraints(ca=ca, path_length=None), critical=True)
    )
    return builder.sign(signing_key, hashes.SHA256())


@pytest.fixture(scope="session")
def root_key() -> ec.EllipticCurvePrivateKey:
    """Private key of the root CA."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def child_key() -> ec.EllipticCurvePrivateKey:
    """Private key of the intermediate CA."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def leaf_key() -> ec.EllipticCurvePrivateKey:
    """Private key used for end entity certificates and CSRs."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def root(root_key: ec.EllipticCurvePrivateKey) -> x509.Certificate:
    """Self-signed root CA."""
    name = _name("Root CA")
    return _sign(name, root_key.public_key(), name, root_key, ca=True)


@pytest.fixture(scope="session")
def child(
    root: x509.Certificate, root_key: ec.EllipticCurvePrivateKey, child_key: ec.EllipticCurvePrivateKey
) -> x509.Certificate:
    """Intermediate CA signed by the root CA."""
    return _sign(_name("Intermediate CA"), child_key.public_key(), root.subject, root_key, ca=True)


@pytest.fixture(scope="session")
def leaf(
    child: x509.Certificate, child_key: ec.EllipticCurvePrivateKey, leaf_key: ec.EllipticCurvePrivateKey
) -> x509.Certificate:
    """End entity certificate signed by the intermediate CA."""
    return _sign(_name("example.com"), leaf_key.public_key(), child.subject, child_key, ca=False)


@pytest.fixture(scope="session")
def csr(leaf_key: ec.EllipticCurvePrivateKey) -> x509.CertificateSigningRequest:
    """Certificate signing request for example.com."""
    builder = x509.CertificateSigningRequestBuilder().subject_name(_name("example.com"))
    return builder.sign(leaf_key, hashes.SHA256())


@pytest.fixture()
def settings() -> Iterator[Callable[..., None]]:
    """Fixture to override settings, the default settings are restored after the test."""

    def override(**kwargs: Any) -> None:
        model_settings.reload(kwargs)

    yield override
    model_settings.reload()
