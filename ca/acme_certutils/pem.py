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

"""Read and write certificates and certificate signing requests as PEM files.

The functions in this module take ownership of the stream that is passed to them: The stream is always
closed when the function returns, regardless of if reading or writing succeeded or not.

Readers only ever consider the *first* object in a stream. Any data after the first PEM block is ignored,
even if it is not valid PEM data. Use :py:func:`read_x509_certificates` to read all certificates in a
stream.
"""

import io
import logging
import re
from collections.abc import Callable, Iterator
from contextlib import closing
from typing import Any

from asn1crypto import pem

from cryptography import x509
from cryptography.hazmat.primitives.serialization import Encoding

from acme_certutils.conf import model_settings
from acme_certutils.deprecation import RemovedInAcmeCertutils20Warning, deprecate_function
from acme_certutils.exceptions import DecodeError, FormatMismatchError
from acme_certutils.typehints import CertificateSequence, OptionalCertificate, ReadableStream, WritableStream

log = logging.getLogger(__name__)

# Same expression that asn1crypto uses to find the start of a PEM block
PEM_BEGIN_RE = re.compile(rb"^(?:---- |-----)BEGIN ([A-Z0-9 ]+)(?: ----|-----)")


def _read_bytes(stream: ReadableStream) -> bytes:
    """Read all data from `stream` and close it."""
    with closing(stream):
        data = stream.read()

    if isinstance(data, str):
        try:
            return data.encode("ascii")
        except UnicodeEncodeError as ex:
            raise DecodeError("PEM data must only contain ASCII characters.") from ex
    return data


def _end_lines(data: bytes) -> Iterator[bytes]:
    """Get the line that ends each PEM block, in the order :py:func:`asn1crypto.pem.unarmor` reads them.

    asn1crypto ends a block at any line starting with dashes, but does not check what that line says.
    """
    in_block = False
    for line in data.splitlines():
        if not in_block:
            in_block = PEM_BEGIN_RE.match(line) is not None
        elif line[:5] in (b"-----", b"---- "):
            in_block = False
            yield line


def _check_end_line(label: str, end_line: bytes) -> None:
    """Raise DecodeError if `end_line` is not the END marker for a block labeled `label`."""
    expected = f"-----END {label}-----".encode("ascii")
    if end_line.rstrip() != expected:
        cause = ValueError(f"{end_line!r}: Expected {expected!r}.")
        raise DecodeError("Could not decode PEM data.") from cause


def _unarmor(data: bytes) -> tuple[str, bytes]:
    """Get label and DER encoded body of the first PEM block in `data`."""
    try:
        label, _headers, der = pem.unarmor(data)
    except ValueError as ex:  # also raised by base64 for an invalid body
        raise DecodeError("Could not decode PEM data.") from ex

    _check_end_line(label, next(_end_lines(data)))
    return label, der


def _unarmor_all(data: bytes) -> Iterator[tuple[str, bytes]]:
    """Get label and DER encoded body of every PEM block in `data`."""
    for (label, _headers, der), end_line in zip(pem.unarmor(data, multiple=True), _end_lines(data)):
        _check_end_line(label, end_line)
        yield label, der


def _filter_certificates(certs: CertificateSequence) -> list[x509.Certificate]:
    return [cert for cert in certs if cert is not None]


def _pem_writer(out: WritableStream) -> Callable[[str], Any]:
    """Get a function writing PEM data to `out`.

    Text streams receive the data as ``str``, anything else is treated as binary sink and receives the data
    encoded with ``CERT_OUTPUT_ENCODING``.
    """
    if isinstance(out, io.TextIOBase):
        return out.write

    encoding = model_settings.CERT_OUTPUT_ENCODING
    return lambda text: out.write(text.encode(encoding))  # type: ignore[arg-type]


def read_x509_certificate(stream: ReadableStream) -> x509.Certificate:
    """Read an X.509 certificate from a PEM file.

    Only the first PEM block in `stream` is read. If the stream does not contain any PEM data, it is parsed as
    DER encoded certificate instead (unless disabled with ``CERT_ACCEPT_DER``).

    Parameters
    ----------
    stream : file-like object
        The stream to read the certificate from. The stream is closed after use.

    Raises
    ------
    DecodeError
        If the stream does not contain a valid certificate.
    """
    data = _read_bytes(stream)

    if not pem.detect(data):
        if not model_settings.CERT_ACCEPT_DER:
            raise DecodeError("Could not find PEM encoded data.")

        try:
            cert = x509.load_der_x509_certificate(data)
        except ValueError as ex:
            raise DecodeError("Could not parse certificate.") from ex
        log.debug("Read DER encoded certificate with serial %x.", cert.serial_number)
        return cert

    label, der = _unarmor(data)
    if label not in model_settings.CERT_CERTIFICATE_LABELS:
        raise DecodeError(f"{label}: Not an X.509 certificate.")

    try:
        cert = x509.load_der_x509_certificate(der)
    except ValueError as ex:
        raise DecodeError("Could not parse certificate.") from ex

    log.debug("Read certificate with serial %x from PEM block labeled %s.", cert.serial_number, label)
    return cert


def read_x509_certificates(stream: ReadableStream) -> list[x509.Certificate]:
    """Read all X.509 certificates from a PEM file, e.g. a certificate chain.

    PEM blocks that do not contain certificates (e.g. private keys) are skipped.

    Parameters
    ----------
    stream : file-like object
        The stream to read the certificates from. The stream is closed after use.

    Raises
    ------
    DecodeError
        If the stream does not contain PEM data, any PEM block has an invalid END marker or any certificate in
        it is invalid.
    """
    data = _read_bytes(stream)

    certificates: list[x509.Certificate] = []
    try:
        for label, der in _unarmor_all(data):
            if label not in model_settings.CERT_CERTIFICATE_LABELS:
                log.debug("Skipping PEM block labeled %s.", label)
                continue
            certificates.append(x509.load_der_x509_certificate(der))
    except ValueError as ex:
        raise DecodeError("Could not read certificates.") from ex

    log.debug("Read %s certificate(s) from PEM data.", len(certificates))
    return certificates


def read_csr(stream: ReadableStream) -> x509.CertificateSigningRequest:
    """Read a certificate signing request (CSR) from a PEM file.

    Only the first PEM block in `stream` is read.

    Parameters
    ----------
    stream : file-like object
        The stream to read the CSR from. The stream is closed after use.

    Raises
    ------
    FormatMismatchError
        If the stream contains no PEM data or the first PEM block is not a CSR.
    DecodeError
        If the CSR cannot be decoded.
    """
    data = _read_bytes(stream)

    if not pem.detect(data):
        raise FormatMismatchError("Not a PKCS10 CSR.")

    label, der = _unarmor(data)
    if label not in model_settings.CERT_CSR_LABELS:
        raise FormatMismatchError(f"{label}: Not a PKCS10 CSR.")

    try:
        csr = x509.load_der_x509_csr(der)
    except ValueError as ex:
        raise DecodeError("Could not parse certificate signing request.") from ex

    log.debug("Read CSR for %s.", csr.subject.rfc4514_string())
    return csr


def write_x509_certificates(out: WritableStream, *certs: OptionalCertificate) -> None:
    """Write multiple X.509 certificates to a PEM file.

    Certificates are written in the order given. ``None`` values are ignored, no certificates at all results
    in an empty file.

    Parameters
    ----------
    out : file-like object
        The stream to write to. Anything that is not a text stream receives data encoded with
        ``CERT_OUTPUT_ENCODING``, so it only needs to implement ``write()`` and ``close()``.
        The stream is closed after use, even if writing fails.
    *certs : :py:class:`~cryptography.x509.Certificate`
        The certificates to write.
    """
    certificates = _filter_certificates(certs)

    with closing(out):
        write = _pem_writer(out)
        for cert in certificates:
            write(cert.public_bytes(Encoding.PEM).decode("ascii"))

    log.debug("Wrote %s certificate(s) as PEM.", len(certificates))


def write_x509_certificate(cert: x509.Certificate, out: WritableStream) -> None:
    """Write a single X.509 certificate to a PEM file.

    `out` is closed after use.
    """
    write_x509_certificates(out, cert)


@deprecate_function(RemovedInAcmeCertutils20Warning, replacement="write_x509_certificates")
def write_x509_certificate_chain(
    out: WritableStream, cert: OptionalCertificate, *chain: OptionalCertificate
) -> None:
    """Write an X.509 certificate and its chain to a PEM file.

    .. deprecated:: 1.1

       Use :py:func:`write_x509_certificates` instead.

    `cert` is written first, followed by the `chain`. ``None`` values are skipped, `out` is closed after use.
    """
    write_x509_certificates(out, *(cert, *chain))
