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

"""Various type aliases used in throughout acme-certutils."""

from collections.abc import Iterable
from typing import IO, Optional, Union

from cryptography import x509

# IMPORTANT: Do **not** import any module from acme_certutils at runtime here, or you risk circular imports.

#: Streams PEM data can be read from. Text streams are accepted, but PEM data is ASCII anyway.
ReadableStream = Union[IO[bytes], IO[str]]

#: Streams PEM data can be written to. Anything that is not a text stream receives encoded bytes.
WritableStream = Union[IO[str], IO[bytes]]

#: A certificate that may be absent. Absent certificates are skipped when writing.
OptionalCertificate = Optional[x509.Certificate]

#: Certificates passed to functions that write multiple certificates.
CertificateSequence = Iterable[OptionalCertificate]
