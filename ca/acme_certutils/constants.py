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

"""Constants used throughout acme-certutils."""

# IMPORTANT: Do **not** import any module from acme_certutils at runtime here, or you risk circular imports.

#: Label written for certificates, as defined in RFC 7468, section 5.1.
PEM_CERTIFICATE_LABEL = "CERTIFICATE"

#: Label written for certificate signing requests, as defined in RFC 7468, section 7.
PEM_CSR_LABEL = "CERTIFICATE REQUEST"

#: Labels accepted when reading certificates. ``X509 CERTIFICATE`` is used by some older tools.
PEM_CERTIFICATE_LABELS: tuple[str, ...] = (PEM_CERTIFICATE_LABEL, "X509 CERTIFICATE")

#: Labels accepted when reading CSRs. ``NEW CERTIFICATE REQUEST`` is written by Netscape and Microsoft tools.
PEM_CSR_LABELS: tuple[str, ...] = (PEM_CSR_LABEL, "NEW CERTIFICATE REQUEST")

#: Default encoding when writing PEM data to binary streams. PEM itself only uses ASCII characters.
DEFAULT_OUTPUT_ENCODING = "utf-8"

#: All characters that can appear in PEM data (RFC 7468, section 3).
#: Output encodings must encode them exactly like ASCII.
PEM_CHARACTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/= -\n"
