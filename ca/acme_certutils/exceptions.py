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

"""Exceptions raised by acme-certutils.

All exceptions derive from :py:class:`OSError`, so callers that handle any I/O failure in a single place
also handle PEM related errors.
"""


class ImproperlyConfigured(ValueError):
    """Raised when settings passed to :py:meth:`~acme_certutils.conf.SettingsProxy.reload` are invalid."""


class PemError(OSError):
    """Base class for errors when reading PEM data."""


class DecodeError(PemError):
    """PEM framing, base64 body or the DER structure of the object could not be decoded.

    The exception raised by the underlying parser is always available as ``__cause__``.
    """


class FormatMismatchError(PemError):
    """The data could be read, but does not contain the expected type of object."""
