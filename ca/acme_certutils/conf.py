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

"""Application configuration for acme-certutils."""

import codecs
from collections.abc import Iterable, Mapping
from typing import Annotated, Any, Optional

from annotated_types import MinLen
from pydantic import BaseModel, BeforeValidator, ConfigDict, field_validator

from acme_certutils import constants
from acme_certutils.exceptions import ImproperlyConfigured


def _label_parser(value: Any) -> Any:
    """Normalize PEM labels to upper case without surrounding whitespace."""
    if isinstance(value, str):
        return value.strip().upper()
    return value


PemLabel = Annotated[str, BeforeValidator(_label_parser), MinLen(1)]
PemLabels = Annotated[tuple[PemLabel, ...], MinLen(1)]


class SettingsModel(BaseModel):
    """Pydantic model defining available settings."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    CERT_ACCEPT_DER: bool = True
    CERT_CERTIFICATE_LABELS: PemLabels = constants.PEM_CERTIFICATE_LABELS
    CERT_CSR_LABELS: PemLabels = constants.PEM_CSR_LABELS
    CERT_OUTPUT_ENCODING: str = constants.DEFAULT_OUTPUT_ENCODING

    @field_validator("CERT_OUTPUT_ENCODING")
    @classmethod
    def validate_output_encoding(cls, value: str) -> str:
        """Validate that the output encoding is known to Python and encodes PEM data as plain ASCII."""
        try:
            name = codecs.lookup(value).name
            encoded = constants.PEM_CHARACTERS.encode(name)
        except LookupError as ex:  # also raised for codecs that are not text encodings, e.g. "rot13"
            raise ValueError(f"{value}: Unknown encoding.") from ex

        if encoded != constants.PEM_CHARACTERS.encode("ascii"):
            raise ValueError(f"{value}: Encoding is not ASCII compatible.")
        return name


class SettingsProxy:
    """Proxy class to access settings from the model.

    This class exists to enable reloading of settings in test cases.
    """

    __settings: SettingsModel

    def __init__(self) -> None:
        self.reload()

    def __dir__(self, object: Any = None) -> Iterable[str]:  # pylint: disable=redefined-builtin
        return list(super().__dir__()) + list(SettingsModel.model_fields)

    def reload(self, settings: Optional[Mapping[str, Any]] = None) -> None:
        """Reload settings model from the given mapping, or load the default settings.

        >>> model_settings.reload({"CERT_OUTPUT_ENCODING": "latin1"})
        >>> model_settings.CERT_OUTPUT_ENCODING
        'iso8859-1'
        >>> model_settings.reload()
        >>> model_settings.CERT_OUTPUT_ENCODING
        'utf-8'
        """
        try:
            self.__settings = SettingsModel.model_validate(settings or {})
        except ValueError as ex:
            raise ImproperlyConfigured(str(ex)) from ex

    def __getattr__(self, item: str) -> Any:
        return getattr(self.__settings, item)


model_settings = SettingsProxy()
