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

"""Deprecation classes in acme-certutils."""

import functools
import warnings
from collections.abc import Callable
from typing import Any, TypeVar, cast

# IMPORTANT: Do **not** import any module from acme_certutils here, or you risk circular imports.

F = TypeVar("F", bound=Callable[..., Any])


class RemovedInAcmeCertutils20Warning(PendingDeprecationWarning):
    """Warning if a feature will be removed in acme-certutils~=2.0.0."""

    version = "2.0"


RemovedInNextVersionWarning = RemovedInAcmeCertutils20Warning

DeprecationWarningType = type[RemovedInAcmeCertutils20Warning]


def deprecate_function(
    category: DeprecationWarningType, stacklevel: int = 2, replacement: str | None = None
) -> Callable[[F], F]:
    """Decorator to deprecate an entire function."""
    message = "{name}() is deprecated and will be removed in acme-certutils {version}"
    if replacement is not None:
        message += f", use {replacement}() instead."
    else:
        message += "."

    def decorator_deprecate(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            warnings.warn(
                message.format(name=func.__name__, version=category.version),
                category=category,
                stacklevel=stacklevel,
            )
            return func(*args, **kwargs)

        return cast(F, wrapper)

    return decorator_deprecate
