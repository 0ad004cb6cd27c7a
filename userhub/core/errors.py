"""Error types raised by the adaptation layer."""

from __future__ import annotations

from typing import Optional


class UserHubError(Exception):
    """Base class for userhub errors."""


class ValidationError(UserHubError):
    """A DTO failed a required-field, numeric or format check.

    The message is always prefixed with the adapter name, e.g.
    ``[InternalUserAdapter] Missing or invalid required field: userId``.
    """

    def __init__(self, message: str, adapter_name: Optional[str] = None, field_name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.adapter_name = adapter_name
        self.field_name = field_name
