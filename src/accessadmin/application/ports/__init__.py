"""Application ports - interfaces for external adapters."""

from accessadmin.application.ports.access_api import AccessApi

__all__ = [
    "AccessApi",
]
