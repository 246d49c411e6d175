"""
API Layer Converters

Converters between API layer schemas and service layer schemas.
"""

from .mod_converters import (
    convert_mod_create_request,
    convert_mod_data_to_response,
    convert_mod_update_request,
    convert_version_create_request,
    convert_version_data_to_response,
)
from .redirect_converters import (
    convert_redirect_create_request,
    convert_redirect_data_to_response,
)

__all__ = [
    "convert_mod_create_request",
    "convert_mod_update_request",
    "convert_mod_data_to_response",
    "convert_version_create_request",
    "convert_version_data_to_response",
    "convert_redirect_create_request",
    "convert_redirect_data_to_response",
]
