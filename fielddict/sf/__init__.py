"""Salesforce CLI integration."""

from .cli import SalesforceCLI, SalesforceCLIError
from .queries import (
    build_last_modified_index,
    fetch_field_definitions,
    fetch_last_modified,
    parse_field_definitions,
)

__all__ = [
    "SalesforceCLI",
    "SalesforceCLIError",
    "build_last_modified_index",
    "fetch_field_definitions",
    "fetch_last_modified",
    "parse_field_definitions",
]
