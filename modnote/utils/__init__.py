"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    FILE_FILTER,
    STATUS_TEMPLATE,
    TEXT_ENCODING,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "FILE_FILTER",
    "STATUS_TEMPLATE",
    "TEXT_ENCODING",
]
