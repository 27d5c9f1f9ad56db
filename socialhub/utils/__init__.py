"""Utilities package."""

from .logger import get_app_logger, setup_logger, init_app_logger
from .security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_access_token,
    is_valid_identity,
)

__all__ = [
    "get_app_logger",
    "setup_logger",
    "init_app_logger",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
    "is_valid_identity",
]
