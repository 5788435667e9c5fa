"""
RessourcesMG Auth
=================

Password check and signed tokens for the webmaster back office.
"""

from .tokens import check_password, create_token, decode_token, verify_token

__all__ = [
    "check_password",
    "create_token",
    "decode_token",
    "verify_token",
]
