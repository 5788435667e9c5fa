# RessourcesMG - Webmaster Tokens
# ===============================
"""
Signed bearer tokens for the single webmaster account.

Format: ``base64url(json payload) + "." + hex HMAC-SHA256(payload_b64)``.
The payload carries ``sub``, ``iat``, ``exp`` (ISO timestamps) and a nonce.
"""

import base64
import hashlib
import hmac
import json
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from ..config import AppConfig, get_config
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

WEBMASTER_SUBJECT = "webmaster"


def _sign(secret: str, payload_b64: str) -> str:
    return hmac.new(secret.encode(), payload_b64.encode(), hashlib.sha256).hexdigest()


def create_token(config: Optional[AppConfig] = None) -> str:
    """
    Issue a webmaster token.

    Raises:
        ConfigurationError: if no signing secret is configured (production)
    """
    config = config or get_config()
    if not config.webmaster_secret:
        raise ConfigurationError("WEBMASTER_SECRET non configuré")

    now = datetime.now(timezone.utc)
    payload = {
        "sub": WEBMASTER_SUBJECT,
        "iat": now.isoformat(),
        "exp": (now + timedelta(hours=config.token_expire_hours)).isoformat(),
        "nonce": secrets.token_hex(8),
    }
    payload_json = json.dumps(payload, sort_keys=True)
    payload_b64 = base64.urlsafe_b64encode(payload_json.encode()).decode()

    return f"{payload_b64}.{_sign(config.webmaster_secret, payload_b64)}"


def decode_token(token: Optional[str], config: Optional[AppConfig] = None) -> Optional[dict]:
    """Decode and verify a token. Returns None when invalid or expired."""
    if not token:
        return None
    config = config or get_config()
    if not config.webmaster_secret:
        return None

    try:
        parts = token.split(".")
        if len(parts) != 2:
            return None

        payload_b64, signature = parts
        if not hmac.compare_digest(signature, _sign(config.webmaster_secret, payload_b64)):
            return None

        payload = json.loads(base64.urlsafe_b64decode(payload_b64.encode()).decode())

        expires = datetime.fromisoformat(payload["exp"])
        if expires.tzinfo is None:
            expires = expires.replace(tzinfo=timezone.utc)
        if datetime.now(timezone.utc) > expires:
            return None
        if payload.get("sub") != WEBMASTER_SUBJECT:
            return None
        return payload
    except (ValueError, KeyError, TypeError) as e:
        logger.debug(f"Rejected malformed token: {e}")
        return None


def verify_token(token: Optional[str], config: Optional[AppConfig] = None) -> bool:
    return decode_token(token, config) is not None


def check_password(password: Optional[str], config: Optional[AppConfig] = None) -> bool:
    """
    Compare a submitted password with WEBMASTER_PASSWORD in constant time.

    Raises:
        ConfigurationError: if WEBMASTER_PASSWORD is not set
    """
    config = config or get_config()
    if not config.webmaster_password:
        raise ConfigurationError("Authentification webmaster non configurée")
    return hmac.compare_digest((password or "").encode(), config.webmaster_password.encode())
