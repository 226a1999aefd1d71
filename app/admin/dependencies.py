from fastapi import Header

from app.core.config import get_settings
from app.core.exceptions import UnauthorizedException


def require_admin_token(admin_token: str = Header(default="", alias="Admin-Token")) -> str:
    """
    Stub admin session check via the Admin-Token header.

    Any token carrying ADMIN_TOKEN_PREFIX is accepted; a real identity
    provider is expected to replace this.
    """
    prefix = get_settings().ADMIN_TOKEN_PREFIX
    token = (admin_token or "").strip()

    if not token or not token.startswith(prefix):
        raise UnauthorizedException("Invalid admin session")
    return token
