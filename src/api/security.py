"""Credential verification for the authorization gate.

Two schemes are accepted:
- HTTP Basic with the configured service account (API_USERNAME / API_PASSWORD)
- Bearer JWT issued by POST /auth/token
"""

import base64
import binascii
import logging
import os
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from fastapi import HTTPException, Request, status
from fastapi.security.utils import get_authorization_scheme_param
from jose import JWTError, jwt

logger = logging.getLogger(__name__)

# JWT Configuration
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")
if not JWT_SECRET_KEY:
    raise ValueError(
        "JWT_SECRET_KEY environment variable is required. "
        "Generate a secure key with: openssl rand -hex 32"
    )
JWT_ALGORITHM = "HS256"
JWT_EXPIRATION_MINUTES = int(os.getenv("JWT_EXPIRATION_MINUTES", "60"))

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))
BCRYPT_MAX_PASSWORD_BYTES = 72

AUTH_REALM = "Realm"


def get_password_hash(password: str) -> str:
    """Hash password using bcrypt.

    Raises:
        ValueError: Password is longer than bcrypt can represent.
    """
    encoded = password.encode('utf-8')
    if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(encoded, salt).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    encoded = plain_password.encode('utf-8')
    if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(encoded, hashed_password.encode('utf-8'))


def _load_service_account() -> tuple[str, str]:
    username = os.getenv("API_USERNAME", "user")
    password = os.getenv("API_PASSWORD")
    if not password:
        password = secrets.token_urlsafe(24)
        logger.warning(
            "API_PASSWORD not set, using generated security password",
            extra={"username": username, "generatedPassword": password},
        )
    return username, get_password_hash(password)


API_USERNAME, _API_PASSWORD_HASH = _load_service_account()


# ── Basic ────────────────────────────────────────────────────

def verify_basic_credentials(credentials: str) -> Optional[str]:
    """Check base64 ``user:password`` credentials against the service account.

    Returns:
        The username if the credentials match, None otherwise
    """
    try:
        decoded = base64.b64decode(credentials, validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError):
        return None

    username, separator, password = decoded.partition(":")
    if not separator:
        return None
    if not secrets.compare_digest(username.encode('utf-8'), API_USERNAME.encode('utf-8')):
        return None
    if not verify_password(password, _API_PASSWORD_HASH):
        return None
    return username


# ── Bearer ───────────────────────────────────────────────────

def create_access_token(subject: str) -> tuple[str, int]:
    """Create JWT access token for ``subject``.

    Returns:
        Tuple of (token, lifetime in seconds)
    """
    now = datetime.now(timezone.utc)
    lifetime = timedelta(minutes=JWT_EXPIRATION_MINUTES)
    payload = {
        "sub": subject,
        "exp": now + lifetime,
        "iat": now,
    }
    token = jwt.encode(payload, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)
    return token, int(lifetime.total_seconds())


def verify_token(token: str) -> Optional[str]:
    """Verify JWT token and extract the subject."""
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        logger.debug(f"JWT verification failed: {e}")
        return None
    subject = payload.get("sub")
    if subject != API_USERNAME:
        return None
    return subject


def authenticate(authorization: str) -> Optional[str]:
    """Resolve an Authorization header value to a principal, or None."""
    scheme, credentials = get_authorization_scheme_param(authorization)
    if not credentials:
        return None
    scheme = scheme.lower()
    if scheme == "basic":
        return verify_basic_credentials(credentials)
    if scheme == "bearer":
        return verify_token(credentials)
    return None


def unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": f'Basic realm="{AUTH_REALM}"'},
    )


def get_current_principal(request: Request) -> str:
    """Return the principal the authorization gate attached to the request."""
    principal = getattr(request.state, "principal", None)
    if not principal:
        raise unauthorized("Not authenticated")
    return principal
