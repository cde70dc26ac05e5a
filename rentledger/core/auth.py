"""
Identity for the landlord back office.

The frontend signs in with supabase.auth.signInWithPassword() and sends the
JWT in the Authorization header. This module verifies the JWT and yields the
owner every record is scoped to.
"""
import logging
from typing import Optional

import requests
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError

from rentledger.core.config import settings

logger = logging.getLogger(__name__)

# Security scheme for Bearer token
security = HTTPBearer()


class User:
    """Authenticated landlord extracted from the JWT."""
    def __init__(self, user_id: str, email: Optional[str] = None):
        self.id = user_id
        self.email = email


# Cache for JWKS keys (to avoid fetching on every request)
_jwks_cache = None


def get_supabase_jwks():
    """
    Fetch Supabase's JSON Web Key Set (JWKS) for JWT verification.

    Returns:
        dict: JWKS containing public keys for token verification
    """
    global _jwks_cache

    if _jwks_cache is not None:
        return _jwks_cache

    if not settings.SUPABASE_URL:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="SUPABASE_URL is not configured",
        )

    try:
        jwks_url = f"{settings.SUPABASE_URL}/auth/v1/.well-known/jwks.json"
        response = requests.get(jwks_url, timeout=10)
        response.raise_for_status()
        _jwks_cache = response.json()
        return _jwks_cache
    except requests.RequestException as e:
        logger.error("Failed to fetch JWKS from Supabase: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch JWKS from Supabase: {str(e)}",
        )


def verify_token(token: str) -> dict:
    """
    Verify a Supabase JWT and return its decoded payload.

    Projects with a shared JWT secret sign with HS256; newer projects sign
    with ES256 or RS256 and publish the public key in the JWKS.

    Raises:
        HTTPException: If token is invalid or expired
    """
    try:
        if settings.SUPABASE_JWT_SECRET:
            key, algorithms = settings.SUPABASE_JWT_SECRET, ["HS256"]
        else:
            key, algorithms = get_supabase_jwks(), ["ES256", "RS256"]
        return jwt.decode(
            token,
            key,
            algorithms=algorithms,
            audience="authenticated",  # Supabase uses "authenticated" as audience
            options={"verify_aud": True},
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid authentication credentials: {str(e)}",
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> User:
    """
    FastAPI dependency returning the authenticated landlord.

    Usage in route:
        @router.get("/buildings")
        def list_buildings(current_user: User = Depends(get_current_user)):
            ...
    """
    payload = verify_token(credentials.credentials)

    # Supabase JWT structure: {"sub": "user_id", "email": "user@example.com", ...}
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate user",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return User(user_id=user_id, email=payload.get("email"))


def current_owner_id(current_user: User = Depends(get_current_user)) -> str:
    """Owner id all reads and writes are scoped to."""
    return current_user.id
