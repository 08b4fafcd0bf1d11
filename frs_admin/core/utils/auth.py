# auth.py

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from fastapi import Request

from frs_admin.config.config import settings
from frs_admin.config.logger import logger
from frs_admin.database import crud
from frs_admin.database.models import User
from frs_admin.core.exceptions import AuthenticationError

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Crée un access token JWT (courte durée par défaut : 15 minutes)."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=15))

    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

def verify_token(token: str) -> Optional[int]:
    """Vérifie un token JWT et retourne l'id numérique de l'utilisateur."""
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None

    subject = payload.get("sub")
    if subject is None:
        return None

    try:
        return int(subject)
    except (TypeError, ValueError):
        return None

def extract_token(request: Request) -> Optional[str]:
    """Lit le token depuis le cookie access_token, sinon depuis l'en-tête Authorization."""
    token = request.cookies.get("access_token")
    if token:
        return token

    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()

    return None

async def get_current_user(request: Request) -> User:
    """Récupère l'utilisateur actuel à partir de son access token."""
    token = extract_token(request)

    if not token:
        logger.warning("No access token found")
        raise AuthenticationError("Not authenticated")

    user_id = verify_token(token)
    logger.debug(f"Token verified, user_id={user_id}")

    if user_id is None:
        logger.warning("Invalid token, user_id is None")
        raise AuthenticationError("Invalid or expired token")

    user_dict = await crud.get_user(user_id)
    if user_dict is None:
        logger.warning(f"User not found for user_id={user_id}")
        raise AuthenticationError("User not found")

    return User.from_row(user_dict)
