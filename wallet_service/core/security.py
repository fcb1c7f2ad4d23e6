"""Bearer token verification for callers authenticated by the external provider."""
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from wallet_service.core.config import get_settings
from wallet_service.interfaces.http.deps.database import get_db_session
from wallet_service.modules.accounts import Account as AccountDomain
from wallet_service.modules.accounts.service import AccountService
from wallet_service.schemas import TokenData

settings = get_settings()
security = HTTPBearer(auto_error=False)


def create_access_token(user_id: str, email: Optional[str] = None, expires_delta: Optional[timedelta] = None) -> str:
    """Issue a token in the provider's format; used by the seed script and tests."""
    expire_delta = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": user_id,
        "exp": datetime.now(timezone.utc) + expire_delta,
    }
    if email:
        payload["email"] = email
    if settings.security.audience:
        payload["aud"] = settings.security.audience
    if settings.security.issuer:
        payload["iss"] = settings.security.issuer
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenData:
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            audience=settings.security.audience,
            issuer=settings.security.issuer,
        )
    except JWTError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized") from exc

    user_id = payload.get("sub")
    email = payload.get("email")
    if not user_id and not email:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return TokenData(user_id=user_id, email=email)


async def get_current_account(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db_session),
) -> AccountDomain:
    if credentials is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    token_data = decode_access_token(credentials.credentials)
    service = AccountService.with_session(db)
    if token_data.user_id:
        account = await service.get_by_id(token_data.user_id)
    else:
        account = await service.get_by_email(token_data.email)

    if account is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    if not account.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Account is disabled")
    return account
