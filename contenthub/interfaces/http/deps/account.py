"""Bearer-token authentication dependencies."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from contenthub.core.config import Settings
from contenthub.core.security import InvalidTokenError, decode_access_token
from contenthub.modules.accounts import Account, AccountNotFoundError, AccountService

from .container import get_settings
from .services import get_account_service

bearer_scheme = HTTPBearer()


async def get_current_account(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
    account_service: AccountService = Depends(get_account_service),
) -> Account:
    try:
        token_data = decode_access_token(settings, credentials.credentials)
    except InvalidTokenError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials") from exc

    try:
        return await account_service.get_active(token_data.account_id)
    except AccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Account is missing or disabled") from exc


async def get_current_admin(account: Account = Depends(get_current_account)) -> Account:
    if not account.is_admin():
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return account
