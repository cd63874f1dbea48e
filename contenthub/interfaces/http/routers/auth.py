"""Registration and login endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from contenthub.core.config import Settings
from contenthub.core.security import create_access_token
from contenthub.interfaces.http.deps import (
    get_account_service,
    get_current_account,
    get_db_session,
    get_settings,
)
from contenthub.modules.accounts import (
    Account,
    AccountAlreadyExistsError,
    AccountCreateInput,
    AccountService,
)
from contenthub.schemas import AccountResponse, LoginRequest, RegisterRequest, TokenResponse

router = APIRouter()


def _token_response(settings: Settings, account: Account) -> TokenResponse:
    token = create_access_token(settings, account.id, account.username, account.role)
    return TokenResponse(access_token=token, account=AccountResponse.model_validate(account))


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    account_service: AccountService = Depends(get_account_service),
    settings: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_db_session),
) -> TokenResponse:
    try:
        account = await account_service.create_account(
            AccountCreateInput(
                username=payload.username,
                password=payload.password,
                email=payload.email,
            )
        )
    except AccountAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    await db.commit()
    return _token_response(settings, account)


@router.post("/login", response_model=TokenResponse)
async def login(
    payload: LoginRequest,
    account_service: AccountService = Depends(get_account_service),
    settings: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_db_session),
) -> TokenResponse:
    account = await account_service.authenticate(payload.username, payload.password)
    if account is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")
    await db.commit()
    return _token_response(settings, account)


@router.get("/me", response_model=AccountResponse)
async def current_account(account: Account = Depends(get_current_account)) -> Account:
    return account
