"""Domain services for account management."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from contenthub.core.security import hash_password, verify_password
from contenthub.infrastructure.database.repositories.account_repository import SqlAccountRepository

from .exceptions import AccountAlreadyExistsError, AccountNotFoundError
from .models import Account, AccountCreateInput
from .repository import AccountRepository

logger = logging.getLogger(__name__)


class AccountService:
    """Registration, login and lookup of content owners."""

    def __init__(self, repository: AccountRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AccountService":
        return cls(SqlAccountRepository(session))

    async def get_active(self, account_id: str) -> Account:
        account = await self._repository.get_by_id(account_id)
        if account is None or not account.is_active:
            raise AccountNotFoundError(account_id)
        return account

    async def authenticate(self, username: str, password: str) -> Account | None:
        account = await self._repository.get_by_username(username)
        if account is None or not account.is_active:
            return None
        if not verify_password(password, account.password_hash):
            return None
        await self._repository.set_last_login(account.id, datetime.now(timezone.utc))
        return account

    async def create_account(self, payload: AccountCreateInput) -> Account:
        if await self._repository.get_by_username(payload.username) is not None:
            raise AccountAlreadyExistsError(f"username already taken: {payload.username}")
        if payload.email and await self._repository.get_by_email(payload.email) is not None:
            raise AccountAlreadyExistsError(f"email already registered: {payload.email}")

        account = await self._repository.create_account(
            username=payload.username,
            password_hash=hash_password(payload.password),
            role=payload.role,
            email=payload.email,
            is_active=payload.is_active,
        )
        logger.info("Registered account %s (%s)", account.username, account.role)
        return account

    async def count(self) -> int:
        return await self._repository.count()
