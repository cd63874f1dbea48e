"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

ADMIN_ROLE = "admin"
USER_ROLE = "user"


@dataclass(slots=True)
class Account:
    id: str
    username: str
    role: str
    is_active: bool
    password_hash: str = field(repr=False)
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None

    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


@dataclass(slots=True)
class AccountCreateInput:
    username: str
    password: str
    role: str = USER_ROLE
    email: Optional[str] = None
    is_active: bool = True
