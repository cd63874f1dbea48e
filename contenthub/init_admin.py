"""
Create the first admin account.

    python -m contenthub.init_admin --username admin --password 'secret123'
"""
import argparse
import asyncio
import logging

from contenthub.core.config import load_settings
from contenthub.core.logging_config import configure_logging
from contenthub.infrastructure.database import Database
from contenthub.modules.accounts import ADMIN_ROLE, AccountAlreadyExistsError, AccountCreateInput, AccountService

logger = logging.getLogger("contenthub.init_admin")


async def create_admin(database: Database, username: str, password: str, email: str | None) -> bool:
    await database.init_models()
    async with database.session() as session:
        service = AccountService.with_session(session)
        try:
            await service.create_account(
                AccountCreateInput(
                    username=username,
                    password=password,
                    role=ADMIN_ROLE,
                    email=email,
                )
            )
        except AccountAlreadyExistsError as exc:
            logger.warning("Admin not created: %s", exc)
            return False
    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an admin account")
    parser.add_argument("--username", default="admin")
    parser.add_argument("--password", required=True)
    parser.add_argument("--email", default=None)
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)
    database = Database(settings)

    async def run() -> bool:
        try:
            return await create_admin(database, args.username, args.password, args.email)
        finally:
            await database.dispose()

    created = asyncio.run(run())
    if created:
        logger.info("Admin account %s created", args.username)
    return 0 if created else 1


if __name__ == "__main__":
    raise SystemExit(main())
