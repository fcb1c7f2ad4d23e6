"""
Seed a development user with an empty wallet and print a bearer token for it.
"""
import asyncio
import sys

from wallet_service.core.security import create_access_token
from wallet_service.infrastructure.database.session import dispose_engine, get_session, init_db
from wallet_service.modules.accounts import AccountCreateInput, AccountService
from wallet_service.modules.wallets import WalletService


async def create_default_account(email: str = "demo@example.com") -> None:
    await init_db()

    async for db in get_session():
        accounts = AccountService.with_session(db)

        account = await accounts.get_by_email(email)
        if account is None:
            account = await accounts.create_account(AccountCreateInput(email=email, name="Demo User"))
            print(f"Created user {account.email} ({account.id})")
        else:
            print(f"User {account.email} already exists ({account.id})")

        wallet = await WalletService.with_session(db).get_or_create_wallet(account.id)
        await db.commit()

        print(f"Wallet {wallet.id}: balance {wallet.balance} {wallet.currency}")
        print(f"Bearer token: {create_access_token(account.id, account.email)}")

    await dispose_engine()


if __name__ == "__main__":
    asyncio.run(create_default_account(*sys.argv[1:2]))
