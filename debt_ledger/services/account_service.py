"""
Account service: the registry of accounts payments are drawn from.
"""

from sqlalchemy.orm import Session

from debt_ledger.exceptions import NotFoundError
from debt_ledger.models.account import Account
from debt_ledger.schemas.account import AccountCreate


class AccountService:

    def __init__(self, db: Session):
        self.db = db

    def create_account(self, request: AccountCreate, actor: str) -> Account:
        """Create a new account for the actor."""
        account = Account(
            user_id=actor,
            name=request.name.strip(),
            type=request.type,
        )
        self.db.add(account)
        self.db.flush()
        return account

    def get_account(self, account_id: int, actor: str) -> Account:
        """Get an account by ID."""
        account = self.db.get(Account, account_id)
        if account is None or account.user_id != actor:
            raise NotFoundError("Account", account_id)
        return account
