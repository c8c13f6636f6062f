# SPDX-License-Identifier: MIT

from typing import Optional

from timesheet.logger import get_logger
from timesheet.model.time_entry import TimeEntry
from timesheet.model.user import Account, User

logger = get_logger(__name__)


class AuthenticationError(Exception):
    """Raised when a login attempt is rejected."""

    def __init__(self, error_code: str) -> None:
        super().__init__(error_code)
        self.error_code = error_code


class AccessDeniedError(Exception):
    """Raised when an actor may not see or change an entry."""

    pass


def authenticate(email: str, password: str, accounts: list[Account]) -> User:
    """
    Check credentials against the known accounts.

    Raises AuthenticationError with error_code "invalid_email" when no
    account has the email, or "invalid_password" when the password differs.
    """
    matches = [
        account
        for account in accounts
        if account["email"].lower() == email.strip().lower()
    ]
    if len(matches) == 0:
        logger.warning("login rejected", email=email, error_code="invalid_email")
        raise AuthenticationError("invalid_email")

    account = matches[0]
    if account["password"] != password:
        logger.warning("login rejected", email=email, error_code="invalid_password")
        raise AuthenticationError("invalid_password")

    logger.info("login accepted", user_id=account["id"])
    return {
        "id": account["id"],
        "name": account["name"],
        "email": account["email"],
        "role": account["role"],
    }


def can_access(actor: Optional[User], entry: TimeEntry) -> bool:
    if actor is None:
        return False
    if actor["role"] == "employer":
        return True
    return entry["user_id"] == actor["id"]


def require_access(actor: Optional[User], entry: TimeEntry) -> None:
    if not can_access(actor, entry):
        raise AccessDeniedError(f"Not allowed to access entry {entry['id']}")
