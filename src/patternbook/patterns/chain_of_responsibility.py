"""Chain of Responsibility pattern: sign-up validation checks.

Each check handles one concern and either rejects the request or passes it to
the next link. The chain is assembled by the caller, so checks can be
reordered, added or dropped without touching each other.
"""

from __future__ import annotations

import abc
import logging
import re
from collections.abc import Mapping

from .errors import PatternError

logger = logging.getLogger(__name__)

SignUp = Mapping[str, str]

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[a-z]{2,}$", re.IGNORECASE)


class ValidationFailedError(PatternError):
    """Raised by the first check in the chain that rejects the request."""

    def __init__(self, check: str, reason: str) -> None:
        super().__init__(f"{check}: {reason}")
        self.check = check
        self.reason = reason


class Check(abc.ABC):
    """One link in a chain of sign-up checks.

    Subclasses only implement `problem`; `handle` runs the check and passes
    the request along when it has nothing to object to.
    """

    def __init__(self) -> None:
        self._next: Check | None = None

    def link(self, nxt: Check) -> Check:
        """Set the next check and return it, so links can be chained."""
        self._next = nxt
        return nxt

    def handle(self, request: SignUp) -> bool:
        """Run this check, then the rest of the chain.

        Returns:
            True when every check in the chain passes.

        Raises:
            ValidationFailedError: From the first check that fails.
        """
        if (reason := self.problem(request)) is not None:
            logger.debug("%s rejected sign-up: %s", type(self).__name__, reason)
            raise ValidationFailedError(type(self).__name__, reason)
        if self._next is None:
            return True
        return self._next.handle(request)

    @abc.abstractmethod
    def problem(self, request: SignUp) -> str | None:
        """Return a reason to reject `request`, or None to pass it on."""


class RequiredFields(Check):
    """Rejects sign-ups with any of the named fields missing or empty."""

    def __init__(self, *fields: str) -> None:
        super().__init__()
        self.fields = fields

    def problem(self, request: SignUp) -> str | None:
        missing = [f for f in self.fields if not request.get(f)]
        return f"missing {', '.join(missing)}" if missing else None


class EmailFormat(Check):
    def problem(self, request: SignUp) -> str | None:
        if not EMAIL_RE.match(request.get("email", "")):
            return "email address is not valid"
        return None


class PasswordStrength(Check):
    """Requires a minimum length and a mix of letters and digits."""

    def __init__(self, min_length: int = 8) -> None:
        super().__init__()
        self.min_length = min_length

    def problem(self, request: SignUp) -> str | None:
        password = request.get("password", "")
        if len(password) < self.min_length:
            return f"password must be at least {self.min_length} characters"
        if password.isalpha() or password.isdigit():
            return "password must mix letters and digits"
        return None


class UniqueUsername(Check):
    """Rejects usernames already in the `taken` set."""

    def __init__(self, taken: set[str]) -> None:
        super().__init__()
        self.taken = {name.lower() for name in taken}

    def problem(self, request: SignUp) -> str | None:
        if request.get("username", "").lower() in self.taken:
            return f"username '{request['username']}' is taken"
        return None


def build_signup_chain(taken_usernames: set[str]) -> Check:
    """Assemble the default chain and return its first link."""
    head = RequiredFields("username", "email", "password")
    head.link(EmailFormat()).link(PasswordStrength()).link(
        UniqueUsername(taken_usernames)
    )
    return head


def demo() -> list[str]:
    chain = build_signup_chain({"admin"})
    requests = [
        {"username": "ada", "email": "ada@example.com", "password": "engine42"},
        {"username": "bob", "email": "bob@example", "password": "hunter22"},
        {"username": "admin", "email": "root@example.com", "password": "s3cretpass"},
        {"username": "eve", "email": "eve@example.com"},
    ]
    lines = []
    for request in requests:
        try:
            chain.handle(request)
            lines.append(f"{request['username']}: accepted")
        except ValidationFailedError as exc:
            lines.append(f"{request['username']}: rejected by {exc}")
    return lines
