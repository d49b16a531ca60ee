"""Accounts and the identities that belong to them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from mail_notifier.core.models import Address


class IdentityChecker(Protocol):
    """Anything that can tell whether addresses belong to the local user."""

    def is_an_identity(self, addresses: Sequence[Address]) -> bool: ...


@dataclass(frozen=True)
class Identity:
    """An address the account sends mail as."""

    email: str
    name: str | None = None


@dataclass(frozen=True)
class Account:
    """A mail account with its configured identities."""

    uuid: str
    identities: tuple[Identity, ...] = field(default_factory=tuple)
    name: str | None = None

    @classmethod
    def from_addresses(cls, uuid: str, addresses: Sequence[str]) -> Account:
        """Build an account whose identities are the given email addresses."""
        return cls(uuid=uuid, identities=tuple(Identity(email=a) for a in addresses))

    def find_identity(self, address: Address) -> Identity | None:
        """First identity whose email matches the address, ignoring case."""
        wanted = address.address.casefold()
        for identity in self.identities:
            if identity.email.casefold() == wanted:
                return identity
        return None

    def is_an_identity(self, addresses: Sequence[Address]) -> bool:
        """True if any of the addresses is one of this account's identities."""
        return any(self.find_identity(address) is not None for address in addresses)
