"""Abstract identity provider: checks credentials and hands out identities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from wcrpc.domain.model.value_objects import Identity


class IdentityProvider(ABC):

    @abstractmethod
    def authenticate(self, username: str | None, password: str | None) -> Identity:
        """Return the identity for these credentials.

        Raises AuthenticationError carrying the provider's own code and
        message when they are rejected.
        """
