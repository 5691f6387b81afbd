"""JSON-file-backed implementation of IdentityProvider.

Users are stored with a salted PBKDF2 hash and a role. Roles grant
capabilities the same way the shop's own roles do: contributors and above
may edit content, subscribers may only read.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import secrets
from pathlib import Path

from wcrpc.domain.exceptions import AuthenticationError, ValidationError
from wcrpc.domain.model.value_objects import Identity
from wcrpc.domain.repository.identity_provider import IdentityProvider

ROLE_CAPABILITIES: dict[str, frozenset[str]] = {
    "subscriber": frozenset({"read"}),
    "contributor": frozenset({"read", "edit_posts"}),
    "author": frozenset({"read", "edit_posts", "publish_posts"}),
    "editor": frozenset({"read", "edit_posts", "publish_posts", "edit_others_posts"}),
    "shop_manager": frozenset(
        {"read", "edit_posts", "publish_posts", "edit_others_posts", "manage_woocommerce"}
    ),
    "administrator": frozenset(
        {
            "read",
            "edit_posts",
            "publish_posts",
            "edit_others_posts",
            "manage_woocommerce",
            "manage_options",
        }
    ),
}

_ITERATIONS = 100_000
_BAD_CREDENTIALS = "Incorrect username or password."


def hash_password(password: str, salt: str) -> str:
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), bytes.fromhex(salt), _ITERATIONS
    )
    return digest.hex()


class JsonIdentityProvider(IdentityProvider):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- IdentityProvider interface -------------------------------------------

    def authenticate(self, username: str | None, password: str | None) -> Identity:
        if not username or not password:
            raise AuthenticationError(_BAD_CREDENTIALS)

        user = self._load().get(username)
        if user is None:
            raise AuthenticationError(_BAD_CREDENTIALS)

        expected = hash_password(password, user["salt"])
        if not hmac.compare_digest(expected, user["password_hash"]):
            raise AuthenticationError(_BAD_CREDENTIALS)

        return Identity(
            username=username,
            capabilities=ROLE_CAPABILITIES.get(user["role"], frozenset()),
        )

    # --- User management ------------------------------------------------------

    def add_user(self, username: str, password: str, role: str = "contributor") -> None:
        """Create or replace a user."""
        if not username or not username.strip():
            raise ValidationError("Username is required")
        if not password:
            raise ValidationError("Password is required")
        if role not in ROLE_CAPABILITIES:
            raise ValidationError(
                f"Unknown role '{role}', expected one of {', '.join(sorted(ROLE_CAPABILITIES))}"
            )

        salt = secrets.token_hex(16)
        users = self._load()
        users[username.strip()] = {
            "salt": salt,
            "password_hash": hash_password(password, salt),
            "role": role,
        }
        self._persist(users)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, dict]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["username"]: item for item in raw}

    def _persist(self, users: dict[str, dict]) -> None:
        raw = [{"username": name, **data} for name, data in users.items()]
        self._file_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
