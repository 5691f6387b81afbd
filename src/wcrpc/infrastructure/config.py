"""Runtime settings, read from the environment (and an optional ``.env``)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Resolve the default data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class ConfigurationError(RuntimeError):
    """A setting is present but unusable."""


def _get_int(name: str, fallback: int) -> int:
    raw_value = os.getenv(name)
    if not raw_value:
        return fallback
    try:
        return int(raw_value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw_value!r}") from exc


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    host: str = "127.0.0.1"
    port: int = 8080
    rpc_path: str = "/xmlrpc.php"
    namespace: str = "wc"
    required_capability: str = "edit_posts"
    log_level: str = "INFO"

    @staticmethod
    def from_env(env_file: Path | None = None) -> Settings:
        load_dotenv(env_file)
        return Settings(
            data_dir=Path(os.getenv("WCRPC_DATA_DIR") or _DEFAULT_DATA_DIR),
            host=os.getenv("WCRPC_HOST", "127.0.0.1"),
            port=_get_int("WCRPC_PORT", 8080),
            rpc_path=os.getenv("WCRPC_RPC_PATH", "/xmlrpc.php"),
            namespace=os.getenv("WCRPC_NAMESPACE", "wc"),
            required_capability=os.getenv("WCRPC_REQUIRED_CAPABILITY", "edit_posts"),
            log_level=os.getenv("WCRPC_LOG_LEVEL", "INFO").upper(),
        )
