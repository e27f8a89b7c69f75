"""Settings read from environment variables (and an optional .env file)."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parent.parent.parent


def load_env() -> None:
    """Load .env from repo root or current dir (first one found)."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def _env(name: str, default: str) -> str:
    return os.environ.get(name, default).strip()


def _env_flag(name: str) -> bool:
    return _env(name, "").lower() in ("1", "true", "yes")


@dataclass
class Settings:
    contacts_file: Path = Path("contacts.json")
    host: str = "127.0.0.1"
    port: int = 5000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    serialize_writes: bool = False
    log_level: str = "INFO"
    api_url: str = "http://localhost:5000"
    api_timeout: float | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        origins = [o.strip() for o in _env("CONTACTS_CORS_ORIGINS", "*").split(",")]
        timeout = _env("CONTACTS_API_TIMEOUT", "")
        return cls(
            contacts_file=Path(_env("CONTACTS_FILE", "contacts.json")),
            host=_env("CONTACTS_HOST", "127.0.0.1"),
            port=int(_env("CONTACTS_PORT", "5000")),
            cors_origins=[o for o in origins if o],
            serialize_writes=_env_flag("CONTACTS_SERIALIZE_WRITES"),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            api_url=_env("CONTACTS_API_URL", "http://localhost:5000").rstrip("/"),
            api_timeout=float(timeout) if timeout else None,
        )
