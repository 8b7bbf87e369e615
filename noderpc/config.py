"""Configuration loader for the RPC client."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientConfig(BaseSettings):
    """Pydantic-based configuration model."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    bitcoin_rpc_url: str = ""
    bitcoin_rpc_scheme: Literal["http", "https"] = "http"
    bitcoin_rpc_host: str = "127.0.0.1"
    bitcoin_rpc_port: int = 8332
    bitcoin_rpc_user: str = ""
    bitcoin_rpc_password: str = ""
    bitcoin_rpc_cookie_path: Optional[str] = "~/.bitcoin/.cookie"
    bitcoin_rpc_timeout: Optional[float] = None
    bitcoin_datadir: Optional[str] = "~/.bitcoin"

    noderpc_log_level: str = "INFO"

    @field_validator("bitcoin_rpc_cookie_path", "bitcoin_datadir", mode="before")
    @classmethod
    def expand_user(cls, value: str | None) -> str | None:
        """Expand user home references (~) unless the value is blank."""

        if value is None:
            return None
        value_str = str(value).strip()
        if not value_str:
            return None
        return os.path.expanduser(value_str)

    @field_validator("bitcoin_rpc_url", mode="before")
    @classmethod
    def strip_url(cls, value: object) -> str:
        url = str(value or "").strip().rstrip("/")
        if url and not url.startswith(("http://", "https://")):
            raise ValueError("BITCOIN_RPC_URL must start with http:// or https://")
        return url

    @field_validator("bitcoin_rpc_scheme", mode="before")
    @classmethod
    def normalize_scheme(cls, value: object) -> str:
        return str(value or "http").strip().lower()

    @field_validator("bitcoin_rpc_port")
    @classmethod
    def valid_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("BITCOIN_RPC_PORT must be between 1 and 65535")
        return value

    @field_validator("bitcoin_rpc_timeout", mode="before")
    @classmethod
    def blank_timeout(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("bitcoin_rpc_timeout")
    @classmethod
    def positive_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("BITCOIN_RPC_TIMEOUT must be positive")
        return value

    @property
    def rpc_url(self) -> str:
        if self.bitcoin_rpc_url:
            return self.bitcoin_rpc_url
        return f"{self.bitcoin_rpc_scheme}://{self.bitcoin_rpc_host}:{self.bitcoin_rpc_port}"

    @property
    def cookie_path(self) -> Optional[Path]:
        if not self.bitcoin_rpc_cookie_path:
            return None
        path = Path(self.bitcoin_rpc_cookie_path).expanduser()
        return path if path.exists() else None

    def credentials(self) -> tuple[str, str]:
        """Return the Basic-auth pair the client should send.

        Explicit user/password win. Otherwise the cookie the node writes at
        startup is used (the configured path, then ``<datadir>/.cookie``),
        then ``rpcuser``/``rpcpassword`` from ``<datadir>/bitcoin.conf``.
        Nothing found yields empty credentials.
        """

        if self.bitcoin_rpc_user or self.bitcoin_rpc_password:
            return self.bitcoin_rpc_user, self.bitcoin_rpc_password

        datadir = Path(self.bitcoin_datadir).expanduser() if self.bitcoin_datadir else None
        cookie = self.cookie_path
        if cookie is None and datadir is not None and (datadir / ".cookie").exists():
            cookie = datadir / ".cookie"
        if cookie is not None:
            return _read_cookie(cookie)

        if datadir is not None:
            options = _read_conf_options(datadir / "bitcoin.conf")
            if options.get("rpcuser") and options.get("rpcpassword"):
                return options["rpcuser"], options["rpcpassword"]
        return "", ""


class CredentialsError(ValueError):
    """A credentials file exists but cannot be used."""


def _read_cookie(path: Path) -> tuple[str, str]:
    user, sep, password = path.read_text(encoding="utf-8").strip().partition(":")
    if not sep or not user:
        raise CredentialsError(f"Malformed RPC cookie file: {path}")
    return user, password


def _read_conf_options(path: Path) -> dict[str, str]:
    # Only top-level options apply to every network; stop at the first [section].
    if not path.exists():
        return {}
    options: dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.split("#", 1)[0].strip()
        if line.startswith("["):
            break
        key, sep, value = line.partition("=")
        if sep:
            options.setdefault(key.strip(), value.strip())
    return options


def load_config() -> ClientConfig:
    """Load configuration from environment variables."""

    return ClientConfig()
