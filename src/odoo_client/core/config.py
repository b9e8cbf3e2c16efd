"""Single config object: connection settings plus session/report tuning."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class ClientConfig:
    """
    Client config. Build it directly or from the environment,
    then pass to OdooClient.from_config(config).
    """

    host: str
    database: str
    username: str
    password: str
    eager_login: bool = True
    endpoint_cache_size: int = 1
    poll_interval: float = 1.0
    max_poll_attempts: int | None = None

    def __post_init__(self) -> None:
        if not self.host:
            raise ValueError("host is required")
        if self.endpoint_cache_size < 1:
            raise ValueError("endpoint_cache_size must be at least 1")
        if self.poll_interval < 0:
            raise ValueError("poll_interval cannot be negative")
        if self.max_poll_attempts is not None and self.max_poll_attempts < 1:
            raise ValueError("max_poll_attempts must be at least 1 or None")

    @classmethod
    def load_from_env(cls, prefix: str = "ODOO_", **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns dict for ClientConfig(**ClientConfig.load_from_env())."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result


def _coerce(name: str, value: Any) -> Any:
    if not isinstance(value, str):
        return value
    if name == "eager_login":
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"Invalid boolean for {name}: {value!r}")
    if name == "endpoint_cache_size":
        return int(value)
    if name == "poll_interval":
        return float(value)
    if name == "max_poll_attempts":
        return int(value) if value.strip() else None
    return value


def load_config_from_env(prefix: str = "ODOO_", **defaults: Any) -> ClientConfig:
    """
    Build ClientConfig from env: ODOO_HOST, ODOO_DATABASE, ODOO_USERNAME, ODOO_PASSWORD,
    ODOO_EAGER_LOGIN, ODOO_ENDPOINT_CACHE_SIZE, ODOO_POLL_INTERVAL, ODOO_MAX_POLL_ATTEMPTS.
    Unknown variables with the prefix are ignored; missing required ones raise TypeError.
    """
    known = {f.name for f in fields(ClientConfig)}
    raw = ClientConfig.load_from_env(prefix, **defaults)
    values = {name: _coerce(name, value) for name, value in raw.items() if name in known}
    return ClientConfig(**values)
