# greeter/settings.py
import os
import tomllib
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_CFG = "greeter.toml"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_GREETING = "Good Afternoon!"


@dataclass(frozen=True)
class ServerSettings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    greeting: str = DEFAULT_GREETING


@lru_cache
def get_cfg() -> dict:
    """
    Read the TOML config once per process.
    A missing default file means built-in defaults; a missing file named
    explicitly through GREETER_CFG is an error.
    """
    explicit = os.getenv("GREETER_CFG")
    cfg_path = Path(explicit or DEFAULT_CFG)
    if not cfg_path.exists():
        if explicit:
            raise RuntimeError(f"Config file not found at {cfg_path}")
        return {}
    return tomllib.loads(cfg_path.read_text(encoding="utf-8"))


def _check_port(value) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Port must be an integer, got {value!r}")
    if not 1 <= value <= 65535:
        raise ValueError(f"Port {value} outside 1-65535")
    return value


def _check_text(name: str, value) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {value!r}")
    return value


def load_settings(cfg: dict | None = None) -> ServerSettings:
    server = (get_cfg() if cfg is None else cfg).get("server", {})
    return ServerSettings(
        host=_check_text("host", server.get("host", DEFAULT_HOST)),
        port=_check_port(server.get("port", DEFAULT_PORT)),
        greeting=_check_text("greeting", server.get("greeting", DEFAULT_GREETING)),
    )


# quick helpers
def greeting() -> str:
    return load_settings().greeting


def port() -> int:
    return load_settings().port


def host() -> str:
    return load_settings().host
