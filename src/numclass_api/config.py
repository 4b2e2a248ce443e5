from __future__ import annotations

import os
import tomllib as toml
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from numclass_api.utility import UserInputError

CONFIG_ENV = "NUMCLASS_API_CONFIG"
DEFAULT_FACT_URL = "http://numbersapi.com/{n}/math"


@dataclass(frozen=True)
class Settings:
    """
    Process-wide server configuration, built once at startup and passed to
    create_app(). Nothing reads configuration from module globals.

    TOML layout (every key optional):

      [SERVER]     HOST, PORT, CORS_ORIGINS, CORS_METHODS
      [FACTS]      URL, TIMEOUT
      [LOGGING]    LEVEL, FORMAT
      [BEHAVIOUR]  ALLOW_NEGATIVE, DEBUG
    """
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: tuple[str, ...] = ("*",)
    cors_methods: tuple[str, ...] = ("GET",)
    fact_url: str = DEFAULT_FACT_URL
    fact_timeout: float = 10.0
    log_level: str = "INFO"
    log_format: str = "text"
    allow_negative: bool = False
    debug: bool = False
    _source: Path | None = field(default=None, compare=False)


# section, key, attribute, expected type
_FIELDS: tuple[tuple[str, str, str, type | tuple[type, ...]], ...] = (
    ("SERVER", "HOST", "host", str),
    ("SERVER", "PORT", "port", int),
    ("SERVER", "CORS_ORIGINS", "cors_origins", list),
    ("SERVER", "CORS_METHODS", "cors_methods", list),
    ("FACTS", "URL", "fact_url", str),
    ("FACTS", "TIMEOUT", "fact_timeout", (int, float)),
    ("LOGGING", "LEVEL", "log_level", str),
    ("LOGGING", "FORMAT", "log_format", str),
    ("BEHAVIOUR", "ALLOW_NEGATIVE", "allow_negative", bool),
    ("BEHAVIOUR", "DEBUG", "debug", bool),
)


# --- I/O -------------------------------------------------------------------


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return toml.load(f)
    except OSError as e:
        raise UserInputError(f"reading {path.name}: {e.strerror or e}.") from None
    except toml.TOMLDecodeError as e:
        lineno = getattr(e, "lineno", None)
        colno = getattr(e, "colno", None)
        msg = getattr(e, "msg", str(e))
        where = []
        if lineno is not None:
            where.append(f"line {lineno}")
        if colno is not None:
            where.append(f"column {colno}")
        loc = f" (at {', '.join(where)})" if where else ""
        # No traceback chaining
        raise UserInputError(f"reading {path.name}: {msg}{loc}.") from None


def _typename(v: object) -> str:
    return type(v).__name__


def _from_dict(raw: dict[str, Any], source: str) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for section, key, attr, kind in _FIELDS:
        sect = raw.get(section) or {}
        if not isinstance(sect, dict) or key not in sect:
            continue
        v = sect[key]
        # bool is an int subclass; keep PORT = true out
        if not isinstance(v, kind) or (isinstance(v, bool) and kind is not bool):
            raise UserInputError(f"{source}: {section}.{key} has type {_typename(v)}.")
        if isinstance(v, list):
            if not all(isinstance(x, str) for x in v):
                raise UserInputError(f"{source}: {section}.{key} must be a list of strings.")
            v = tuple(v)
        values[attr] = v
    return values


def _validate(s: Settings) -> Settings:
    if not 0 < s.port < 65536:  # noqa: PLR2004
        raise UserInputError(f"port {s.port} is out of range.")
    if s.fact_timeout <= 0:
        raise UserInputError("FACTS.TIMEOUT must be positive.")
    if "{n}" not in s.fact_url:
        raise UserInputError("FACTS.URL must contain the {n} placeholder.")
    if s.log_format not in ("text", "json"):
        raise UserInputError(f"LOGGING.FORMAT must be 'text' or 'json', not {s.log_format!r}.")
    return replace(s, cors_methods=tuple(m.upper() for m in s.cors_methods), log_level=s.log_level.upper())


# --- Public API ------------------------------------------------------------


def load_settings(path: str | Path | None = None, env: dict[str, str] | None = None) -> Settings:
    """
    Build Settings from defaults, an optional TOML file and the environment.

    The file is `path`, else $NUMCLASS_API_CONFIG, else none (defaults only).
    $PORT, when set, overrides SERVER.PORT.
    """
    env = os.environ if env is None else env
    if path is None and env.get(CONFIG_ENV):
        path = env[CONFIG_ENV]

    values: dict[str, Any] = {}
    source: Path | None = None
    if path is not None:
        source = Path(path).expanduser()
        values = _from_dict(_load_toml(source), source.name)

    port = env.get("PORT")
    if port:
        try:
            values["port"] = int(port)
        except ValueError:
            raise UserInputError(f"PORT={port!r} is not an integer.") from None

    return _validate(Settings(**values, _source=source))
