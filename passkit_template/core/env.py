"""Settings for passkit-template, from the environment and an optional .env file.

Each setting is resolved in this order (first wins):
  1. OS environment variable.
  2. The same key in a .env file: the --env-file path when given, otherwise
     the nearest .env in the cwd or its parents inside the current git
     checkout.
  3. Built-in default.

The .env file is only read, never exported into os.environ, and only
PASSKIT_* keys are taken from it.

  PASSKIT_KEY_PASSWORD  default password for bundle signing keys
  PASSKIT_LOG_LEVEL     CLI log level (DEBUG, INFO, WARNING, ...)
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_LOG_LEVEL = 'WARNING'
ENV_PREFIX = 'PASSKIT_'
DOTENV_NAME = '.env'


def locate_dotenv(start: Path) -> Path | None:
    """Nearest .env in start or its parents, not looking past a .git checkout root."""
    for directory in (start.resolve(), *start.resolve().parents):
        if (directory / DOTENV_NAME).is_file():
            return directory / DOTENV_NAME
        if (directory / '.git').exists():
            break
    return None


def read_dotenv(path: Path) -> dict[str, str]:
    """PASSKIT_* assignments from a .env file; other keys and comments are skipped."""
    values: dict[str, str] = {}
    with path.open(encoding='utf-8') as f:
        for raw in f:
            name, sep, value = raw.strip().removeprefix('export ').partition('=')
            name = name.strip()
            if not sep or not name.startswith(ENV_PREFIX):
                continue
            value = value.strip()
            if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
                value = value[1:-1]
            values[name] = value
    return values


@dataclass
class Settings:
    key_password: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL
    env_path: Path | None = None  # .env file the values were read from, if any

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None, env_path: Path | None = None) -> 'Settings':
        environ = os.environ if environ is None else environ
        return cls(
            key_password=environ.get('PASSKIT_KEY_PASSWORD') or None,
            log_level=(environ.get('PASSKIT_LOG_LEVEL') or DEFAULT_LOG_LEVEL).upper(),
            env_path=env_path,
        )

    @classmethod
    def load(cls, env_file: str | None = None, start: Path | None = None) -> 'Settings':
        """Resolve settings from os.environ layered over a .env file.

        A missing explicit env_file is ignored, as is the absence of any .env.
        """
        if env_file:
            path: Path | None = Path(env_file) if Path(env_file).is_file() else None
        else:
            path = locate_dotenv(start or Path.cwd())
        merged = read_dotenv(path) if path else {}
        merged.update({k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)})
        return cls.from_environ(merged, env_path=path)
