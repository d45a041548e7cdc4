from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Settings:
    pixel_ratio: float
    width: float
    height: float
    output_dir: Path


DEFAULT_PIXEL_RATIO = 1.0
DEFAULT_WIDTH = 600.0
DEFAULT_HEIGHT = 400.0
DEFAULT_OUTPUT_DIR = "charts"


def _read_env_file() -> dict[str, str]:
    """Load minimal .env to support CHARTS_* keys if not in the environment.

    We intentionally do not overwrite existing os.environ values.
    """
    env_path = Path.cwd() / ".env"
    env: dict[str, str] = {}
    if not env_path.exists():
        return env
    try:
        for line in env_path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip().strip('"').strip("'")
            env[k] = v
    except (OSError, UnicodeDecodeError):
        # A broken .env must not break CLI usage
        return {}
    return env


def _get_env(name: str, env_file: dict[str, str] | None = None) -> str | None:
    # Priority: process env -> .env
    val = os.getenv(name)
    if val:
        return val
    if env_file and name in env_file:
        return env_file[name]
    return None


def _get_float(name: str, default: float, env_file: dict[str, str]) -> float:
    raw = _get_env(name, env_file)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def get_settings() -> Settings:
    env_file = _read_env_file()
    output_dir = _get_env("CHARTS_OUTPUT_DIR", env_file) or DEFAULT_OUTPUT_DIR
    return Settings(
        pixel_ratio=_get_float("CHARTS_PIXEL_RATIO", DEFAULT_PIXEL_RATIO, env_file),
        width=_get_float("CHARTS_WIDTH", DEFAULT_WIDTH, env_file),
        height=_get_float("CHARTS_HEIGHT", DEFAULT_HEIGHT, env_file),
        output_dir=Path(output_dir),
    )
