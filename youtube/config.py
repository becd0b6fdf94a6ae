"""Configuration helpers for the YouTube Data API client."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

API_BASE_URL = "https://www.googleapis.com/youtube/v3"


class ConfigError(RuntimeError):
  """Raised when the environment does not describe a usable configuration."""


@dataclass(frozen=True)
class YouTubeConfig:
  """Settings required to talk to the YouTube Data API."""

  api_key: str = field(repr=False)
  base_url: str = API_BASE_URL
  timeout: Optional[float] = None


def _optional_float(name: str) -> Optional[float]:
  raw = os.environ.get(name, "").strip()
  if not raw:
    return None
  try:
    value = float(raw)
  except ValueError as exc:
    raise ConfigError(f"{name} must be a number, got: {raw!r}") from exc
  if value <= 0:
    raise ConfigError(f"{name} must be positive, got: {raw!r}")
  return value


def load_config() -> YouTubeConfig:
  """Load configuration from environment variables."""

  api_key = os.environ.get("YOUTUBE_API_KEY", "").strip()
  if not api_key:
    raise ConfigError("Missing required environment variable: YOUTUBE_API_KEY.")

  base_url = os.environ.get("YOUTUBE_API_BASE_URL", "").strip() or API_BASE_URL
  timeout = _optional_float("YOUTUBE_TIMEOUT")

  return YouTubeConfig(api_key=api_key, base_url=base_url.rstrip("/"), timeout=timeout)


__all__ = ["API_BASE_URL", "ConfigError", "YouTubeConfig", "load_config"]
