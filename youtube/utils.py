"""YouTube URL parsing and ID extraction utilities."""

from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import parse_qs, urlparse

LOG = logging.getLogger(__name__)

# Hosts accepted by check_base_url
BASE_HOSTS = {"youtube.com", "www.youtube.com", "youtu.be", "www.youtu.be"}

# Hosts the extractors will pull IDs from
YOUTUBE_HOSTS = BASE_HOSTS | {"m.youtube.com", "music.youtube.com", "youtube-nocookie.com", "www.youtube-nocookie.com"}

VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")
PLAYLIST_ID_RE = re.compile(r"^(?:PL|UU|LL|FL|RD|OL)[A-Za-z0-9_-]{10,}$")
CHANNEL_ID_RE = re.compile(r"^UC[A-Za-z0-9_-]{22}$")

# Path prefixes that carry a video ID as their next segment
VIDEO_PATH_PREFIXES = ("embed", "v", "e", "shorts", "live")


def _parse(url: str):
  try:
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.hostname:
      # Scheme-less input such as "youtube.com/watch?v=..."
      parsed = urlparse(f"https://{url}")
  except ValueError as exc:
    LOG.debug("Unparseable URL %r: %s", url, exc)
    return None, ""
  host = (parsed.hostname or "").lower()
  return parsed, host


def _first_query_value(query: str, name: str) -> Optional[str]:
  values = parse_qs(query).get(name, [])
  return values[0] if values else None


def extract_video_id(url: Optional[str]) -> Optional[str]:
  """
  Extract an 11-character video ID from a URL or return a bare ID as-is.

  Supported forms:
  - VIDEO_ID
  - youtube.com/watch?v=VIDEO_ID
  - youtu.be/VIDEO_ID
  - youtube.com/{embed,v,shorts,live}/VIDEO_ID
  """
  value = (url or "").strip()
  if not value:
    return None

  if VIDEO_ID_RE.match(value):
    return value

  parsed, host = _parse(value)
  if host not in YOUTUBE_HOSTS:
    LOG.debug("Not a YouTube host, no video ID in %s", value)
    return None

  segments = [s for s in parsed.path.split("/") if s]

  if host.endswith("youtu.be"):
    candidate = segments[0] if segments else None
  else:
    candidate = _first_query_value(parsed.query, "v")
    if not candidate and len(segments) >= 2 and segments[0] in VIDEO_PATH_PREFIXES:
      candidate = segments[1]

  if candidate and VIDEO_ID_RE.match(candidate):
    return candidate

  LOG.debug("No video ID found in %s", value)
  return None


def extract_playlist_id(url: Optional[str]) -> Optional[str]:
  """Extract a playlist ID from the ``list`` query parameter, or return a bare ID."""
  value = (url or "").strip()
  if not value:
    return None

  if PLAYLIST_ID_RE.match(value):
    return value

  parsed, host = _parse(value)
  if host not in YOUTUBE_HOSTS:
    return None

  candidate = _first_query_value(parsed.query, "list")
  if candidate and re.match(r"^[A-Za-z0-9_-]+$", candidate):
    return candidate

  LOG.debug("No playlist ID found in %s", value)
  return None


def extract_channel_id(url: Optional[str]) -> Optional[str]:
  """Extract a ``UC...`` channel ID from a ``/channel/`` URL, or return a bare ID."""
  value = (url or "").strip()
  if not value:
    return None

  if CHANNEL_ID_RE.match(value):
    return value

  parsed, host = _parse(value)
  if host not in YOUTUBE_HOSTS:
    return None

  segments = [s for s in parsed.path.split("/") if s]
  if len(segments) >= 2 and segments[0] == "channel" and CHANNEL_ID_RE.match(segments[1]):
    return segments[1]

  LOG.debug("No channel ID found in %s", value)
  return None


def check_base_url(url: Optional[str]) -> bool:
  """Return True when ``url`` is on a base YouTube host and has a lowercase path."""
  value = (url or "").strip()
  if not value:
    return False

  try:
    parsed = urlparse(value)
    host = parsed.hostname or ""
  except ValueError as exc:
    LOG.debug("Unparseable URL %r: %s", value, exc)
    return False
  if host not in BASE_HOSTS:
    return False
  return re.match(r"^/[a-z]", parsed.path) is not None


__all__ = [
  "VIDEO_ID_RE",
  "check_base_url",
  "extract_channel_id",
  "extract_playlist_id",
  "extract_video_id",
]
