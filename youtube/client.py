"""YouTube Data API v3 client."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import requests

from .config import API_BASE_URL, YouTubeConfig
from .structures import Channel, Playlist, SearchResult, Video, result_from_search_item
from .utils import check_base_url, extract_channel_id, extract_playlist_id, extract_video_id

LOG = logging.getLogger(__name__)

ENDPOINTS = {
  "videos": "videos",
  "playlists": "playlists",
  "channels": "channels",
  "search": "search",
}

PARTS = {
  "videos": "snippet,contentDetails,statistics",
  "playlists": "snippet,contentDetails",
  "channels": "snippet,statistics",
  "search": "snippet",
}

DEFAULT_SEARCH_LIMIT = 5


class YouTubeError(RuntimeError):
  """Base error for YouTube client problems."""


class YouTubeIDNotFoundError(YouTubeError, ValueError):
  """Raised when no resource ID can be extracted from a URL."""


class YouTubeResourceNotFound(YouTubeError, LookupError):
  """Raised when a lookup by ID returns no items."""


class YouTube:
  """Thin wrapper around the YouTube Data API v3 read endpoints."""

  Video = Video
  Playlist = Playlist
  Channel = Channel

  def __init__(
    self,
    key: str,
    *,
    base_url: str = API_BASE_URL,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
  ) -> None:
    self._key = key
    self.base_url = base_url.rstrip("/")
    self.timeout = timeout
    self._session = session or requests.Session()

  @classmethod
  def from_config(cls, config: YouTubeConfig, *, session: Optional[requests.Session] = None) -> "YouTube":
    return cls(config.api_key, base_url=config.base_url, timeout=config.timeout, session=session)

  def __repr__(self) -> str:
    return f"{type(self).__name__}(base_url={self.base_url!r})"

  # ---------------------------------------------------------------------------
  # Raw access
  # ---------------------------------------------------------------------------
  def request(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    GET ``endpoint`` with ``params`` and return the decoded JSON body.

    The API key is added unless ``params`` already carries one. HTTP errors
    (``requests.HTTPError``), transport errors and JSON decoding errors are
    raised to the caller as-is.
    """
    query = dict(params or {})
    if not query.get("key"):
      query["key"] = self._key

    LOG.debug(
      "GET %s params=%s",
      endpoint,
      {k: v for k, v in query.items() if k != "key"},
    )
    response = self._session.get(f"{self.base_url}/{endpoint}", params=query, timeout=self.timeout)
    response.raise_for_status()
    return response.json()

  # ---------------------------------------------------------------------------
  # Lookups
  # ---------------------------------------------------------------------------
  def get_video(self, url: str) -> Video:
    """Get a video by URL or ID."""
    video_id = extract_video_id(url)
    if not video_id:
      raise YouTubeIDNotFoundError(f"No video ID found in URL: {url}")
    return self.get_video_by_id(video_id)

  def get_video_by_id(self, video_id: str) -> Video:
    item = self._first_item("videos", video_id)
    return Video.from_api(item)

  def get_playlist(self, url: str) -> Playlist:
    """Get a playlist by URL or ID."""
    playlist_id = extract_playlist_id(url)
    if not playlist_id:
      raise YouTubeIDNotFoundError(f"No playlist ID found in URL: {url}")
    return self.get_playlist_by_id(playlist_id)

  def get_playlist_by_id(self, playlist_id: str) -> Playlist:
    item = self._first_item("playlists", playlist_id)
    return Playlist.from_api(item)

  def get_channel(self, url: str) -> Channel:
    """Get a channel by URL or ID."""
    channel_id = extract_channel_id(url)
    if not channel_id:
      raise YouTubeIDNotFoundError(f"No channel ID found in URL: {url}")
    return self.get_channel_by_id(channel_id)

  def get_channel_by_id(self, channel_id: str) -> Channel:
    item = self._first_item("channels", channel_id)
    return Channel.from_api(item)

  # ---------------------------------------------------------------------------
  # Search
  # ---------------------------------------------------------------------------
  def search(
    self,
    query: str,
    limit: int = DEFAULT_SEARCH_LIMIT,
    options: Optional[Mapping[str, Any]] = None,
  ) -> List[SearchResult]:
    """
    Search YouTube for videos, playlists and channels.

    Args:
      query: The string to search for.
      limit: Maximum number of results (``maxResults``).
      options: Extra query parameters passed through to the API.

    Returns:
      One ``Video``, ``Playlist`` or ``Channel`` per item, or the raw item
      when its id names none of them.
    """
    params = dict(options or {})
    params.update({"q": query, "maxResults": limit, "part": PARTS["search"]})
    result = self.request(ENDPOINTS["search"], params)
    return [result_from_search_item(item) for item in result.get("items", [])]

  def search_videos(
    self,
    query: str,
    limit: int = DEFAULT_SEARCH_LIMIT,
    options: Optional[Mapping[str, Any]] = None,
  ) -> List[SearchResult]:
    return self.search(query, limit, {**(options or {}), "type": "video"})

  def search_playlists(
    self,
    query: str,
    limit: int = DEFAULT_SEARCH_LIMIT,
    options: Optional[Mapping[str, Any]] = None,
  ) -> List[SearchResult]:
    return self.search(query, limit, {**(options or {}), "type": "playlist"})

  def search_channels(
    self,
    query: str,
    limit: int = DEFAULT_SEARCH_LIMIT,
    options: Optional[Mapping[str, Any]] = None,
  ) -> List[SearchResult]:
    return self.search(query, limit, {**(options or {}), "type": "channel"})

  @staticmethod
  def check_base_url(url: str) -> bool:
    """Check whether a string is a basic YouTube URL."""
    return check_base_url(url)

  # ---------------------------------------------------------------------------
  # Internal helpers
  # ---------------------------------------------------------------------------
  def _first_item(self, resource: str, resource_id: str) -> Dict[str, Any]:
    result = self.request(ENDPOINTS[resource], {"id": resource_id, "part": PARTS[resource]})
    items = result.get("items") or []
    if not items:
      raise YouTubeResourceNotFound(f"No {resource} found with ID: {resource_id}")
    return items[0]


__all__ = [
  "DEFAULT_SEARCH_LIMIT",
  "ENDPOINTS",
  "PARTS",
  "YouTube",
  "YouTubeError",
  "YouTubeIDNotFoundError",
  "YouTubeResourceNotFound",
]
