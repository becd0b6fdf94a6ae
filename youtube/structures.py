"""Typed records built from YouTube Data API items."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Union

import isodate

LOG = logging.getLogger(__name__)


def _item_id(item: Dict[str, Any], key: str) -> str:
  # Resource endpoints return a string id, search returns {"kind": ..., "<key>": ...}
  raw_id = item.get("id")
  if isinstance(raw_id, dict):
    return raw_id.get(key) or ""
  return raw_id or ""


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
  if not value:
    return None
  try:
    return isodate.parse_datetime(value)
  except (isodate.ISO8601Error, ValueError):
    LOG.debug("Unparseable timestamp %r", value)
    return None


def _parse_duration(value: Optional[str]) -> Optional[timedelta]:
  if not value:
    return None
  try:
    duration = isodate.parse_duration(value)
  except (isodate.ISO8601Error, ValueError):
    LOG.debug("Unparseable duration %r", value)
    return None
  # Durations with year/month parts come back as isodate.Duration
  if isinstance(duration, isodate.Duration):
    return duration.totimedelta(start=datetime(1970, 1, 1))
  return duration


def _to_int(value: Any) -> Optional[int]:
  if value is None or value == "":
    return None
  try:
    return int(value)
  except (TypeError, ValueError):
    LOG.debug("Unparseable count %r", value)
    return None


@dataclass(frozen=True)
class _Resource:
  id: str
  title: str = ""
  description: str = ""
  published_at: Optional[datetime] = None
  thumbnails: Dict[str, Any] = field(default_factory=dict, compare=False)
  channel_id: Optional[str] = None
  channel_title: Optional[str] = None
  raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

  @staticmethod
  def _snippet_fields(item: Dict[str, Any]) -> Dict[str, Any]:
    snippet = item.get("snippet") or {}
    return {
      "title": snippet.get("title", ""),
      "description": snippet.get("description", ""),
      "published_at": _parse_timestamp(snippet.get("publishedAt")),
      "thumbnails": dict(snippet.get("thumbnails") or {}),
      "channel_id": snippet.get("channelId"),
      "channel_title": snippet.get("channelTitle"),
      "raw": item,
    }

  def to_dict(self) -> Dict[str, Any]:
    return {
      "type": self.type,
      "id": self.id,
      "title": self.title,
      "description": self.description,
      "published_at": self.published_at.isoformat() if self.published_at else None,
      "thumbnails": self.thumbnails,
      "channel_id": self.channel_id,
      "channel_title": self.channel_title,
      "url": self.url,
    }


@dataclass(frozen=True)
class Video(_Resource):
  """A YouTube video."""

  type = "video"

  duration: Optional[timedelta] = None
  view_count: Optional[int] = None
  like_count: Optional[int] = None
  comment_count: Optional[int] = None

  @classmethod
  def from_api(cls, item: Dict[str, Any]) -> "Video":
    content = item.get("contentDetails") or {}
    stats = item.get("statistics") or {}
    return cls(
      id=_item_id(item, "videoId"),
      duration=_parse_duration(content.get("duration")),
      view_count=_to_int(stats.get("viewCount")),
      like_count=_to_int(stats.get("likeCount")),
      comment_count=_to_int(stats.get("commentCount")),
      **cls._snippet_fields(item),
    )

  @property
  def url(self) -> str:
    return f"https://www.youtube.com/watch?v={self.id}"

  @property
  def duration_seconds(self) -> Optional[int]:
    if self.duration is None:
      return None
    return int(self.duration.total_seconds())

  def to_dict(self) -> Dict[str, Any]:
    payload = super().to_dict()
    payload.update(
      {
        "duration_seconds": self.duration_seconds,
        "view_count": self.view_count,
        "like_count": self.like_count,
        "comment_count": self.comment_count,
      }
    )
    return payload


@dataclass(frozen=True)
class Playlist(_Resource):
  """A YouTube playlist. ``item_count`` is the size of its item list."""

  type = "playlist"

  item_count: Optional[int] = None

  @classmethod
  def from_api(cls, item: Dict[str, Any]) -> "Playlist":
    content = item.get("contentDetails") or {}
    return cls(
      id=_item_id(item, "playlistId"),
      item_count=_to_int(content.get("itemCount")),
      **cls._snippet_fields(item),
    )

  @property
  def url(self) -> str:
    return f"https://www.youtube.com/playlist?list={self.id}"

  def to_dict(self) -> Dict[str, Any]:
    payload = super().to_dict()
    payload["item_count"] = self.item_count
    return payload


@dataclass(frozen=True)
class Channel(_Resource):
  """A YouTube channel with its public statistics."""

  type = "channel"

  custom_url: Optional[str] = None
  subscriber_count: Optional[int] = None
  view_count: Optional[int] = None
  video_count: Optional[int] = None
  hidden_subscriber_count: bool = False

  @classmethod
  def from_api(cls, item: Dict[str, Any]) -> "Channel":
    snippet = item.get("snippet") or {}
    stats = item.get("statistics") or {}
    fields = cls._snippet_fields(item)
    channel_id = _item_id(item, "channelId")
    # A channel is its own owner
    fields["channel_id"] = fields["channel_id"] or channel_id
    fields["channel_title"] = fields["channel_title"] or fields["title"]
    return cls(
      id=channel_id,
      custom_url=snippet.get("customUrl"),
      subscriber_count=_to_int(stats.get("subscriberCount")),
      view_count=_to_int(stats.get("viewCount")),
      video_count=_to_int(stats.get("videoCount")),
      hidden_subscriber_count=bool(stats.get("hiddenSubscriberCount", False)),
      **fields,
    )

  @property
  def url(self) -> str:
    return f"https://www.youtube.com/channel/{self.id}"

  def to_dict(self) -> Dict[str, Any]:
    payload = super().to_dict()
    payload.update(
      {
        "custom_url": self.custom_url,
        "subscriber_count": self.subscriber_count,
        "view_count": self.view_count,
        "video_count": self.video_count,
        "hidden_subscriber_count": self.hidden_subscriber_count,
      }
    )
    return payload


SearchResult = Union[Video, Playlist, Channel, Dict[str, Any]]


def result_from_search_item(item: Dict[str, Any]) -> SearchResult:
  """Build the record matching a search item's id, or return the item untouched."""
  item_id = item.get("id")
  if not isinstance(item_id, dict):
    return item
  if item_id.get("videoId"):
    return Video.from_api(item)
  if item_id.get("playlistId"):
    return Playlist.from_api(item)
  if item_id.get("channelId"):
    return Channel.from_api(item)
  return item


__all__ = [
  "Channel",
  "Playlist",
  "SearchResult",
  "Video",
  "result_from_search_item",
]
