"""YouTube Data API v3 client with typed video, playlist and channel results."""

from youtube.client import (
  YouTube,
  YouTubeError,
  YouTubeIDNotFoundError,
  YouTubeResourceNotFound,
)
from youtube.config import ConfigError, YouTubeConfig, load_config
from youtube.structures import Channel, Playlist, Video, result_from_search_item
from youtube.utils import check_base_url, extract_channel_id, extract_playlist_id, extract_video_id

__all__ = [
  "Channel",
  "ConfigError",
  "Playlist",
  "Video",
  "YouTube",
  "YouTubeConfig",
  "YouTubeError",
  "YouTubeIDNotFoundError",
  "YouTubeResourceNotFound",
  "check_base_url",
  "extract_channel_id",
  "extract_playlist_id",
  "extract_video_id",
  "load_config",
  "result_from_search_item",
]
