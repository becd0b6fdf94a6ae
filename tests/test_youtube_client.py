"""Tests for the YouTube Data API client."""

from unittest.mock import MagicMock

import pytest
import requests

from youtube import (
  Channel,
  Playlist,
  Video,
  YouTube,
  YouTubeConfig,
  YouTubeIDNotFoundError,
  YouTubeResourceNotFound,
)


def _response(payload=None, *, status_code=200):
  response = MagicMock()
  response.status_code = status_code
  response.json.return_value = payload if payload is not None else {"items": []}
  if status_code >= 400:
    response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Client Error")
  return response


@pytest.fixture
def session():
  return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
  return YouTube("test-key", session=session)


def test_request_adds_key_and_does_not_mutate_params(client, session):
  session.get.return_value = _response({"items": []})
  params = {"id": "abc", "part": "snippet"}

  result = client.request("videos", params)

  assert result == {"items": []}
  assert params == {"id": "abc", "part": "snippet"}
  session.get.assert_called_once_with(
    "https://www.googleapis.com/youtube/v3/videos",
    params={"id": "abc", "part": "snippet", "key": "test-key"},
    timeout=None,
  )


def test_request_keeps_explicit_key(client, session):
  session.get.return_value = _response({"items": []})

  client.request("search", {"key": "other-key"})

  assert session.get.call_args.kwargs["params"]["key"] == "other-key"


def test_get_video_extracts_id_and_builds_video(client, session):
  session.get.return_value = _response(
    {"items": [{"id": "dQw4w9WgXcQ", "snippet": {"title": "Never Gonna Give You Up"}}]}
  )

  video = client.get_video("https://www.youtube.com/watch?v=dQw4w9WgXcQ")

  assert isinstance(video, Video)
  assert video.id == "dQw4w9WgXcQ"
  assert video.title == "Never Gonna Give You Up"
  params = session.get.call_args.kwargs["params"]
  assert params["id"] == "dQw4w9WgXcQ"
  assert params["part"] == "snippet,contentDetails,statistics"


def test_get_video_rejects_url_without_id_before_any_request(client, session):
  with pytest.raises(YouTubeIDNotFoundError, match="No video ID found in URL: https://example.com/"):
    client.get_video("https://example.com/")

  session.get.assert_not_called()


def test_get_playlist_and_channel_reject_missing_ids(client, session):
  with pytest.raises(YouTubeIDNotFoundError, match="No playlist ID"):
    client.get_playlist("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
  with pytest.raises(ValueError, match="No channel ID"):
    client.get_channel("https://www.youtube.com/@somebody")

  session.get.assert_not_called()


def test_get_playlist_by_url(client, session):
  session.get.return_value = _response({"items": [{"id": "PL2BN1Zd8U_Ms", "snippet": {"title": "Mix"}}]})

  playlist = client.get_playlist("https://www.youtube.com/playlist?list=PL2BN1Zd8U_Ms")

  assert isinstance(playlist, Playlist)
  assert playlist.title == "Mix"
  assert session.get.call_args.args[0].endswith("/playlists")


def test_get_channel_by_id_uses_statistics_part(client, session):
  session.get.return_value = _response(
    {"items": [{"id": "UC477Kvszl9JivqOxN1dFgPQ", "snippet": {"title": "Chan"}, "statistics": {"subscriberCount": "7"}}]}
  )

  channel = client.get_channel_by_id("UC477Kvszl9JivqOxN1dFgPQ")

  assert isinstance(channel, Channel)
  assert channel.subscriber_count == 7
  assert session.get.call_args.kwargs["params"]["part"] == "snippet,statistics"


@pytest.mark.parametrize(
  "method, resource_id",
  [
    ("get_video_by_id", "missing0000"),
    ("get_playlist_by_id", "PLmissing000"),
    ("get_channel_by_id", "UCmissing0000000000000000"),
  ],
)
def test_lookup_by_id_raises_when_no_items(client, session, method, resource_id):
  session.get.return_value = _response({"items": []})

  with pytest.raises(YouTubeResourceNotFound, match=resource_id):
    getattr(client, method)(resource_id)


def test_get_video_rejects_malformed_url_before_any_request(client, session):
  with pytest.raises(YouTubeIDNotFoundError, match="No video ID found in URL"):
    client.get_video("http://[oops/watch?v=dQw4w9WgXcQ")

  session.get.assert_not_called()


def test_http_errors_propagate_unmodified(client, session):
  session.get.return_value = _response(status_code=403)

  with pytest.raises(requests.HTTPError, match="403"):
    client.get_video_by_id("dQw4w9WgXcQ")


def test_transport_errors_propagate_unmodified(client, session):
  session.get.side_effect = requests.ConnectionError("boom")

  with pytest.raises(requests.ConnectionError, match="boom"):
    client.search("Centuries")


def test_search_dispatches_results_by_id_kind(client, session):
  raw_item = {"id": {"kind": "youtube#unknown"}}
  session.get.return_value = _response(
    {
      "items": [
        {"id": {"kind": "youtube#video", "videoId": "3odIdmuFfEY"}, "snippet": {"title": "Centuries"}},
        {"id": {"kind": "youtube#playlist", "playlistId": "PL2BN1Zd8U_Ms"}, "snippet": {}},
        {"id": {"kind": "youtube#channel", "channelId": "UC477Kvszl9JivqOxN1dFgPQ"}, "snippet": {}},
        raw_item,
      ]
    }
  )

  results = client.search("Centuries", 10)

  assert [type(r) for r in results] == [Video, Playlist, Channel, dict]
  assert results[3] is raw_item
  params = session.get.call_args.kwargs["params"]
  assert params["q"] == "Centuries"
  assert params["maxResults"] == 10
  assert params["part"] == "snippet"
  assert "type" not in params


@pytest.mark.parametrize(
  "method, expected_type",
  [
    ("search_videos", "video"),
    ("search_playlists", "playlist"),
    ("search_channels", "channel"),
  ],
)
def test_typed_search_sets_type_and_keeps_options(client, session, method, expected_type):
  session.get.return_value = _response({"items": []})
  options = {"regionCode": "US"}

  results = getattr(client, method)("Centuries", options=options)

  assert results == []
  params = session.get.call_args.kwargs["params"]
  assert params["type"] == expected_type
  assert params["regionCode"] == "US"
  assert params["maxResults"] == 5
  assert options == {"regionCode": "US"}


def test_check_base_url_is_static():
  assert YouTube.check_base_url("https://www.youtube.com/watch?v=dQw4w9WgXcQ") is True
  assert YouTube.check_base_url("https://example.com/watch") is False


def test_from_config_and_repr_hide_key(session):
  config = YouTubeConfig(api_key="secret-key", base_url="https://proxy.example/yt/v3", timeout=2.5)
  client = YouTube.from_config(config, session=session)
  session.get.return_value = _response({"items": []})

  client.request("search", {"q": "x"})

  assert "secret-key" not in repr(client)
  assert "secret-key" not in repr(config)
  session.get.assert_called_once_with(
    "https://proxy.example/yt/v3/search",
    params={"q": "x", "key": "secret-key"},
    timeout=2.5,
  )


def test_record_types_exposed_on_client():
  assert YouTube.Video is Video
  assert YouTube.Playlist is Playlist
  assert YouTube.Channel is Channel
