"""Tests for the command-line entry point (main.py)."""

from __future__ import annotations

import logging
from datetime import datetime
from unittest.mock import MagicMock

import pytest
import requests
from urllib3.exceptions import ProtocolError

from webmedia.main import parse_args, run

BASE = ["--access-token", "fake-token", "--base-url", "https://api.video.example.com"]


class TestParseArgs:
    def test_action_required(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(BASE)

    def test_actions_are_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(BASE + ["--video", "1", "--list-tags"])

    def test_csv_and_dates(self) -> None:
        args = parse_args(BASE + ["--list-videos", "--tags", "futebol, Tempo Real", "--published-since", "2017-03-30"])
        assert args.tags == ["futebol", "Tempo Real"]
        assert args.published_since == datetime(2017, 3, 30)

    def test_bad_date_rejected(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(BASE + ["--list-videos", "--published-since", "yesterday"])


class TestRun:
    def test_missing_token(self, fetcher, caplog: pytest.LogCaptureFixture) -> None:
        args = parse_args(["--access-token", "", "--tag", "86"])
        assert run(args, fetcher=fetcher) == 2
        assert "access token" in caplog.text

    def test_show_video(self, fetcher, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO)
        assert run(parse_args(BASE + ["--video", "6053793"]), fetcher=fetcher) == 0
        assert "Saia Justa, GNT" in caplog.text
        assert "rating: 12" in caplog.text

    def test_list_tags_with_name(self, fetcher, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO)
        assert run(parse_args(BASE + ["--list-tags", "--tag-name", "Futebol"]), fetcher=fetcher) == 0
        assert fetcher.requested_urls[-1].endswith("tags.json?access_token=fake-token&name=Futebol")
        assert "Flamengo" in caplog.text

    def test_list_videos(self, fetcher, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO)
        argv = BASE + ["--list-videos", "--per-page", "2", "--tags", "futebol,Flamengo"]
        assert run(parse_args(argv), fetcher=fetcher) == 0
        assert "tags.all=futebol%7CFlamengo" in fetcher.requested_urls[-1]
        assert "Page 1 of 2" in caplog.text
        assert "Gols da rodada" in caplog.text

    def test_pager_only(self, fetcher, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO)
        assert run(parse_args(BASE + ["--list-videos", "--pager-only"]), fetcher=fetcher) == 0
        assert "/videos/pagination.json" in fetcher.requested_urls[-1]
        assert "Page 1 of 3" in caplog.text

    def test_errors_give_nonzero_exit(self, fetcher, caplog: pytest.LogCaptureFixture) -> None:
        assert run(parse_args(BASE + ["--tag", "999"]), fetcher=fetcher) == 1
        assert "fixture" in caplog.text

    def test_bad_base_url(self, fetcher) -> None:
        args = parse_args(["--access-token", "t", "--base-url", "not a url", "--tag", "86"])
        assert run(args, fetcher=fetcher) == 1

    def test_body_read_failure_gives_nonzero_exit(self, caplog: pytest.LogCaptureFixture) -> None:
        class DroppingFetcher:
            def fetch_url(self, url: str) -> requests.Response:
                response = requests.Response()
                response.status_code = 200
                response.raw = MagicMock()
                response.raw.stream.side_effect = ProtocolError("Connection broken")
                return response

        assert run(parse_args(BASE + ["--list-tags"]), fetcher=DroppingFetcher()) == 1
        assert "ChunkedEncodingError" in caplog.text
