"""Tests for the command line interface."""

import io
import json
import os
import subprocess
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from m3u8parser import M3U8Parser
from m3u8parser.cli import app
from m3u8parser.logging import configure_logging

runner = CliRunner()

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


def run_entry_point(*args: str) -> subprocess.CompletedProcess:
    pythonpath = os.pathsep.join(p for p in [str(SRC_DIR), os.environ.get("PYTHONPATH", "")] if p)
    return subprocess.run(
        [sys.executable, "-m", "m3u8parser", *args],
        capture_output=True,
        text=True,
        env={**os.environ, "PYTHONPATH": pythonpath},
        check=False,
    )


@pytest.fixture
def playlist_file(tmp_path, iptv_playlist):
    path = tmp_path / "playlist.m3u8"
    path.write_text(iptv_playlist, encoding="utf-8")
    return path


class TestCli:
    """Test cases for the m3u8-parser commands."""

    def test_groups(self, playlist_file):
        result = runner.invoke(app, ["groups", str(playlist_file)])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["UK News", "Sports US", "sports", "Movies"]

    def test_info(self, playlist_file):
        result = runner.invoke(app, ["info", str(playlist_file)])
        assert result.exit_code == 0
        assert "x-tvg-url: http://epg.example.com/guide.xml" in result.stdout
        assert "Entries: 4" in result.stdout
        assert "Groups: 4" in result.stdout

    def test_entries(self, playlist_file):
        result = runner.invoke(app, ["entries", str(playlist_file), "--group", "movies"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["12\tMovies\tFilm Four\thttp://stream.example.com/film.m3u8"]

    def test_entries_json(self, playlist_file):
        result = runner.invoke(app, ["entries", str(playlist_file), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data) == 4
        assert data[0]["http"]["user-agent"] == "Mozilla/5.0"
        assert data[1]["group"]["title"] == "Sports US"

    def test_filter_to_stdout(self, playlist_file):
        result = runner.invoke(app, ["filter", str(playlist_file), "-g", "movies"])
        assert result.exit_code == 0
        assert result.stdout == (
            '#EXTM3U x-tvg-url="http://epg.example.com/guide.xml"\n'
            '#EXTINF:-1 tvg-id="film" group-title="Movies",Film Four\n'
            "http://stream.example.com/film.m3u8\n"
        )

    def test_filter_to_file(self, tmp_path, playlist_file):
        output = tmp_path / "sports.m3u8"
        result = runner.invoke(app, ["filter", str(playlist_file), "-g", "sports", "-o", str(output)])
        assert result.exit_code == 0

        lines = output.read_text(encoding="utf-8").split("\n")
        assert lines[0].startswith("#EXTM3U")
        assert lines.count("#EXTGRP:Sports US") == 1
        assert lines[-1] == "http://stream.example.com/sky.m3u8"

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["groups", str(tmp_path / "missing.m3u8")])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_invalid_playlist(self, tmp_path):
        path = tmp_path / "bad.m3u8"
        path.write_text("http://example.com/a.m3u8\n", encoding="utf-8")
        result = runner.invoke(app, ["info", str(path)])
        assert result.exit_code == 1
        assert "Playlist is not valid" in result.output


class TestCliOutput:
    """Test cases keeping log events off stdout."""

    def test_show_excluded(self, playlist_file):
        result = runner.invoke(
            app, ["entries", str(playlist_file), "--group", "movies", "--show-excluded"]
        )
        assert result.exit_code == 0
        assert "Excluded Items: 3" in result.output
        assert "ESPN: Group 'Sports US' does not match ['movies']" in result.output
        assert "Film Four" in result.output

    def test_library_logs_follow_configuration(self, capsys, shared_playlist):
        stream = io.StringIO()
        configure_logging(level="DEBUG", format="json", stream=stream)

        M3U8Parser(playlist=shared_playlist).get_playlist_by_group("news")

        events = [json.loads(line)["event"] for line in stream.getvalue().splitlines()]
        assert "playlist_parsed" in events
        assert "group_filtered" in events
        assert capsys.readouterr().out == ""

    def test_entry_point_stdout_is_only_playlist(self, playlist_file):
        result = run_entry_point("filter", str(playlist_file), "-g", "movies", "--log-level", "DEBUG")

        assert result.returncode == 0
        assert result.stdout == (
            '#EXTM3U x-tvg-url="http://epg.example.com/guide.xml"\n'
            '#EXTINF:-1 tvg-id="film" group-title="Movies",Film Four\n'
            "http://stream.example.com/film.m3u8\n"
        )
        assert "playlist_parsed" in result.stderr

    def test_entry_point_json_is_valid(self, playlist_file):
        result = run_entry_point("entries", str(playlist_file), "--json", "--log-level", "DEBUG")

        assert result.returncode == 0
        assert [entry["name"] for entry in json.loads(result.stdout)] == [
            "BBC One HD",
            "ESPN",
            "Sky Sports",
            "Film Four",
        ]
