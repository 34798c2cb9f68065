"""Shared fixtures for m3u8parser tests."""

import pytest
import structlog


SHARED_PLAYLIST = """#EXTM3U
#EXTINF:-1 tvg-id="ABC" group-title="News" tvg-logo="http://example.com/logo.png", News Channel
http://example.com/news.m3u8
#EXTINF:-1 tvg-id="DEF" group-title="Sports" tvg-logo="http://example.com/logo.png", Sports Channel
http://example.com/sports.m3u8"""

IPTV_PLAYLIST = """#EXTM3U x-tvg-url="http://epg.example.com/guide.xml"
#EXTINF:-1 tvg-id="bbc1" tvg-name="BBC One" tvg-logo="bbc1.png" group-title="UK News" catchup="default" catchup-days="7" catchup-source="http://archive.example.com/{utc}" timeshift="2",BBC One HD
#EXTVLCOPT:http-user-agent=Mozilla/5.0
#EXTVLCOPT:http-referrer="http://referrer.example.com"
http://stream.example.com/bbc1.m3u8
#EXTINF:-1 tvg-id="espn" group-title="Sports",ESPN
#EXTGRP:Sports US
http://stream.example.com/espn.m3u8|user-agent=VLC/3.0&referer=http://espn.example.com
#EXTINF:-1 tvg-id="sky" group-title="sports",Sky Sports

http://stream.example.com/sky.m3u8
#EXTINF:-1 tvg-id="film" group-title="Movies",Film Four
http://stream.example.com/film.m3u8"""


@pytest.fixture
def shared_playlist() -> str:
    return SHARED_PLAYLIST


@pytest.fixture
def iptv_playlist() -> str:
    return IPTV_PLAYLIST


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
