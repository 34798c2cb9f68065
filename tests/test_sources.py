"""Tests for playlist retrieval."""

import httpx
import pytest

from m3u8parser import FetchFailure, M3U8Parser
from m3u8parser.sources import FileSource, HttpSource, fetch_text_async, is_url, source_for

URL = "https://example.com/test/playlist.m3u"


def mock_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def serve(text: str, status_code: int = 200):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=text)

    return handler


class TestHttpSource:
    """Test cases for HttpSource."""

    def test_fetch_and_parse(self, shared_playlist):
        source = HttpSource(client=mock_client(serve(shared_playlist)))
        parser = M3U8Parser(url=URL, source=source)

        assert parser.raw_playlist == shared_playlist
        assert len(parser.items) == 2
        assert parser.items[0].name == "News Channel"
        assert parser.items[1].url == "http://example.com/sports.m3u8"

    def test_requests_given_url(self, shared_playlist):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, text=shared_playlist)

        HttpSource(client=mock_client(handler)).read(URL)
        assert seen == [URL]

    def test_error_status(self):
        source = HttpSource(client=mock_client(serve("missing", status_code=404)))
        with pytest.raises(FetchFailure, match="404") as excinfo:
            source.read(URL)
        assert excinfo.value.status_code == 404
        assert excinfo.value.url == URL

    def test_error_status_leaves_parser_untouched(self, shared_playlist):
        parser = M3U8Parser(playlist=shared_playlist)
        source = HttpSource(client=mock_client(serve("#EXTM3U", status_code=500)))
        with pytest.raises(FetchFailure):
            parser.fetch_playlist(URL, source=source)
        assert len(parser.items) == 2

    def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FetchFailure) as excinfo:
            HttpSource(client=mock_client(handler)).read(URL)
        assert excinfo.value.status_code is None
        assert isinstance(excinfo.value.__cause__, httpx.ConnectError)

    def test_injected_client_not_closed(self, shared_playlist):
        client = mock_client(serve(shared_playlist))
        with HttpSource(client=client) as source:
            source.read(URL)
        assert not client.is_closed


class TestAsyncFetch:
    """Test cases for the async fetch path."""

    @pytest.mark.anyio
    async def test_fetch_playlist_async(self, shared_playlist):
        client = httpx.AsyncClient(transport=httpx.MockTransport(serve(shared_playlist)))
        parser = M3U8Parser()
        async with client:
            await parser.fetch_playlist_async(URL, client=client)

        assert parser.raw_playlist == shared_playlist
        assert parser.playlist_groups == ["News", "Sports"]

    @pytest.mark.anyio
    async def test_error_status(self):
        client = httpx.AsyncClient(transport=httpx.MockTransport(serve("", status_code=403)))
        async with client:
            with pytest.raises(FetchFailure) as excinfo:
                await fetch_text_async(URL, client=client)
        assert excinfo.value.status_code == 403


class TestFileSource:
    """Test cases for FileSource and source selection."""

    def test_reads_file(self, tmp_path, shared_playlist):
        path = tmp_path / "playlist.m3u8"
        path.write_text(shared_playlist, encoding="utf-8")
        assert FileSource().read(str(path)) == shared_playlist

    def test_keeps_carriage_returns(self, tmp_path, shared_playlist):
        text = shared_playlist.replace("\n", "\r\n")
        path = tmp_path / "playlist.m3u8"
        path.write_bytes(text.encode("utf-8"))
        assert FileSource().read(str(path)) == text

    def test_missing_file(self, tmp_path):
        with pytest.raises(FetchFailure):
            FileSource().read(str(tmp_path / "missing.m3u8"))

    def test_source_for(self):
        assert is_url("HTTPS://example.com/a.m3u8")
        assert not is_url("/tmp/a.m3u8")
        assert isinstance(source_for("/tmp/a.m3u8"), FileSource)
        http = source_for(URL)
        assert isinstance(http, HttpSource)
        http.close()
