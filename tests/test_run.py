"""Tests for the launcher script."""

from unittest import mock
from urllib.parse import parse_qs, urlparse

import requests
import responses

import run


class TestBrowserUrl:
    def test_no_settings(self):
        assert run.browser_url(run.URL) == run.URL

    def test_outline_and_fence(self):
        url = run.browser_url(run.URL, "root\n# a & b", fenced=True)
        parsed = urlparse(url)
        assert f"{parsed.scheme}://{parsed.netloc}" == run.URL
        assert parse_qs(parsed.query) == {
            "outline": ["root\n# a & b"],
            "fence": ["1"],
        }

    def test_fence_only(self):
        url = run.browser_url(run.URL, fenced=True)
        assert parse_qs(urlparse(url).query) == {"fence": ["1"]}


class TestWaitAndOpenBrowser:
    @responses.activate
    def test_opens_when_server_ready(self):
        responses.add(responses.GET, run.URL, body="ok", status=200)
        with mock.patch("run.webbrowser.open") as open_mock:
            assert run._wait_and_open_browser(attempts=3, delay=0) is True
        open_mock.assert_called_once_with(run.URL)

    @responses.activate
    def test_opens_page_with_outline(self):
        responses.add(responses.GET, run.URL, body="ok", status=200)
        page = run.browser_url(run.URL, "root\n# a")
        with mock.patch("run.webbrowser.open") as open_mock:
            assert run._wait_and_open_browser(run.URL, page, attempts=1, delay=0)
        open_mock.assert_called_once_with(page)

    @responses.activate
    def test_retries_until_ready(self):
        responses.add(responses.GET, run.URL, status=503)
        responses.add(responses.GET, run.URL, body=requests.ConnectionError())
        responses.add(responses.GET, run.URL, body="ok", status=200)
        with mock.patch("run.webbrowser.open") as open_mock:
            assert run._wait_and_open_browser(attempts=5, delay=0) is True
        assert len(responses.calls) == 3
        open_mock.assert_called_once()

    @responses.activate
    def test_gives_up(self):
        responses.add(responses.GET, run.URL, status=500)
        with mock.patch("run.webbrowser.open") as open_mock:
            assert run._wait_and_open_browser(attempts=2, delay=0) is False
        open_mock.assert_not_called()


class TestMain:
    def test_passes_outline_to_browser_thread(self, tmp_path):
        outline = tmp_path / "outline.txt"
        outline.write_bytes(b"\xef\xbb\xbfroot\n# a\n")
        with mock.patch("run.threading.Thread") as thread_mock, mock.patch(
            "streamlit.web.bootstrap.run"
        ) as bootstrap_mock:
            run.main([str(outline), "--fence", "--port", "8600"])

        base, page = thread_mock.call_args.kwargs["args"]
        assert base == "http://localhost:8600"
        assert page == run.browser_url(base, "root\n# a\n", fenced=True)
        assert bootstrap_mock.call_args.args[0] == str(run.APP_PATH)
        assert bootstrap_mock.call_args.kwargs["flag_options"]["server.port"] == 8600
