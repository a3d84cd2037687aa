"""Tests for ClickyClient and ReportsAPI."""

import xml.etree.ElementTree as ET
from datetime import date
from pathlib import Path

import httpx
import pytest
import respx

from clicky_sdk import (
    ActionResponse,
    ChronoResponse,
    ClickyClient,
    ClickyConfigError,
    ClickyResponseError,
    TallyResponse,
    VisitorResponse,
    configure,
)

BASE_URL = "http://api.getclicky.com"
ENDPOINT = "/stats/api2"
RAW_DIR = Path(__file__).parent / "raw"
CREDENTIALS = {"site_id": 123, "sitekey": "foobar"}


def _fixture(name: str) -> bytes:
    return (RAW_DIR / f"{name}.xml").read_bytes()


class TestGetReport:
    @respx.mock
    def test_tally_report(self) -> None:
        route = respx.get(f"{BASE_URL}{ENDPOINT}").mock(
            return_value=httpx.Response(200, content=_fixture("tally"))
        )

        with ClickyClient(CREDENTIALS) as client:
            result = client.get_report("pages")

        assert len(result) == 3
        assert all(isinstance(r, TallyResponse) for r in result)
        assert result[0].value == 1052
        assert route.call_count == 1

    @respx.mock
    def test_params_passed_correctly(self) -> None:
        route = respx.get(f"{BASE_URL}{ENDPOINT}").mock(
            return_value=httpx.Response(200, content=b"<items/>")
        )

        with ClickyClient(CREDENTIALS) as client:
            client.get_report(
                "pages",
                {"from": date(2024, 1, 1), "to": date(2024, 1, 31)},
                limit=False,
                output="json",
            )

        params = route.calls.last.request.url.params
        assert params["site_id"] == "123"
        assert params["sitekey"] == "foobar"
        assert params["type"] == "pages"
        assert params["output"] == "xml"
        assert params["limit"] == "all"
        assert params["date"] == "2024-01-01,2024-01-31"
        assert "from" not in params
        assert "to" not in params

    @respx.mock
    def test_keyword_options_override_mapping(self) -> None:
        route = respx.get(f"{BASE_URL}{ENDPOINT}").mock(
            return_value=httpx.Response(200, content=b"<items/>")
        )

        with ClickyClient(CREDENTIALS) as client:
            client.get_report("pages", {"limit": 5}, limit=50)

        assert route.calls.last.request.url.params["limit"] == "50"

    @respx.mock
    def test_call_options_override_client_config(self) -> None:
        configure({"site_id": 1, "sitekey": "default"})
        route = respx.get(f"{BASE_URL}{ENDPOINT}").mock(
            return_value=httpx.Response(200, content=b"<items/>")
        )

        with ClickyClient({"site_id": 2}) as client:
            client.get_report("pages", site_id=3)
            client.get_report("pages")

        assert route.calls[0].request.url.params["site_id"] == "3"
        assert route.calls[1].request.url.params["site_id"] == "2"
        assert route.calls[1].request.url.params["sitekey"] == "default"

    @respx.mock
    def test_unknown_action_sent_as_is(self) -> None:
        route = respx.get(f"{BASE_URL}{ENDPOINT}").mock(
            return_value=httpx.Response(200, content=_fixture("tally"))
        )

        with ClickyClient(CREDENTIALS) as client:
            result = client.get_report("visitors-new")

        assert route.calls.last.request.url.params["type"] == "visitors-new"
        assert all(isinstance(r, TallyResponse) for r in result)

    @respx.mock
    def test_missing_credentials_fails_before_request(self) -> None:
        with ClickyClient({"site_id": 123}) as client:
            with pytest.raises(ClickyConfigError):
                client.get_report("pages")

        assert not respx.calls

    def test_non_mapping_options_raise(self) -> None:
        with ClickyClient(CREDENTIALS) as client:
            with pytest.raises(ClickyConfigError):
                client.get_report("pages", ["limit"], date="today")  # type: ignore[arg-type]

    @respx.mock
    def test_non_success_response_raises(self) -> None:
        respx.get(f"{BASE_URL}{ENDPOINT}").mock(return_value=httpx.Response(500))

        with ClickyClient(CREDENTIALS) as client:
            with pytest.raises(ClickyResponseError) as exc_info:
                client.get_report("pages")

        assert exc_info.value.status_code == 500

    @respx.mock
    def test_malformed_xml_raises(self) -> None:
        respx.get(f"{BASE_URL}{ENDPOINT}").mock(
            return_value=httpx.Response(200, content=b"<items><item>")
        )

        with ClickyClient(CREDENTIALS) as client:
            with pytest.raises(ET.ParseError):
                client.get_report("pages")


class TestReportsAPI:
    @respx.mock
    def test_visitors_list(self) -> None:
        route = respx.get(f"{BASE_URL}{ENDPOINT}").mock(
            return_value=httpx.Response(200, content=_fixture("visitors"))
        )

        with ClickyClient(CREDENTIALS) as client:
            result = client.reports.visitors_list(date="yesterday")

        assert all(isinstance(r, VisitorResponse) for r in result)
        assert result[0].geolocation == "Tampa, FL, USA"
        params = route.calls.last.request.url.params
        assert params["type"] == "visitors-list"
        assert params["date"] == "yesterday"

    @respx.mock
    def test_actions_list(self) -> None:
        respx.get(f"{BASE_URL}{ENDPOINT}").mock(
            return_value=httpx.Response(200, content=_fixture("actions"))
        )

        with ClickyClient(CREDENTIALS) as client:
            result = client.reports.actions_list()

        assert [type(r) for r in result] == [ActionResponse, ActionResponse]

    @respx.mock
    def test_searches_recent(self) -> None:
        route = respx.get(f"{BASE_URL}{ENDPOINT}").mock(
            return_value=httpx.Response(200, content=_fixture("searches_recent"))
        )

        with ClickyClient(CREDENTIALS) as client:
            result = client.reports.searches_recent({"limit": 500})

        assert isinstance(result[0], ChronoResponse)
        params = route.calls.last.request.url.params
        assert params["type"] == "searches-recent"
        assert params["limit"] == "500"

    @respx.mock
    def test_dashed_identifier(self) -> None:
        route = respx.get(f"{BASE_URL}{ENDPOINT}").mock(
            return_value=httpx.Response(200, content=_fixture("tally"))
        )

        with ClickyClient(CREDENTIALS) as client:
            client.reports.web_browsers()
            client.reports.feedburner_subscribers()

        assert [c.request.url.params["type"] for c in route.calls] == [
            "web-browsers",
            "feedburner-subscribers",
        ]
