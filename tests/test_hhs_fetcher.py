"""Tests for the HHS static-table fetcher."""

import asyncio

import aiohttp
import pytest

from breach_db.sources.base import ConfigException, FetchException, ParseException
from breach_db.sources.federal.hhs import HHS_CONFIG, HHSBreachFetcher
from tests.fakes import FakeResponse, client_session_factory, hhs_html


class TestHHSParsing:
    """Report table extraction."""

    def test_records_follow_header_row(self, hhs_headers, hhs_rows):
        fetcher = HHSBreachFetcher()

        records = fetcher.parse_report_table(hhs_html(hhs_headers, hhs_rows))

        assert len(records) == 3
        assert records[0] == {
            "Name of Covered Entity": "Acme Health",
            "State": "CA",
            "Covered Entity Type": "Healthcare Provider",
            "Individuals Affected": "1200",
        }
        assert [r["Name of Covered Entity"] for r in records] == [
            "Acme Health", "Blue Valley Clinic", "North Plan Inc",
        ]

    def test_every_record_shares_header_keys(self, hhs_headers, hhs_rows):
        records = HHSBreachFetcher().parse_report_table(hhs_html(hhs_headers, hhs_rows))

        assert all(set(r) == set(hhs_headers) for r in records)

    def test_missing_marker_table_raises(self):
        html = "<html><body><table><tr><th>Other</th></tr></table></body></html>"

        with pytest.raises(ParseException):
            HHSBreachFetcher().parse_report_table(html)

    def test_no_cap_on_rows(self):
        rows = [[f"Entity {i}", "CA"] for i in range(40)]

        records = HHSBreachFetcher().parse_report_table(hhs_html(["Name", "State"], rows))

        assert len(records) == 40


class TestHHSFetch:
    """HTTP handling through aiohttp."""

    async def test_fetch_sends_browser_user_agent_and_timeout(self):
        factory = client_session_factory(FakeResponse(200, hhs_html(["Name", "State"], [["Acme", "CA"]])))
        fetcher = HHSBreachFetcher(session_factory=factory)

        records = await fetcher.fetch_records()

        assert records == [{"Name": "Acme", "State": "CA"}]
        session = factory.sessions[0]
        assert session.requested == [HHS_CONFIG["url"]]
        assert "Mozilla/5.0" in session.kwargs["headers"]["User-Agent"]
        assert session.kwargs["timeout"].total == 30
        assert session.closed

    async def test_non_200_raises_fetch_exception(self):
        factory = client_session_factory(FakeResponse(503, "unavailable"))
        fetcher = HHSBreachFetcher(session_factory=factory)

        with pytest.raises(FetchException) as exc_info:
            await fetcher.fetch_records()

        assert exc_info.value.status_code == 503
        assert str(exc_info.value).startswith("[hhs]")

    @pytest.mark.parametrize("error", [
        aiohttp.ClientConnectionError("connection reset"),
        asyncio.TimeoutError(),
    ])
    async def test_network_errors_raise_fetch_exception(self, error):
        fetcher = HHSBreachFetcher(session_factory=client_session_factory(error=error))

        with pytest.raises(FetchException):
            await fetcher.fetch_records()

    async def test_run_reports_success(self, hhs_headers, hhs_rows):
        factory = client_session_factory(FakeResponse(200, hhs_html(hhs_headers, hhs_rows)))

        result = await HHSBreachFetcher(session_factory=factory).run()

        assert result.success
        assert result.error is None
        assert len(result) == 3

    async def test_run_turns_errors_into_failed_result(self):
        factory = client_session_factory(error=aiohttp.ClientConnectionError("refused"))

        result = await HHSBreachFetcher(session_factory=factory).run()

        assert not result.success
        assert result.records == ()
        assert "refused" in result.error

    async def test_run_with_header_only_table_fails(self):
        factory = client_session_factory(FakeResponse(200, hhs_html(["Name"], [])))

        result = await HHSBreachFetcher(session_factory=factory).run()

        assert not result.success
        assert "No records extracted" in result.error


class TestHHSConfig:

    def test_missing_required_field(self):
        config = dict(HHS_CONFIG)
        del config["table_selector"]

        with pytest.raises(ConfigException) as exc_info:
            HHSBreachFetcher(config)

        assert exc_info.value.config_key == "table_selector"
