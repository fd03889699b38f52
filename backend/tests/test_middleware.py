"""
NoteKeeper Backend - Middleware Tests
=======================================
"""

import logging

import pytest

from notekeeper.middleware.logging import level_for_status


class TestLevelForStatus:

    @pytest.mark.parametrize(
        "status, level",
        [(200, logging.INFO), (201, logging.INFO), (400, logging.WARNING),
         (404, logging.WARNING), (500, logging.ERROR)],
    )
    def test_levels(self, status, level):
        assert level_for_status(status) == level


class TestRequestLogging:

    @pytest.mark.asyncio
    async def test_access_line_logged(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="notekeeper.access"):
            await test_client.get("/notes", headers={"X-Request-ID": "trace01"})

        records = [r for r in caplog.records if r.name == "notekeeper.access"]
        assert len(records) == 1
        assert records[0].path == "/notes"
        assert records[0].status == 200
        assert records[0].request_id == "trace01"

    @pytest.mark.asyncio
    async def test_health_not_logged(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="notekeeper.access"):
            await test_client.get("/health")

        assert not [r for r in caplog.records if r.name == "notekeeper.access"]
