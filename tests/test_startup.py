"""Tests for the startup gate and the process entrypoint."""

import logging

import pytest

import main
from conftest import FlakyDatabase
from core import startup
from core.errors import ConnectivityError


class RecordingSleep:
    def __init__(self):
        self.delays = []

    async def __call__(self, seconds):
        self.delays.append(seconds)


class FakeServer:
    instances = []

    def __init__(self, config):
        self.config = config
        self.served = False
        FakeServer.instances.append(self)

    async def serve(self):
        self.served = True


@pytest.mark.asyncio
async def test_ready_on_first_attempt():
    sleep = RecordingSleep()

    retries = await startup.wait_for_ready(FlakyDatabase(failures=0), max_attempts=3, delay_ms=100, sleep=sleep)

    assert retries == 0
    assert sleep.delays == []


@pytest.mark.asyncio
async def test_three_failures_then_ready():
    database = FlakyDatabase(failures=3)
    sleep = RecordingSleep()

    retries = await startup.wait_for_ready(database, max_attempts=5, delay_ms=250, sleep=sleep)

    assert retries == 3
    assert database.attempts == 4
    assert sleep.delays == [0.25, 0.25, 0.25]


@pytest.mark.asyncio
async def test_gives_up_after_max_attempts():
    database = FlakyDatabase(failures=100)
    sleep = RecordingSleep()

    with pytest.raises(ConnectivityError):
        await startup.wait_for_ready(database, max_attempts=2, delay_ms=10, sleep=sleep)

    assert database.attempts == 2
    assert sleep.delays == [0.01]


@pytest.mark.asyncio
async def test_rejects_zero_attempts():
    with pytest.raises(ValueError):
        await startup.wait_for_ready(FlakyDatabase(failures=0), max_attempts=0)


def _patch_process(monkeypatch, database, attempts):
    monkeypatch.setenv("DB_CONNECT_ATTEMPTS", str(attempts))
    monkeypatch.setenv("DB_CONNECT_DELAY_MS", "0")
    monkeypatch.setenv("PORT", "4000")
    monkeypatch.setattr(main.Database, "from_settings", classmethod(lambda cls, settings: database))
    FakeServer.instances = []
    monkeypatch.setattr(main.uvicorn, "Server", FakeServer)


def test_main_serves_after_retries(monkeypatch):
    database = FlakyDatabase(failures=3)
    _patch_process(monkeypatch, database, attempts=5)

    main.main()

    assert database.attempts == 4
    assert [server.served for server in FakeServer.instances] == [True]
    assert database.closed


def test_main_exits_1_when_database_never_answers(monkeypatch):
    database = FlakyDatabase(failures=1000)
    _patch_process(monkeypatch, database, attempts=2)

    with pytest.raises(SystemExit) as excinfo:
        main.main()

    assert excinfo.value.code == 1
    assert database.attempts == 2
    assert FakeServer.instances == []
    assert database.closed


class FailingServer(FakeServer):
    async def serve(self):
        raise OSError("address already in use")


def test_stop_is_logged_only_after_server_returns(monkeypatch, caplog):
    _patch_process(monkeypatch, FlakyDatabase(failures=0), attempts=1)

    with caplog.at_level(logging.INFO, logger="main"):
        main.main()

    messages = [r.getMessage() for r in caplog.records if r.name == "main"]
    assert messages == [
        "Database ready, starting restaurant service on port 4000",
        "Restaurant service stopped",
    ]


def test_bind_failure_does_not_claim_service_ran(monkeypatch, caplog):
    database = FlakyDatabase(failures=0)
    _patch_process(monkeypatch, database, attempts=1)
    monkeypatch.setattr(main.uvicorn, "Server", FailingServer)

    with caplog.at_level(logging.INFO, logger="main"):
        with pytest.raises(OSError):
            main.main()

    messages = [r.getMessage() for r in caplog.records if r.name == "main"]
    assert "Restaurant service stopped" not in messages
    assert database.closed
