"""Tests for programmatic server start/stop"""

import asyncio

from locations_api import main
from locations_api.config import Settings
from locations_api.server import close_server, run_server


def test_run_and_close_server(monkeypatch):
    """Test the handle returned by run_server stops the server"""

    calls = []

    async def fake_init_db():
        calls.append("init")

    async def fake_dispose_db():
        calls.append("dispose")

    monkeypatch.setattr(main, "init_db", fake_init_db)
    monkeypatch.setattr(main, "dispose_db", fake_dispose_db)

    async def scenario():
        handle = await run_server(Settings(HOST="127.0.0.1", PORT=0))
        assert handle.server.started
        await close_server(handle)
        return handle

    handle = asyncio.run(scenario())

    assert handle.task.done()
    assert calls == ["init", "dispose"]
