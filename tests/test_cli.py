"""Tests for the command-line interface."""

import json

import pytest

from tinylink.cli import main


@pytest.fixture
def run_cli(tmp_path, capsys):
    """Run the CLI against a file store in tmp_path and parse its JSON output."""
    async def _run(*argv):
        code = await main(["--backend", "file", "--storage-path", str(tmp_path), *argv])
        captured = capsys.readouterr()
        return code, json.loads(captured.out)
    return _run


@pytest.mark.asyncio
class TestCli:
    async def test_shorten_and_get(self, run_cli):
        code, created = await run_cli("shorten", "example.com/page", "--code", "clicode1")

        assert code == 0
        assert created["status"] == 201
        assert created["link"]["originalUrl"] == "https://example.com/page"

        code, fetched = await run_cli("get", "clicode1")
        assert code == 0
        assert fetched["link"]["code"] == "clicode1"

    async def test_conflict_exit_code(self, run_cli):
        await run_cli("shorten", "https://example.com", "--code", "clicode2")

        code, result = await run_cli("shorten", "https://example.org", "--code", "clicode2")

        assert code == 1
        assert result == {"success": False, "status": 409, "error": "Short code already in use."}

    async def test_invalid_url(self, run_cli):
        code, result = await run_cli("shorten", "nope")

        assert code == 1
        assert result["status"] == 400

    async def test_failure_logs_stay_on_stderr(self, tmp_path, capsys):
        code = await main(["--backend", "file", "--storage-path", str(tmp_path), "click", "missing1"])
        captured = capsys.readouterr()

        assert code == 1
        assert json.loads(captured.out) == {"success": False, "status": 404, "error": "Link not found"}
        assert "[WARNING]" in captured.err

    async def test_list_click_stats_delete(self, run_cli):
        await run_cli("shorten", "https://example.com/a", "--code", "aaaaaa1")
        await run_cli("shorten", "https://other.org/b", "--code", "bbbbbb1")

        code, listed = await run_cli("list", "--search", "other")
        assert code == 0
        assert listed["count"] == 1
        assert listed["links"][0]["code"] == "bbbbbb1"

        code, clicked = await run_cli("click", "bbbbbb1")
        assert code == 0
        assert clicked["original_url"] == "https://other.org/b"

        code, stats = await run_cli("stats", "bbbbbb1")
        assert stats["link"]["clicks"] == 1
        assert sum(point["clicks"] for point in stats["history"]) == 1

        code, deleted = await run_cli("delete", "bbbbbb1")
        assert code == 0
        assert deleted["deleted"] is True

        code, missing = await run_cli("get", "bbbbbb1")
        assert code == 1
        assert missing["status"] == 404

    async def test_health(self, run_cli):
        code, result = await run_cli("health")

        assert code == 0
        assert result["health"]["ok"] is True

    async def test_redis_without_url(self, capsys, monkeypatch):
        monkeypatch.delenv("REDIS_URL", raising=False)

        code = await main(["--backend", "redis", "health"])

        assert code == 1
        assert "REDIS_URL" in json.loads(capsys.readouterr().out)["error"]

    async def test_no_command_prints_help(self, capsys):
        assert await main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()
