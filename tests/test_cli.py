"""Tests for the featureboard CLI."""

from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


def test_start_runs_uvicorn():
    with patch("cli.main.uvicorn.run") as run:
        result = runner.invoke(app, ["start", "--host", "127.0.0.1", "--port", "9001"])

    assert result.exit_code == 0, result.output
    assert "127.0.0.1:9001" in result.output
    run.assert_called_once()
    args, kwargs = run.call_args
    assert args == ("backend.app.main:app",)
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9001
    assert kwargs["reload"] is False


def test_init_db_creates_schema():
    with patch("backend.app.db.init_db", new_callable=AsyncMock) as init_db:
        result = runner.invoke(app, ["init-db"])

    assert result.exit_code == 0, result.output
    init_db.assert_awaited_once()
    assert "Database ready" in result.output
