from click.testing import CliRunner

from zoom_mcp import cli


def test_transport_failure_exits_nonzero(monkeypatch):
    async def broken(server):
        raise OSError("stdin closed")

    monkeypatch.setattr(cli, "run_stdio", broken)
    result = CliRunner().invoke(cli.main, ["--transport", "stdio"], env={"ZOOM_ACCESS_TOKEN": "t"})
    assert result.exit_code == 1


def test_stdio_runs_server(monkeypatch):
    seen = {}

    async def fake_run(server):
        seen["name"] = server.name

    monkeypatch.setattr(cli, "run_stdio", fake_run)
    result = CliRunner().invoke(cli.main, [], env={"ZOOM_ACCESS_TOKEN": "", "MCP_TRANSPORT": "stdio", "SERVICE_NAME": ""})
    assert result.exit_code == 0
    assert seen["name"] == "zoom-mcp-server"


def test_rejects_unknown_transport():
    result = CliRunner().invoke(cli.main, ["--transport", "carrier-pigeon"])
    assert result.exit_code == 2


def test_sse_serves_app_with_uvicorn(monkeypatch):
    import uvicorn

    seen = {}

    def fake_run(app, host, port, log_level):
        seen.update(app=app, host=host, port=port, log_level=log_level)

    monkeypatch.setattr(uvicorn, "run", fake_run)
    result = CliRunner().invoke(
        cli.main,
        ["-t", "sse", "--host", "127.0.0.1", "--port", "9123"],
        env={"ZOOM_ACCESS_TOKEN": "t", "LOG_LEVEL": ""},
    )
    assert result.exit_code == 0, result.output
    assert seen["host"] == "127.0.0.1"
    assert seen["port"] == 9123
    assert seen["log_level"] == "info"
    paths = {getattr(r, "path", None) for r in seen["app"].routes}
    assert "/sse" in paths
    assert "/messages" in paths


def test_bad_environment_is_reported(monkeypatch):
    result = CliRunner().invoke(cli.main, [], env={"MCP_TRANSPORT": "http"})
    assert result.exit_code == 1
    assert "MCP_TRANSPORT must be one of stdio, sse" in result.output


def test_bad_port_is_reported():
    result = CliRunner().invoke(cli.main, [], env={"MCP_TRANSPORT": "", "PORT": "eighty"})
    assert result.exit_code == 1
    assert "PORT must be a number, got 'eighty'" in result.output
