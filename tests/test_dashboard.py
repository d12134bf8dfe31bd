"""Tests for the live dashboard's bookkeeping (no terminal required)."""

import pytest
from rich.console import Console

import ui.dashboard as dashboard_module
from core.config import load_config
from ui.dashboard import Dashboard


@pytest.fixture
def dashboard(monkeypatch) -> Dashboard:
    lines: list[tuple] = []
    monkeypatch.setattr(dashboard_module, "write_cli_log", lambda *a, **kw: lines.append((a, kw)))
    return Dashboard(load_config({"WP_API_URL": "https://blog.example.com"}))


def test_counts_and_keeps_recent_rows(dashboard: Dashboard) -> None:
    for i in range(12):
        dashboard.log_proxy("GET", f"https://blog.example.com/wp-json/wp/v2/posts/{i}")
    dashboard.log_rpc("tools/call", 1, tool="wp_request")
    dashboard.log_error("proxy", 500, "x" * 80)

    assert dashboard._request_count == {"proxy": 12, "mcp": 1, "errors": 1}
    assert len(dashboard._proxied) == 8
    assert dashboard._proxied[0].target.endswith("/posts/11")
    assert dashboard._rpc_calls[0].target == "tools/call (wp_request)"
    assert dashboard._errors == ["proxy 500: " + "x" * 50 + "..."]


def test_layout_renders(dashboard: Dashboard) -> None:
    dashboard.log_proxy("POST", "https://blog.example.com/wp-json/wp/v2/posts")
    console = Console(record=True, width=120)

    console.print(dashboard._build_layout())

    text = console.export_text()
    assert "WordPress MCP Proxy" in text
    assert "credentials missing" in text
