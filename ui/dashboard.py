"""Real-time CLI dashboard for proxy monitoring."""

from datetime import datetime
from threading import Lock
from typing import Any

from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import Config
from ui.log_utils import write_cli_log

console = Console()


class RequestInfo:
    """Info about a single request."""

    def __init__(self, method: str, target: str, timestamp: datetime):
        self.method = method
        self.target = target[:80] + "..." if len(target) > 80 else target
        self.timestamp = timestamp


class Dashboard:
    """Real-time dashboard showing proxied REST calls and MCP calls."""

    def __init__(self, config: Config):
        self.config = config
        self._lock = Lock()
        self._proxied: list[RequestInfo] = []
        self._rpc_calls: list[RequestInfo] = []
        self._max_rows = 8
        self._request_count = {"proxy": 0, "mcp": 0, "errors": 0}
        self._errors: list[str] = []
        self._live: Live | None = None

    def start(self) -> "Dashboard":
        """Start the live dashboard."""
        self._live = Live(
            self._build_layout(),
            console=console,
            refresh_per_second=4,
            screen=False,
        )
        self._live.start()
        return self

    def stop(self) -> None:
        """Stop the live dashboard."""
        if self._live:
            self._live.stop()

    def log_proxy(self, method: str, url: str) -> None:
        """Log a request forwarded to WordPress."""
        with self._lock:
            self._request_count["proxy"] += 1
            self._proxied.insert(0, RequestInfo(method, url, datetime.now()))
            self._proxied = self._proxied[: self._max_rows]
            write_cli_log("PROXY", f"{method} -> {url}")
            self._refresh()

    def log_rpc(
        self,
        method: str | None,
        request_id: Any,
        *,
        tool: str | None = None,
    ) -> None:
        """Log a JSON-RPC call on /mcp."""
        with self._lock:
            self._request_count["mcp"] += 1
            target = f"{method} ({tool})" if tool else str(method)
            self._rpc_calls.insert(0, RequestInfo(str(request_id), target, datetime.now()))
            self._rpc_calls = self._rpc_calls[: self._max_rows]
            write_cli_log("MCP", str(method), id=request_id, tool=tool or "-")
            self._refresh()

    def log_error(self, route: str, status: int, message: str) -> None:
        """Log an error."""
        with self._lock:
            self._request_count["errors"] += 1
            truncated = message[:50] + "..." if len(message) > 50 else message
            self._errors.insert(0, f"{route} {status}: {truncated}")
            self._errors = self._errors[:3]
            write_cli_log("ERROR", message[:200], route=route, status=status)
            self._refresh()

    def _refresh(self) -> None:
        """Refresh the display."""
        if self._live:
            self._live.update(self._build_layout())

    def _build_layout(self) -> Layout:
        """Build the dashboard layout."""
        layout = Layout()

        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=5),
        )

        layout["body"].split_row(
            Layout(name="proxy", ratio=2),
            Layout(name="mcp", ratio=1),
        )

        layout["header"].update(self._build_header())
        layout["proxy"].update(
            self._build_table(
                self._proxied,
                ("Method", "URL"),
                "[blue]WordPress REST[/blue]",
                "blue",
                "No proxied requests yet...",
            )
        )
        layout["mcp"].update(
            self._build_table(
                self._rpc_calls,
                ("Id", "Method"),
                "[magenta]MCP[/magenta]",
                "magenta",
                "No MCP calls yet...",
            )
        )
        layout["footer"].update(self._build_footer())

        return layout

    def _build_header(self) -> Panel:
        """Build header with stats."""
        wp = self.config.wordpress
        stats = Text()
        stats.append("WordPress MCP Proxy", style="bold cyan")
        stats.append("  |  ")
        stats.append(f"REST: {self._request_count['proxy']}", style="blue")
        stats.append("  |  ")
        stats.append(f"MCP: {self._request_count['mcp']}", style="magenta")
        stats.append("  |  ")
        stats.append(f"Errors: {self._request_count['errors']}", style="red")
        stats.append("  |  ")
        stats.append(f"Port: {self.config.proxy.port}", style="dim")
        stats.append("  |  ")
        if wp.is_configured:
            stats.append(wp.api_url or "", style="green")
        else:
            stats.append("credentials missing", style="yellow")

        return Panel(stats, style="cyan")

    def _build_table(
        self,
        rows: list[RequestInfo],
        columns: tuple[str, str],
        title: str,
        style: str,
        empty: str,
    ) -> Panel:
        if rows:
            table = Table(show_header=True, header_style="bold", expand=True, box=None)
            table.add_column("Time", style="dim", width=8)
            table.add_column(columns[0], width=8)
            table.add_column(columns[1], ratio=1)
            for info in rows:
                table.add_row(info.timestamp.strftime("%H:%M:%S"), info.method, info.target)
            content: Table | Text = table
        else:
            content = Text(empty, style="dim")

        return Panel(content, title=title, border_style=style)

    def _build_footer(self) -> Panel:
        """Build footer with errors and help."""
        if self._errors:
            error_text = Text()
            for err in self._errors:
                error_text.append("! ", style="red bold")
                error_text.append(err + "\n", style="red")
            content = error_text
        else:
            port = self.config.proxy.port
            content = Text(
                f"REST: http://localhost:{port}/wp-json/...  MCP: http://localhost:{port}/mcp",
                style="dim",
            )

        return Panel(content, title="[dim]Status[/dim]", border_style="dim")
