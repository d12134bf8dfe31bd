"""CLI entry point for wordpress-mcp-proxy."""

import sys
from datetime import datetime

from rich.console import Console

from app import create_app
from core.config import Config, load_config
from core.exceptions import ConfigurationError
from ui.dashboard import Dashboard
from ui.log_utils import CLI_LOG_FILE, clear_logs, write_cli_log

console = Console()


def main():
    """Main CLI entry point."""
    try:
        config = load_config()
    except ConfigurationError as e:
        console.print(f"[red][ERROR][/red] {e}")
        sys.exit(1)

    # Handle CLI arguments
    if len(sys.argv) > 1:
        arg = sys.argv[1]

        if arg in ("--check", "--auth"):
            _print_credential_status(config)
            return

        if arg == "--config":
            _print_config(config)
            return

        if arg in ("--help", "-h"):
            _print_help()
            return

    _print_credential_status(config)
    if not config.wordpress.is_configured:
        console.print("[yellow]Warning:[/yellow] /wp-json/* will answer 500 until credentials are set")

    # Clear previous logs and start dashboard
    clear_logs()
    dashboard = Dashboard(config)

    import uvicorn

    app = create_app(config, dashboard)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.proxy.host,
        port=config.proxy.port,
        log_level="warning",
    )
    server = uvicorn.Server(uvicorn_config)

    dashboard.start()
    start_time = datetime.now()
    write_cli_log("STARTUP", "Proxy started", port=config.proxy.port)
    try:
        server.run()
    finally:
        duration = datetime.now() - start_time
        write_cli_log("SHUTDOWN", "Proxy stopped", duration=str(duration))
        dashboard.stop()


def _print_credential_status(config: Config) -> None:
    """Print which WordPress settings are present; secrets are never shown."""
    wp = config.wordpress
    console.print(f"[bold]WP_API_URL:[/bold] {wp.api_url or '[red]Not set[/red]'}")
    for name, value in (("WP_API_USERNAME", wp.username), ("WP_API_PASSWORD", wp.password)):
        status = "[green]Set[/green]" if value else "[red]Not set[/red]"
        console.print(f"[bold]{name}:[/bold] {status}")


def _print_config(config: Config) -> None:
    """Print resolved settings with the password masked."""
    data = config.model_dump()
    if data["wordpress"]["password"]:
        data["wordpress"]["password"] = "***"
    console.print_json(data=data)
    console.print(f"[bold]Log file:[/bold] {CLI_LOG_FILE}")


def _print_help():
    """Print help message."""
    help_text = """
[bold cyan]WordPress MCP Proxy[/bold cyan]

Forwards /wp-json/* to a WordPress site with Basic Auth and exposes a
wp_request tool over JSON-RPC at /mcp.

[bold]Usage:[/bold]
    wordpress-mcp-proxy              Start with live dashboard
    wordpress-mcp-proxy --check      Check credential status
    wordpress-mcp-proxy --config     Show resolved settings
    wordpress-mcp-proxy --help       Show this help

[bold]Environment:[/bold]
    WP_API_URL, WP_API_USERNAME, WP_API_PASSWORD   WordPress origin and Application Password
    PORT (default 3000), HOST (default 0.0.0.0)
    WP_API_TIMEOUT                                 Upstream timeout in seconds (default: none)
    LOG_REQUESTS                                   Write per-request JSON logs to ./logs
"""
    console.print(help_text)


if __name__ == "__main__":
    main()
