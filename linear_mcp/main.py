"""linear-mcp CLI."""

import asyncio
from typing import Annotated

import typer
from rich import print as rprint
from rich.table import Table

from linear_mcp.logging import setup_logging
from linear_mcp.router import registry
from linear_mcp.server import serve
from linear_mcp.settings import CONFIG_PATH, get_settings

app = typer.Typer(help="linear-mcp: Linear issues, teams, projects and labels as MCP tools")

ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Profile name from ~/.config/linear-mcp/config.toml"),
]
LogLevelOpt = Annotated[
    str,
    typer.Option("--log-level", help="Diagnostic log level (written to stderr)"),
]


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context, profile: ProfileOpt = None, log_level: LogLevelOpt = "INFO") -> None:
    """Run the stdio server when no command is given."""
    if ctx.invoked_subcommand is None:
        serve_cmd(profile=profile, log_level=log_level)


@app.command("serve")
def serve_cmd(profile: ProfileOpt = None, log_level: LogLevelOpt = "INFO") -> None:
    """Serve the Linear tools over MCP on stdin/stdout."""
    settings = get_settings(profile)
    logger = setup_logging(log_level.upper())
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Shutting down")
    except Exception:
        logger.error("Server error", exc_info=True)
        raise typer.Exit(1) from None


@app.command("tools")
def tools_cmd() -> None:
    """List the tools this server exposes."""
    table = Table(title="Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Required")
    table.add_column("Description")

    for tool_def in registry():
        tool = tool_def.tool
        table.add_row(tool.name, ", ".join(tool.inputSchema.get("required", [])) or "-", tool.description or "")

    rprint(table)


@app.command("config-show")
def config_show(profile: ProfileOpt = None) -> None:
    """Show resolved configuration (masks credentials)."""
    settings = get_settings(profile, require_key=False)

    def mask(val: str | None, prefix: str = "") -> str:
        if val is None:
            return "[dim](not set)[/dim]"
        if len(val) <= 5:
            return "***"
        return f"{prefix}...{val[-5:]}"

    table = Table(title="linear-mcp Configuration")
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("config_file", str(CONFIG_PATH))
    table.add_row("api_key", mask(settings.api_key.get_secret_value() if settings.api_key else None, prefix="lin_api_"))
    table.add_row("team_name", settings.team_name or "[dim](not set)[/dim]")
    table.add_row("server_name", settings.server_name)
    table.add_row("api_url", settings.api_url)
    table.add_row("timeout", str(settings.timeout))

    rprint(table)

