"""Create the main Typer CLI app."""

import click
import typer

from agentlink.api.config.AgentLinkConfig import AgentLinkConfig
from agentlink.api.config.cmd_version import cmd_version
from agentlink.api.link.cmd_install import cmd_install
from agentlink.api.link.cmd_status import cmd_status
from agentlink.api.link.cmd_uninstall import cmd_uninstall
from agentlink.cli._handle_stage_result import _handle_stage_result
from agentlink.cli.display import CLIDisplay
from agentlink.utils.logger import configure_logging


def _version_callback(value: bool) -> None:
    """Print the package version and stop before any command runs."""
    if not value:
        return
    result = cmd_version()
    list(result.progress_callback(result))
    typer.echo(f"agentlink {result.output.get('version', 'unknown')}")
    raise typer.Exit(0 if result.success else 1)


def _create_app() -> typer.Typer:
    """Create and configure the agentlink Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Install AGENT.md for Claude Code and Gemini CLI globally.",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command(
        context_settings={"help_option_names": ["-h", "--help"]},
        epilog=(
            "Examples: agentlink (install from ./AGENT.md); "
            "agentlink --source ~/agent/AGENT.md; agentlink --uninstall"
        )
    )
    def main_cmd(
        ctx: typer.Context,
        source: str | None = typer.Option(
            None, "--source", metavar="PATH", help="Path to AGENT.md (default: ./AGENT.md)"
        ),
        uninstall: bool = typer.Option(False, "--uninstall", help="Remove installed symlinks"),
        status: bool = typer.Option(False, "--status", help="Show where each target currently points"),
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        version: bool = typer.Option(  # noqa: ARG001
            False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
        ),
    ) -> None:
        """Install AGENT.md for Claude Code and Gemini CLI globally."""
        if display not in ("json", "yaml"):
            raise click.BadParameter(f"must be 'json' or 'yaml', got '{display}'", ctx=ctx, param_hint="'--display'")
        if uninstall and status:
            raise click.UsageError("--uninstall and --status cannot be combined", ctx=ctx)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        try:
            config = AgentLinkConfig.load()
        except ValueError as e:
            CLIDisplay().error(str(e))
            raise typer.Exit(1) from e
        configure_logging(level=config.log.level)

        if uninstall:
            _handle_stage_result(cmd_uninstall)()
        elif status:
            _handle_stage_result(cmd_status)(source)
        else:
            _handle_stage_result(cmd_install)(source if source is not None else config.source)

    return app
