"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from agentlink.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        exit_code = app(argv, prog_name="agentlink", standalone_mode=False)
    except click.exceptions.UsageError as e:
        # Parser errors such as a missing option value carry no context
        if e.ctx is None:
            e.ctx = click.Context(typer.main.get_command(app), info_name="agentlink")
        e.show()
        return 1
    except click.exceptions.Abort:
        typer.echo("Aborted!", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0
