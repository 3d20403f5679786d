"""
FB2SCI - Converter from Yamaha FB-01 voice banks to SCI patch resources.

A small CLI for building Sierra SCI0 FB-01 patch files from bank dumps.
"""

import typer
from rich.console import Console

from cli.commands.info import info
from cli.commands.convert import convert
from fb2sci import __version__

console = Console()

# Main app
app = typer.Typer(
    name="fb2sci",
    help="Convert Yamaha FB-01 voice banks to Sierra SCI patch resources.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="convert")(convert)
app.command(name="info")(info)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]fb2sci[/bold] version {__version__}")
    console.print("[dim]FB-01 sysex bank to SCI patch resource converter[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
) -> None:
    """
    FB2SCI - Build SCI FB-01 patch resources from FB-01 voice banks.

    [bold]Quick Start:[/bold]

        fb2sci convert bank_a.syx bank_b.syx patch.002

    [bold]Inspection:[/bold]

        fb2sci info bank_a.syx          # Validate and list voices
        fb2sci info bank_b.syx --hex    # Include voice data dump

    Use --help with any command for more details.
    """
    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
