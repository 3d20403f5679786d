"""
Convert command - build an SCI FB-01 patch resource from two bank dumps.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from fb2sci.utils.validation import FB2SCIError, UserAbortedError

console = Console()
app = typer.Typer()


def confirm_overwrite(output: Path) -> None:
    """
    Ask before replacing an existing output file.

    Raises:
        UserAbortedError: If the user declines
    """
    if not output.exists():
        return

    if not typer.confirm("Output file already exists. Do you want to overwrite it?"):
        raise UserAbortedError(f"not overwriting {output}", output)


@app.command()
def convert(
    bank_a: Path = typer.Argument(..., help="FB-01 bank A sysex dump (.syx)"),
    bank_b: Path = typer.Argument(..., help="FB-01 bank B sysex dump (.syx)"),
    output: Path = typer.Argument(..., help="Output SCI patch file (e.g. patch.002)"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Overwrite output without asking"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed progress"),
) -> None:
    """
    Convert two FB-01 voice banks into an SCI FB-01 patch resource.

    Both dumps must be 6363-byte bank dumps sent by the FB-01, with
    bank A and bank B in that order.

    Examples:

        fb2sci convert bank_a.syx bank_b.syx patch.002

        fb2sci convert bank_a.syx bank_b.syx patch.002 --yes
    """
    from fb2sci import __version__
    from fb2sci.converters.fb01_to_sci import FB01ToSCIConverter

    console.print(f"\n[bold]FB2SCI[/bold]  v{__version__}\n")

    converter = FB01ToSCIConverter()

    try:
        # Both banks are validated and converted before the output is touched
        data = converter.convert(bank_a, bank_b)

        if not yes:
            confirm_overwrite(output)

        converter.writer.write_bytes(data, output)

    except UserAbortedError:
        console.print("Aborting operation...")
        raise typer.Exit(1)

    except FB2SCIError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    if verbose:
        for bank in (converter.bank_a, converter.bank_b):
            console.print(
                f"[dim]{bank.role.display_name}: {bank.source} "
                f"({len(bank)} voices, {len(bank.raw_data)} -> "
                f"{len(bank.raw_data) // 2} bytes)[/dim]"
            )
            if bank.bad_checksums:
                console.print(
                    f"[yellow]  Checksum mismatch in voices: "
                    f"{', '.join(str(i + 1) for i in bank.bad_checksums)}[/yellow]"
                )

    console.print("[green]SCI FB-01 Patch created successfully![/green]")
    console.print(f"[dim]Output size: {len(data)} bytes[/dim]")


if __name__ == "__main__":
    app()
