"""
Info command - validate one FB-01 bank dump and show its voices.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from cli.display.tables import display_bank_info
from cli.display.hex_view import display_hex_dump
from fb2sci.utils.validation import FB2SCIError

console = Console()
app = typer.Typer()


@app.command()
def info(
    bank: Path = typer.Argument(..., help="FB-01 bank sysex dump (.syx)"),
    role: Optional[str] = typer.Option(
        None, "--role", "-r", help="Expected bank: 'a' or 'b' (default: detect from header)"
    ),
    names: bool = typer.Option(True, "--names/--no-names", help="Show voice names"),
    hex_dump: bool = typer.Option(False, "--hex", "-x", help="Dump denibblized voice data"),
    voices: int = typer.Option(4, "--voices", "-n", help="Number of voices in the hex dump"),
) -> None:
    """
    Validate an FB-01 voice bank dump and show its voices.

    Examples:

        fb2sci info bank_a.syx

        fb2sci info bank_b.syx --role b --hex
    """
    from fb2sci.formats.fb01.reader import FB01BankReader
    from fb2sci.models.bank import BankRole
    from fb2sci.models.patch import PatchResource
    from fb2sci.utils.nibble import denibblize

    if not bank.exists():
        console.print(f"[red]Error: file {bank} not found[/red]")
        raise typer.Exit(1)

    if role is None:
        bank_role = FB01BankReader.detect_role(bank)
        if bank_role is None:
            console.print(
                f"[red]Error: {bank} is not a valid FB-01 sysex bank file "
                f"(missing expected sysex header).[/red]"
            )
            raise typer.Exit(1)
    else:
        try:
            bank_role = BankRole(role.lower())
        except ValueError:
            console.print(f"[red]Error: Unknown bank role: {role} (use 'a' or 'b')[/red]")
            raise typer.Exit(1)

    try:
        loaded = FB01BankReader.read(bank, bank_role)
    except FB2SCIError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    data = denibblize(loaded.raw_data)
    voice_names = PatchResource.names_in(data)

    display_bank_info(loaded, voice_names if names else None)

    if hex_dump:
        display_hex_dump(
            data,
            title=f"{bank_role.display_name} Voice Data",
            block_size=PatchResource.VOICE_SIZE,
            block_labels=voice_names,
            max_blocks=voices,
        )


if __name__ == "__main__":
    app()
