"""
Rich table displays for bank information.
"""

from typing import List, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box
from rich.markup import escape

from fb2sci.models.bank import Bank


console = Console()


def display_bank_info(bank: Bank, voice_names: Optional[List[str]] = None) -> None:
    """Display FB-01 bank information with Rich formatting."""

    bad = bank.bad_checksums
    status = "[green]Valid[/green]"
    checksums = "[green]All OK[/green]" if not bad else f"[yellow]{len(bad)} mismatched[/yellow]"

    header_content = f"""[bold]File:[/bold] {bank.source}
[bold]Bank:[/bold] {bank.role.display_name}
[bold]Header:[/bold] {" ".join(f"{b:02X}" for b in bank.role.signature)}
[bold]Status:[/bold] {status}
[bold]Voices:[/bold] {len(bank)}
[bold]Raw Data:[/bold] {len(bank.raw_data)} bytes ({len(bank.raw_data) // 2} denibblized)
[bold]Checksums:[/bold] {checksums}"""

    console.print(
        Panel(
            header_content,
            title="[bold blue]FB-01 Bank Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    voice_table = Table(
        title="Voices", box=box.ROUNDED, show_header=True, header_style="bold magenta"
    )
    voice_table.add_column("#", style="dim", width=3)
    voice_table.add_column("Offset", style="dim", width=8)
    if voice_names is not None:
        voice_table.add_column("Name", style="cyan", width=8)
    voice_table.add_column("Checksum", width=12)
    voice_table.add_column("Data Preview", width=26)

    for packet in bank.packets:
        if packet.checksum_valid:
            cs = f"[green]{packet.checksum:02X}[/green]"
        else:
            cs = f"[red]{packet.checksum:02X}[/red] ({packet.calculated_checksum:02X})"

        row = [str(packet.index + 1), f"0x{packet.offset:04X}"]
        if voice_names is not None:
            row.append(escape(voice_names[packet.index]) or "[dim]-[/dim]")
        row.extend([cs, " ".join(f"{b:02X}" for b in packet.data[:8])])
        voice_table.add_row(*row)

    console.print(voice_table)
