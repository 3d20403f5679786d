"""
Hex dump display utilities.
"""

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

console = Console()


def format_hex_line(chunk: bytes, address: int, width: int = 16) -> str:
    """Format one dump line: address, hex bytes, printable characters."""
    hex_parts = []
    for i, b in enumerate(chunk):
        if i == 8:
            hex_parts.append("")  # Gap at midpoint
        hex_parts.append(f"{b:02X}")
    hex_str = " ".join(hex_parts)

    ascii_str = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)

    return f"[dim]{address:04X}[/dim]  {hex_str:<{width * 3 + 1}}  [cyan]{escape(ascii_str)}[/cyan]"


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    start_offset: int = 0,
    bytes_per_line: int = 16,
    block_size: Optional[int] = None,
    block_labels: Optional[Sequence[str]] = None,
    max_blocks: Optional[int] = None,
) -> None:
    """
    Display formatted hex dump with Rich.

    Args:
        data: Bytes to dump
        title: Panel title
        start_offset: Address shown for the first byte
        bytes_per_line: Bytes per line
        block_size: If set, split the dump into labelled blocks of this size
        block_labels: Label for each block (e.g. voice names)
        max_blocks: Stop after this many blocks
    """
    block_size = block_size or len(data)
    lines = []

    for block_index, block_start in enumerate(range(0, len(data), block_size)):
        if max_blocks is not None and block_index >= max_blocks:
            remaining = len(data) - block_start
            lines.append(f"[dim]... {remaining} more bytes ...[/dim]")
            break

        if block_size < len(data):
            label = ""
            if block_labels is not None and block_index < len(block_labels):
                label = f"  {block_labels[block_index]}"
            lines.append(f"[bold]#{block_index + 1}[/bold]{label}")

        block = data[block_start : block_start + block_size]
        for offset in range(0, len(block), bytes_per_line):
            chunk = block[offset : offset + bytes_per_line]
            lines.append(
                format_hex_line(chunk, start_offset + block_start + offset, bytes_per_line)
            )

    content = "\n".join(lines)
    console.print(Panel(content, title=title, border_style="blue", expand=False))
