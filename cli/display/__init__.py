"""
CLI display modules.
"""

from cli.display.tables import display_bank_info
from cli.display.hex_view import display_hex_dump

__all__ = [
    "display_bank_info",
    "display_hex_dump",
]
