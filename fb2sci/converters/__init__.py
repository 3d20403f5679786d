"""
Converters from FB-01 bank dumps to SCI patch resources.

Example:
    from fb2sci.converters import convert_fb01_to_sci

    convert_fb01_to_sci("bank_a.syx", "bank_b.syx", "patch.002")
"""

from fb2sci.converters.fb01_to_sci import (
    FB01ToSCIConverter,
    convert_fb01_to_sci,
    reorganize_banks,
)

__all__ = [
    "FB01ToSCIConverter",
    "convert_fb01_to_sci",
    "reorganize_banks",
]
