#!/usr/bin/env python3
"""
Example: Convert two FB-01 bank dumps to an SCI patch resource

Also lists the voice names found in each bank.
"""

import sys

sys.path.insert(0, "..")

from pathlib import Path
from fb2sci import BankRole
from fb2sci.converters import convert_fb01_to_sci


def main():
    if len(sys.argv) != 4:
        print(f"usage: {sys.argv[0]} bank_a.syx bank_b.syx patch.002")
        return 1

    bank_a, bank_b, output = (Path(arg) for arg in sys.argv[1:])

    print("Converting FB-01 banks to SCI patch resource...")
    resource = convert_fb01_to_sci(bank_a, bank_b, output)
    print(f"  Created: {output} ({output.stat().st_size} bytes)")

    for role in BankRole:
        print(f"\n{role.display_name}:")
        for index, name in enumerate(resource.voice_names(role)):
            print(f"  {index + 1:2d}  {name}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
