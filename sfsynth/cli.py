"""Command that lists the presets of a SoundFont 2 file."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, Sequence

from .errors import ParseError
from .soundfont import SoundFont2


def describe(font: SoundFont2) -> str:
    """Describe each preset: its name and the sample count of each instrument."""
    blocks = []
    for preset in font.presets:
        entries = []
        for zone in preset.zones:
            instrument_id = zone.instrument()
            if instrument_id is None:
                continue
            instrument = font.instruments[instrument_id]
            samples = sum(1 for z in instrument.zones if z.sample() is not None)
            entries.append(f"({json.dumps(instrument.header.name)}, {samples})")
        blocks.append(
            "====== Preset =======\n"
            f"Name: {preset.header.name}\n"
            f"Instruments: [{', '.join(entries)}]\n\n"
        )
    return "".join(blocks)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sfsynth", description="List the presets of a SoundFont 2 file."
    )
    parser.add_argument("path", nargs="?", default="./testdata/sin.sf2")
    args = parser.parse_args(argv)
    try:
        with open(args.path, "rb") as file:
            font = SoundFont2.load(file)
    except (OSError, ParseError) as exc:
        print(f"sfsynth: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(describe(font))
    return 0