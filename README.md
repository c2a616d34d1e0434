# sfsynth

Pure-Python building blocks for working with SoundFont 2 (`.sf2`) banks:

- `sfsynth.riff`: a small RIFF chunk reader (`Chunk`).
- `sfsynth.sfdata`, `sfsynth.info`, `sfsynth.hydra`: parsers for the three
  sections of an SF2 file: the INFO metadata (`Info`, `Version`), the sample
  data chunks (`SampleData`) and the "hydra" of preset, instrument, bag,
  generator, modulator and sample records (`Hydra`). `SFData.load` reads a
  whole file.
- `sfsynth.records`, `sfsynth.generator`, `sfsynth.modulator`: the individual
  record types (`PresetHeader`, `InstrumentHeader`, `Bag`, `SampleHeader`,
  `SampleLink`, `Generator`, `GeneratorType`, `Modulator`,
  `ModulatorSource`, ...) and the default modulators of SF2 section 8.4
  (`DEFAULT_VEL2ATT_MOD` and friends, `default_pitch_bend_mod`).
- `sfsynth.soundfont`: `SoundFont2`, which groups the records into presets
  and instruments with their zones.
- `sfsynth.tuning`: MIDI key tunings (`Tuning`, `TuningManager`).
- `sfsynth.dsp` and `sfsynth.interpolate`: sample interpolation loops
  (none, linear, 4th order and 7-point sinc).
- `sfsynth.arena`: a generational arena (`TypedArena`, `TypedIndex`) and a
  `check_range` helper.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Listing the contents of a bank

```
sfsynth path/to/bank.sf2
```

prints, for every preset, its name and a list of the instruments its zones
use, each with the number of its zones that refer to a sample. When no path
is given, `./testdata/sin.sf2` is read. If the file cannot be opened or
parsed, the error is printed to standard error and the exit status is 1.

The same listing is available as a string from `sfsynth.cli.describe(font)`.

## Loading a bank from Python

```python
from sfsynth.soundfont import SoundFont2

with open("bank.sf2", "rb") as file:
    font = SoundFont2.load(file).sort_presets()

print(font.info.bank_name, font.info.version.major, font.info.version.minor)

for preset in font.presets:
    print(preset.header.bank, preset.header.preset, preset.header.name)
    for zone in preset.zones:
        instrument_id = zone.instrument()
        if instrument_id is not None:
            instrument = font.instruments[instrument_id]
            samples = [font.sample_headers[z.sample()]
                       for z in instrument.zones if z.sample() is not None]
            print("  ", instrument.header.name, [s.name for s in samples])
```

`Zone` also offers `key_range()` and `vel_range()`, which return a
`GeneratorAmountRange` (`low`, `high`) or `None`. Terminal records (`EOP`,
`EOS`) are left out of the presets, instruments and sample headers.
`sort_presets()` orders presets by bank and then preset number.

`font.sample_data.smpl` and `font.sample_data.sm24` are `Chunk` objects
pointing into the file; read their bytes with
`chunk.read_contents(file)` while the file is still open.

Malformed input raises a subclass of `sfsynth.errors.ParseError`:
`InvalidChunkSize`, `UnknownGeneratorType`, `UnknownSampleType`,
`UnknownModulatorTransform` or `UnexpectedMember`; truncated data and
missing sections raise `ParseError` itself.

## Tunings

```python
from sfsynth.tuning import Tuning, TuningManager

manager = TuningManager()
manager.add_tuning(Tuning.new_octave_tuning(0, 0, [-33.0] + [0.0] * 11))
print(manager.tuning(0, 0).pitch[60])   # 5967.0
```

A new `Tuning` uses the well-tempered scale (key `k` at `k * 100` cents).
`TuningManager` keeps one tuning per bank and program, both in 0..127;
numbers outside that range raise `ValueError`, and `remove_tuning` raises
`KeyError` when nothing is stored there. `tunings()` yields every stored
tuning in bank, then program order.

## Interpolation

`sfsynth.dsp.SampleCursor` holds a sample's points, its start, end and loop
points, whether it loops, and the 32.32 fixed-point playback phase and
current amplitude. `interpolate_none` and `interpolate_linear` (in
`sfsynth.dsp`) and `interpolate_4th_order` and `interpolate_7th_order` (in
`sfsynth.interpolate`) each render one block of up to 64 output values,
returned as a list, and move the cursor's phase and amplitude forward. A
block shorter than 64 means the sample ended without looping.
`dsp_tables()` returns the shared coefficient tables.

## What it does not do

This package reads banks and provides the pieces above; it is not a
synthesizer. It has no voices, channels or MIDI event handling, no
envelopes, LFOs, filters, reverb or chorus, and it produces no audio output
or audio files. The `sfsynth` command only lists the contents of a bank.

## Running the tests

```
pip install .[test]
pytest
```