[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sfsynth"
version = "0.1.0"
description = "SoundFont 2 file parsing, MIDI tuning tables and sample interpolation for software synthesis"
requires-python = ">=3.10"
dependencies = []
keywords = ["soundfont", "sf2", "riff", "synthesizer", "midi", "audio", "tuning", "interpolation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sfsynth = "sfsynth.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sfsynth"]

[tool.pytest.ini_options]
addopts = "-ra"
