"""Errors raised while parsing SoundFont 2 data."""

from __future__ import annotations

from typing import Any


class ParseError(Exception):
    """Base class for every SoundFont parsing failure."""


class InvalidChunkSize(ParseError):
    """A record chunk whose size is zero or not a multiple of its record size."""

    def __init__(self, kind: str, size: int) -> None:
        super().__init__(f"invalid {kind} chunk size: {size}")
        self.kind = kind
        self.size = size


class UnknownGeneratorType(ParseError):
    """A generator operator outside the range defined by the format."""

    def __init__(self, value: int) -> None:
        super().__init__(f"unknown generator type: {value}")
        self.value = value


class UnknownSampleType(ParseError):
    """A sample header carrying an undefined sample link type."""

    def __init__(self, value: int) -> None:
        super().__init__(f"unknown sample type: {value:#x}")
        self.value = value


class UnknownModulatorTransform(ParseError):
    """A modulator transform operator that the format does not define."""

    def __init__(self, value: int) -> None:
        super().__init__(f"unknown modulator transform: {value}")
        self.value = value


class UnexpectedMember(ParseError):
    """A chunk found in a section where it is not allowed."""

    def __init__(self, section: str, chunk: Any) -> None:
        super().__init__(f"unexpected member of {section}: {chunk!r}")
        self.section = section
        self.chunk = chunk