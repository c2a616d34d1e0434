"""Per-key tunings and a bank/program indexed store for them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Sequence

KEY_COUNT = 128
BANK_COUNT = 128
PROGRAM_COUNT = 128


def _equal_temperament() -> list[float]:
    return [key * 100.0 for key in range(KEY_COUNT)]


@dataclass
class Tuning:
    """Pitch in cents of each of the 128 MIDI keys.

    A new tuning uses the well-tempered scale: key ``k`` sounds at ``k * 100``
    cents.
    """

    bank: int
    program: int
    pitch: list[float] = field(default_factory=_equal_temperament)

    def __post_init__(self) -> None:
        self.pitch = [float(p) for p in self.pitch]
        if len(self.pitch) != KEY_COUNT:
            raise ValueError(f"a tuning needs {KEY_COUNT} pitches, got {len(self.pitch)}")

    @classmethod
    def new_key_tuning(cls, bank: int, program: int, pitch: Sequence[float]) -> "Tuning":
        """Create a tuning from the absolute pitch in cents of every key."""
        tuning = cls(bank, program)
        tuning.set_all(pitch)
        return tuning

    @classmethod
    def new_octave_tuning(cls, bank: int, program: int, pitch: Sequence[float]) -> "Tuning":
        """Create a tuning from 12 deviations in cents from the well-tempered scale.

        ``pitch[0]`` applies to every C, ``pitch[1]`` to every C sharp, and so on.
        """
        tuning = cls(bank, program)
        tuning.set_octave(pitch)
        return tuning

    def set_octave(self, pitch_deriv: Sequence[float]) -> None:
        """Retune every key to the well-tempered pitch plus its octave deviation."""
        if len(pitch_deriv) != 12:
            raise ValueError(f"an octave tuning needs 12 deviations, got {len(pitch_deriv)}")
        self.pitch = [key * 100.0 + pitch_deriv[key % 12] for key in range(KEY_COUNT)]

    def set_all(self, pitch: Sequence[float]) -> None:
        """Replace the pitch of every key."""
        if len(pitch) != KEY_COUNT:
            raise ValueError(f"a tuning needs {KEY_COUNT} pitches, got {len(pitch)}")
        self.pitch = [float(p) for p in pitch]

    def set_pitch(self, key: int, pitch: float) -> None:
        """Set the pitch of one key; keys outside 0..127 are ignored."""
        if 0 <= key < KEY_COUNT:
            self.pitch[key] = float(pitch)

    def tune_notes(self, key_pitch: Iterable[tuple[int, float]]) -> None:
        """Set the pitch of several keys from ``(key, pitch)`` pairs."""
        for key, pitch in key_pitch:
            self.set_pitch(key, pitch)


class TuningManager:
    """Holds at most one tuning for each bank and program."""

    def __init__(self) -> None:
        self._tunings: dict[tuple[int, int], Tuning] = {}

    @staticmethod
    def _check(bank: int, program: int) -> None:
        if not 0 <= bank < BANK_COUNT:
            raise ValueError("Bank number out of range")
        if not 0 <= program < PROGRAM_COUNT:
            raise ValueError("Program number out of range")

    def add_tuning(self, tuning: Tuning) -> None:
        """Store ``tuning``, replacing any tuning with the same bank and program."""
        self._check(tuning.bank, tuning.program)
        self._tunings[(tuning.bank, tuning.program)] = tuning

    def remove_tuning(self, bank: int, program: int) -> Tuning:
        """Remove and return the tuning assigned to ``bank`` and ``program``."""
        self._check(bank, program)
        try:
            return self._tunings.pop((bank, program))
        except KeyError:
            raise KeyError("No tuning found") from None

    def tuning(self, bank: int, program: int) -> Optional[Tuning]:
        """Return the tuning assigned to ``bank`` and ``program``, if any."""
        return self._tunings.get((bank, program))

    def tunings(self) -> Iterator[Tuning]:
        """Yield every stored tuning, ordered by bank and then program."""
        for key in sorted(self._tunings):
            yield self._tunings[key]