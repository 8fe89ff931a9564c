"""Text loading, bit encoding and carrier modulation."""

from __future__ import annotations

import math
import os
from typing import List, Union

PathLike = Union[str, "os.PathLike[str]"]

ASK_HIGH = 1.0
ASK_LOW = 0.0
ASK_CARRIER_HZ = 1000.0
PSK_CARRIER_HZ = 1000.0


def _bits_of(data: bytes) -> List[int]:
    """Expand bytes into single bits, most significant bit first."""
    return [(byte >> shift) & 0x01 for byte in data for shift in range(7, -1, -1)]


class TextModel:
    """Holds a text document and its encoded and modulated forms."""

    SAMPLE_RATE = 16000.0
    SAMPLES_PER_BIT = 1000

    def __init__(self, raw: str = "") -> None:
        self.raw: str = raw
        self.encoded: List[int] = []
        self.modulated: List[float] = []

    def load(self, path: PathLike) -> str:
        """Read a text file into the model and return its contents."""
        with open(path, "r", encoding="utf-8") as handle:
            self.raw = handle.read()
        return self.raw

    def save(self, path: PathLike) -> None:
        """Write the current text to a file."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.raw)

    def encode(self, encoding: str) -> List[int]:
        """Encode the text as UTF-8 or UTF-16 and expand it to a list of bits.

        An encoding name other than those two yields no bits.
        """
        name = encoding.casefold()
        if name == "utf-8":
            data = self.raw.encode("utf-8", errors="surrogatepass")
        elif name == "utf-16":
            data = self.raw.encode("utf-16-le", errors="surrogatepass")
        else:
            data = b""
        self.encoded = _bits_of(data)
        return self.encoded

    def _carrier(self, frequency: float, phase: float = 0.0) -> List[float]:
        return [
            math.sin(2 * math.pi * frequency * (n / self.SAMPLE_RATE) + phase)
            for n in range(self.SAMPLES_PER_BIT)
        ]

    def modulate(self, modulation: str) -> List[float]:
        """Modulate the encoded bits with ASK or PSK.

        Each bit becomes SAMPLES_PER_BIT samples. A modulation name other
        than those two yields no samples.
        """
        name = modulation.casefold()
        samples: List[float] = []
        if name == "ask":
            carrier = self._carrier(ASK_CARRIER_HZ)
            for bit in self.encoded:
                amplitude = ASK_HIGH if bit == 1 else ASK_LOW
                samples.extend(amplitude * value for value in carrier)
        elif name == "psk":
            zero_phase = self._carrier(PSK_CARRIER_HZ)
            pi_phase = self._carrier(PSK_CARRIER_HZ, math.pi)
            for bit in self.encoded:
                samples.extend(pi_phase if bit == 1 else zero_phase)
        self.modulated = samples
        return self.modulated