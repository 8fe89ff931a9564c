"""A scrollable, zoomable window onto the encoded bit stream."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .model import TextModel

Point = Tuple[float, float]

_END_OFFSET = 0.0001


def _bound(low: int, value: int, high: int) -> int:
    return max(low, min(value, high))


def _trunc_div(numerator: int, denominator: int) -> int:
    return int(numerator / denominator)


class EncodedView:
    """Computes the rectangular waveform of a window of encoded bits."""

    MAX_DISPLAY_COUNT = 100
    MIN_DISPLAY_COUNT = 10
    Y_RANGE: Tuple[float, float] = (-0.2, 1.2)

    def __init__(self, model: Optional[TextModel] = None) -> None:
        self.model = model
        self.start_index = 0
        self.display_count = 100
        self.points: List[Point] = []
        self.x_range: Tuple[float, float] = (0.0, 5.0)

    def _bits(self) -> List[int]:
        return self.model.encoded if self.model is not None else []

    def update(self) -> None:
        """Rebuild the waveform points and time axis for the current window."""
        if self.model is None:
            return
        encoded = self.model.encoded
        bit_width = self.model.SAMPLES_PER_BIT / self.model.SAMPLE_RATE
        self.points = []
        total = len(encoded)
        if total == 0:
            return
        self.display_count = min(self.display_count, total)
        self.start_index = _bound(0, self.start_index, total - 1)
        if self.start_index + self.display_count > total:
            self.display_count = total - self.start_index

        window = range(self.start_index, self.start_index + self.display_count)
        for index in window:
            value = float(encoded[index])
            self.points.append((index * bit_width, value))
            self.points.append(((index + 1) * bit_width - _END_OFFSET, value))

        self.x_range = (
            self.start_index * bit_width,
            (self.start_index + self.display_count) * bit_width,
        )

    def _clamp_start(self, total: int) -> None:
        if self.start_index < 0:
            self.start_index = 0
        if self.start_index + self.display_count > total:
            self.start_index = max(0, total - self.display_count)

    def wheel(self, delta_y: int, ctrl: bool) -> bool:
        """Handle a wheel step: zoom with ctrl held, scroll otherwise.

        Returns True when the event was accepted.
        """
        bits = self._bits()
        if not bits:
            return False
        total = len(bits)
        if ctrl:
            zoom = _trunc_div(delta_y, 120)
            if zoom != 0:
                center = self.start_index + self.display_count // 2
                self.display_count = _bound(
                    self.MIN_DISPLAY_COUNT,
                    self.display_count - zoom * 10,
                    self.MAX_DISPLAY_COUNT,
                )
                self.start_index = center - self.display_count // 2
                self._clamp_start(total)
                self.update()
        else:
            scroll = _trunc_div(-delta_y, 20)
            if scroll != 0:
                self.start_index += scroll
                self._clamp_start(total)
                self.update()
        return True

    def set_view_range(self, start_idx: int, display_count: int) -> None:
        """Show display_count bits starting at start_idx, kept within the data."""
        bits = self._bits()
        if not bits:
            return
        total = len(bits)
        self.start_index = _bound(0, start_idx, total - 1)
        self.display_count = _bound(
            self.MIN_DISPLAY_COUNT,
            display_count,
            min(self.MAX_DISPLAY_COUNT, total),
        )
        if self.start_index + self.display_count > total:
            self.start_index = max(0, total - self.display_count)
        self.update()

    def reset_view(self) -> None:
        """Show the data from its start, as many bits as the view allows."""
        bits = self._bits()
        if not bits:
            return
        self.display_count = min(self.MAX_DISPLAY_COUNT, len(bits))
        self.start_index = 0
        self.update()