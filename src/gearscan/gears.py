"""Gear positions and the numbers found next to them."""

from __future__ import annotations

from collections.abc import Iterator

GearKey = tuple[int, int]  # (column, row)


class GearLedger:
    """Map each ``*`` position to the numbers registered against it."""

    def __init__(self) -> None:
        self._entries: dict[GearKey, list[int]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def register(self, column: int, row: int, value: int) -> None:
        self._entries.setdefault((column, row), []).append(value)

    def values(self, column: int, row: int) -> list[int]:
        return list(self._entries.get((column, row), []))

    def ratios(self) -> Iterator[tuple[GearKey, list[int], int]]:
        """Yield ``(key, values, ratio)`` in discovery order.

        The ratio is 0 unless exactly two numbers were registered.
        """
        for key, values in self._entries.items():
            ratio = values[0] * values[1] if len(values) == 2 else 0
            yield key, list(values), ratio

    def ratio_sum(self) -> int:
        return sum(ratio for _, _, ratio in self.ratios())
