"""Tracks which wild animals are still present in a scenario."""

from __future__ import annotations

from typing import List

from .schemas import Fauna


class AnimalController:
    """Live-animal registry.

    Animals are added when placed and removed when collected. Membership is
    by identity so an animal stays tracked as it moves around.
    """

    def __init__(self) -> None:
        self._animals: List[Fauna] = []

    def add(self, animal: Fauna) -> None:
        if not self.contains(animal):
            self._animals.append(animal)

    def remove(self, animal: Fauna) -> None:
        # Safe to call for animals that were never tracked.
        self._animals = [tracked for tracked in self._animals if tracked is not animal]

    def contains(self, animal: Fauna) -> bool:
        return any(tracked is animal for tracked in self._animals)

    def list(self) -> List[Fauna]:
        return list(self._animals)

    def __contains__(self, animal: object) -> bool:
        return isinstance(animal, Fauna) and self.contains(animal)

    def __len__(self) -> int:
        return len(self._animals)
