from __future__ import annotations

from typing import Protocol

from assessor.schemas.occupations import OccupationProfile, WorkActivity


class OccupationCatalogProvider(Protocol):
    def occupations(self) -> tuple[OccupationProfile, ...]:
        """Return every occupation profile in declared order."""

    def work_activity(self, activity_id: str) -> WorkActivity | None:
        """Return the work activity with the given id, if known."""
