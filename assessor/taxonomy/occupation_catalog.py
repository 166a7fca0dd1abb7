from __future__ import annotations

import json
import logging
from pathlib import Path

from assessor.schemas.occupations import OccupationProfile, WorkActivity

from .provider import OccupationCatalogProvider

logger = logging.getLogger(__name__)


class LocalOccupationCatalog(OccupationCatalogProvider):
    def __init__(
        self,
        occupations_path: str | Path | None = None,
        work_activities_path: str | Path | None = None,
    ) -> None:
        occ_path = Path(occupations_path) if occupations_path else Path(__file__).with_name("occupations.json")
        wa_path = (
            Path(work_activities_path) if work_activities_path else Path(__file__).with_name("work_activities.json")
        )
        self._work_activities = self._load_work_activities(wa_path)
        self._occupations = self._load_occupations(occ_path)
        logger.info(
            "occupation_catalog_loaded occupations=%s work_activities=%s",
            len(self._occupations),
            len(self._work_activities),
        )

    @staticmethod
    def _load_json_list(path: Path) -> list[dict]:
        try:
            with path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            raise RuntimeError(f"Occupation catalog initialization failed for '{path}': {exc}") from exc
        if not isinstance(raw, list):
            raise RuntimeError(f"Invalid catalog file '{path}': expected a top-level list.")
        return raw

    @classmethod
    def _load_work_activities(cls, path: Path) -> dict[str, WorkActivity]:
        activities = [WorkActivity.model_validate(item) for item in cls._load_json_list(path)]
        return {activity.id: activity for activity in activities}

    @classmethod
    def _load_occupations(cls, path: Path) -> tuple[OccupationProfile, ...]:
        return tuple(OccupationProfile.model_validate(item) for item in cls._load_json_list(path))

    def occupations(self) -> tuple[OccupationProfile, ...]:
        return self._occupations

    def work_activity(self, activity_id: str) -> WorkActivity | None:
        return self._work_activities.get(activity_id)
