# opportunity_matcher/stores/local.py
from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import List, Set

from pydantic import ValidationError

from opportunity_matcher.models import Application, Opportunity, Profile
from opportunity_matcher.stores.base import MatchStore, ProfileNotFoundError, StoreError
from opportunity_matcher.utils import atomic_write_json, read_json_list

logger = logging.getLogger(__name__)


class LocalJsonStore(MatchStore):
    """
    JSON files under one data directory:

      profiles.json          list of profile records
      opportunities/*.json   each a list of opportunity records (*.error.json skipped)
      applications.json      list of application records, appended to on insert
    """

    def __init__(self, data_dir: str):
        self.data_dir = Path(data_dir).expanduser()

    @property
    def profiles_path(self) -> Path:
        return self.data_dir / "profiles.json"

    @property
    def opportunities_dir(self) -> Path:
        return self.data_dir / "opportunities"

    @property
    def applications_path(self) -> Path:
        return self.data_dir / "applications.json"

    def _read(self, path: Path) -> List[dict]:
        try:
            return read_json_list(path)
        except (OSError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            raise StoreError(f"Could not read {path}: {e}") from e

    def get_profile(self, user_id: str) -> Profile:
        for rec in self._read(self.profiles_path):
            if str(rec.get("id")) == str(user_id):
                try:
                    return Profile.model_validate(rec)
                except ValidationError as e:
                    raise StoreError(f"Invalid profile record {user_id}: {e}") from e
        raise ProfileNotFoundError(user_id)

    def list_opportunities(self) -> List[Opportunity]:
        if not self.opportunities_dir.exists():
            return []

        out: List[Opportunity] = []
        for fp in sorted(self.opportunities_dir.glob("*.json")):
            if fp.name.endswith(".error.json"):
                continue
            for rec in self._read(fp):
                try:
                    out.append(Opportunity.model_validate(rec))
                except ValidationError as e:
                    logger.warning("Skipping invalid opportunity in %s: %s", fp.name, e)
        return out

    def list_applied_opportunity_ids(self, user_id: str) -> Set[str]:
        return {
            str(rec.get("opportunity_id"))
            for rec in self._read(self.applications_path)
            if str(rec.get("user_id")) == str(user_id) and rec.get("opportunity_id") is not None
        }

    def insert_application(self, application: Application) -> Application:
        existing = self._read(self.applications_path)
        stored = application.model_copy(update={"id": application.id or str(uuid.uuid4())})
        existing.append(stored.model_dump())
        try:
            atomic_write_json(self.applications_path, existing)
        except (OSError, TypeError) as e:
            raise StoreError(f"Could not write {self.applications_path}: {e}") from e
        logger.debug("Stored application %s for opportunity %s", stored.id, stored.opportunity_id)
        return stored
