# opportunity_matcher/stores/supabase.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Set

import requests
from pydantic import ValidationError

from opportunity_matcher.models import Application, Opportunity, Profile
from opportunity_matcher.stores.base import MatchStore, ProfileNotFoundError, StoreError

logger = logging.getLogger(__name__)


class SupabaseStore(MatchStore):
    """
    Reads and writes the profiles / opportunities / applications tables through
    the Supabase REST endpoint (PostgREST). One request per call, no retries.
    """

    def __init__(
        self,
        url: str,
        api_key: str,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        if not url:
            raise ValueError("Supabase URL is required")
        if not api_key:
            raise ValueError("Supabase API key is required")
        self.base_url = url.rstrip("/") + "/rest/v1"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def _request(
        self,
        method: str,
        table: str,
        params: Optional[Dict[str, str]] = None,
        json_body: Any = None,
        extra_headers: Optional[Dict[str, str]] = None,
    ) -> List[Dict[str, Any]]:
        url = f"{self.base_url}/{table}"
        headers = dict(self.headers)
        if extra_headers:
            headers.update(extra_headers)

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise StoreError(f"{method} {table} failed: {e}") from e
        except ValueError as e:
            raise StoreError(f"{method} {table} returned invalid JSON: {e}") from e

        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise StoreError(f"{method} {table} returned unexpected payload: {type(data).__name__}")
        return data

    def get_profile(self, user_id: str) -> Profile:
        rows = self._request("GET", "profiles", params={"id": f"eq.{user_id}", "select": "*"})
        if not rows:
            raise ProfileNotFoundError(user_id)
        try:
            return Profile.model_validate(rows[0])
        except ValidationError as e:
            raise StoreError(f"Invalid profile record {user_id}: {e}") from e

    def list_opportunities(self) -> List[Opportunity]:
        out: List[Opportunity] = []
        for row in self._request("GET", "opportunities", params={"select": "*"}):
            try:
                out.append(Opportunity.model_validate(row))
            except ValidationError as e:
                logger.warning("Skipping invalid opportunity %s: %s", row.get("id"), e)
        return out

    def list_applied_opportunity_ids(self, user_id: str) -> Set[str]:
        rows = self._request(
            "GET",
            "applications",
            params={"user_id": f"eq.{user_id}", "select": "opportunity_id"},
        )
        return {str(r["opportunity_id"]) for r in rows if r.get("opportunity_id") is not None}

    def insert_application(self, application: Application) -> Application:
        body = application.model_dump(exclude_none=True)
        rows = self._request(
            "POST",
            "applications",
            json_body=[body],
            extra_headers={"Prefer": "return=representation"},
        )
        if not rows:
            raise StoreError("Insert into applications returned no rows")
        try:
            return Application.model_validate(rows[0])
        except ValidationError as e:
            raise StoreError(f"Invalid application record returned: {e}") from e
