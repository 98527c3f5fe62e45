from abc import ABC, abstractmethod
from typing import List, Set

from opportunity_matcher.models import Application, Opportunity, Profile


class StoreError(Exception):
    """A store could not read or write a record."""


class ProfileNotFoundError(StoreError, LookupError):
    def __init__(self, user_id: str):
        super().__init__(f"Profile not found: {user_id}")
        self.user_id = user_id


class MatchStore(ABC):
    """
    Where profiles, opportunities and applications live.
    Implementations surface their failures as StoreError and do not retry.
    """

    @abstractmethod
    def get_profile(self, user_id: str) -> Profile:
        raise NotImplementedError

    @abstractmethod
    def list_opportunities(self) -> List[Opportunity]:
        raise NotImplementedError

    @abstractmethod
    def list_applied_opportunity_ids(self, user_id: str) -> Set[str]:
        raise NotImplementedError

    @abstractmethod
    def insert_application(self, application: Application) -> Application:
        raise NotImplementedError
