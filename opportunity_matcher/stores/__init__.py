from opportunity_matcher.config import Config
from opportunity_matcher.stores.base import MatchStore, ProfileNotFoundError, StoreError
from opportunity_matcher.stores.local import LocalJsonStore
from opportunity_matcher.stores.supabase import SupabaseStore


def build_store(config: Config) -> MatchStore:
    """
    Factory for the configured backend.
    Add new backends here.
    """
    cfg = config.store
    if cfg.backend == "supabase":
        return SupabaseStore(
            cfg.resolved_supabase_url() or "",
            cfg.resolved_supabase_key(),
            timeout=cfg.timeout,
        )
    return LocalJsonStore(cfg.data_dir)


__all__ = [
    "MatchStore",
    "StoreError",
    "ProfileNotFoundError",
    "LocalJsonStore",
    "SupabaseStore",
    "build_store",
]
