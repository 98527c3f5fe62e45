from pathlib import Path

import pytest

from opportunity_matcher.config import Config, load_config
from opportunity_matcher.taxonomy import DEFAULT_TECHNOLOGY_GROUPS

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_shipped_config_loads():
    cfg = load_config(str(REPO_ROOT / "config" / "config.yaml"))
    assert cfg.thresholds.browse_min_score == 50
    assert cfg.thresholds.dashboard_min_score == 70
    assert cfg.thresholds.auto_apply_min_score == 75
    assert cfg.scoring.use_taxonomy is True
    assert cfg.store.backend == "local"


def test_defaults_when_sections_missing(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("version: 1\n", encoding="utf-8")
    cfg = load_config(str(p))
    assert cfg == Config()
    assert cfg.scoring.technology_groups() == DEFAULT_TECHNOLOGY_GROUPS


def test_empty_file_is_defaults(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("", encoding="utf-8")
    assert load_config(str(p)) == Config()


def test_threshold_out_of_range(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("thresholds:\n  auto_apply_min_score: 120\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(p))


def test_non_mapping_rejected(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(p))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))


def test_custom_taxonomy_path(tmp_path):
    groups = tmp_path / "groups.yaml"
    groups.write_text("design: [figma, sketch]\n", encoding="utf-8")
    p = tmp_path / "config.yaml"
    p.write_text(f"scoring:\n  taxonomy_path: {groups}\n", encoding="utf-8")

    cfg = load_config(str(p))
    assert [g.name for g in cfg.scoring.technology_groups()] == ["design"]


def test_supabase_key_from_env(monkeypatch):
    monkeypatch.setenv("MY_KEY", "abc")
    cfg = Config(store={"backend": "supabase", "supabase_key_env": "MY_KEY"})
    assert cfg.store.resolved_supabase_key() == "abc"
