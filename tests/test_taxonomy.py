from pathlib import Path

import pytest

from opportunity_matcher.taxonomy import (
    DEFAULT_TECHNOLOGY_GROUPS,
    TechnologyGroup,
    load_technology_groups,
)

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_default_groups():
    names = [g.name for g in DEFAULT_TECHNOLOGY_GROUPS]
    assert names == [
        "javascript", "frontend", "backend", "database", "mobile", "devops", "ai", "python",
    ]
    for g in DEFAULT_TECHNOLOGY_GROUPS:
        assert g.tokens
        assert all(t == t.lower() for t in g.tokens)


def test_shipped_yaml_matches_defaults():
    groups = load_technology_groups(str(REPO_ROOT / "config" / "tech_groups.yaml"))
    assert groups == DEFAULT_TECHNOLOGY_GROUPS


def test_group_matches_by_containment():
    g = TechnologyGroup("database", ("sql", "postgres"))
    assert g.matches("postgresql")
    assert g.matches("sq")
    assert not g.matches("redis")


def test_load_lowercases_and_keeps_order(tmp_path):
    p = tmp_path / "groups.yaml"
    p.write_text("design: [Figma, ' Sketch ']\ndata: [Pandas]\n", encoding="utf-8")
    groups = load_technology_groups(str(p))
    assert groups == (
        TechnologyGroup("design", ("figma", "sketch")),
        TechnologyGroup("data", ("pandas",)),
    )


@pytest.mark.parametrize(
    "content",
    ["- a\n- b\n", "design: figma\n", "design: []\n"],
)
def test_load_rejects_bad_documents(tmp_path, content):
    p = tmp_path / "groups.yaml"
    p.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_technology_groups(str(p))


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_technology_groups(str(tmp_path / "nope.yaml"))


def test_group_tokens_are_cleaned_on_construction():
    g = TechnologyGroup("design", ("", "  Figma ", "   "))
    assert g.tokens == ("figma",)
    assert not g.matches("photoshop")


def test_group_without_tokens_is_rejected():
    with pytest.raises(ValueError):
        TechnologyGroup("empty", ("", "  "))
