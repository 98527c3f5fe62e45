# opportunity_matcher/taxonomy.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import yaml


@dataclass(frozen=True)
class TechnologyGroup:
    """
    A named cluster of related technologies.
    Two skills in the same group earn partial credit for each other.
    """
    name: str
    tokens: Tuple[str, ...]

    def __post_init__(self):
        # a blank token is contained in every skill
        cleaned = tuple(str(t).strip().lower() for t in self.tokens if t is not None and str(t).strip())
        if not cleaned:
            raise ValueError(f"Group '{self.name}' has no tokens")
        object.__setattr__(self, "tokens", cleaned)

    def matches(self, token: str) -> bool:
        """Substring containment in either direction against any token of the group."""
        return any(t in token or token in t for t in self.tokens)


DEFAULT_TECHNOLOGY_GROUPS: Tuple[TechnologyGroup, ...] = (
    TechnologyGroup("javascript", (
        "js", "es6", "typescript", "ts", "node", "nodejs", "react", "vue", "angular", "jquery",
    )),
    TechnologyGroup("frontend", (
        "html", "css", "sass", "scss", "less", "bootstrap", "tailwind", "react", "vue", "angular", "svelte",
    )),
    TechnologyGroup("backend", (
        "node", "express", "django", "flask", "ruby", "rails", "php", "laravel", "spring", "asp.net",
    )),
    TechnologyGroup("database", (
        "sql", "mysql", "postgresql", "postgres", "mongodb", "nosql", "firebase", "supabase", "oracle", "redis",
    )),
    TechnologyGroup("mobile", (
        "android", "ios", "swift", "kotlin", "flutter", "react native", "xamarin",
    )),
    TechnologyGroup("devops", (
        "docker", "kubernetes", "aws", "azure", "gcp", "ci/cd", "jenkins", "github actions",
    )),
    TechnologyGroup("ai", (
        "machine learning", "ml", "deep learning", "dl", "tensorflow", "pytorch", "nlp",
        "computer vision", "cv", "ai",
    )),
    TechnologyGroup("python", (
        "django", "flask", "fastapi", "numpy", "pandas", "scikit-learn", "pytorch", "tensorflow",
    )),
)


def load_technology_groups(path: str) -> Tuple[TechnologyGroup, ...]:
    """
    Read groups from a YAML mapping of group name -> list of tokens.
    Group order follows the file.
    """
    p = Path(path).expanduser()
    if not p.exists():
        raise FileNotFoundError(f"Taxonomy file not found: {p}")

    raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Taxonomy YAML must be a mapping of group -> tokens: {p}")

    groups = []
    for name, tokens in raw.items():
        if not isinstance(tokens, list):
            raise ValueError(f"Group '{name}' must be a list of tokens")
        groups.append(TechnologyGroup(str(name), tuple(tokens)))

    return tuple(groups)
