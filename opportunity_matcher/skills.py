# opportunity_matcher/skills.py
from __future__ import annotations

import json
import numbers
from enum import Enum
from typing import Any, List


class SkillShape(str, Enum):
    """The shapes a stored skills field can arrive in."""
    ABSENT = "absent"
    LIST = "list"
    TEXT = "text"
    SCALAR = "scalar"
    STRUCTURED = "structured"


_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def classify_skill_source(raw: Any) -> SkillShape:
    if raw is None:
        return SkillShape.ABSENT
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        return SkillShape.TEXT if raw.strip() else SkillShape.ABSENT
    if isinstance(raw, _SEQUENCE_TYPES):
        return SkillShape.LIST if raw else SkillShape.ABSENT
    # bool is an int subclass, both land here
    if isinstance(raw, numbers.Number):
        return SkillShape.SCALAR
    return SkillShape.STRUCTURED


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, numbers.Number):
        return _scalar_text(value)
    try:
        return json.dumps(value, separators=(",", ":"), sort_keys=True, default=str)
    except (TypeError, ValueError, RecursionError):
        return type(value).__name__


def _from_sequence(items) -> List[str]:
    if isinstance(items, (set, frozenset)):
        items = sorted(items, key=_stringify)
    return [_stringify(x) for x in items if x is not None]


def normalize_skills(raw: Any) -> List[str]:
    """
    Turn a loosely typed skills value into a list of skill strings.

    Accepts lists, JSON-array text, plain text, scalars and None.
    Plain text that is not a JSON array becomes a one-element list.
    Objects and other structures become an empty list.
    Never raises.
    """
    shape = classify_skill_source(raw)

    if shape is SkillShape.ABSENT:
        return []

    if shape is SkillShape.LIST:
        return _from_sequence(raw)

    if shape is SkillShape.TEXT:
        text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
        try:
            parsed = json.loads(text)
        except (ValueError, RecursionError):
            return [text]
        if isinstance(parsed, list):
            return _from_sequence(parsed)
        return [text]

    if shape is SkillShape.SCALAR:
        return [_scalar_text(raw)]

    return []


def comparison_tokens(skills: Any) -> List[str]:
    """Lowercased, stripped, non-blank tokens used only for comparison."""
    out = []
    for s in normalize_skills(skills):
        t = s.strip().lower()
        if t:
            out.append(t)
    return out
