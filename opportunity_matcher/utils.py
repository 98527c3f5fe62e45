# opportunity_matcher/utils.py
import json
from pathlib import Path
from typing import Any, Dict, List


def atomic_write_json(path: Path, payload) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    tmp.replace(path)


def read_json_list(path: Path) -> List[Dict[str, Any]]:
    """
    Read a JSON file holding a list of records.
    A missing file is an empty list; anything else that is not a list raises ValueError.
    """
    if not path.exists():
        return []
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list in {path}")
    return [d for d in data if isinstance(d, dict)]
