"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from mdwikigen.deep_merge import deep_merge

RENDER_STYLES = ("details", "table")

DEFAULT_CONFIG: dict[str, Any] = {
    "namespace_match": "",
    "render": {
        "style": "details",
        "code_language": "csharp",
        "hidden_base_types": ["System.Object", "System.ValueType"],
    },
    "pages": {
        "home": True,
        "sidebar": True,
        "footer": True,
    },
    "footer": {
        "copyright_holder": "",
        "note": "auto generated wiki!<br/>all changes can be removed within next update",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
