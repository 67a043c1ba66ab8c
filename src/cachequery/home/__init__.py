"""Home layer: config path resolution and JSON reading (no Pydantic)."""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional


CONFIG_ENV_VAR = "CACHEQUERY_CONFIG"


def resolve_config_path(cli_path: Optional[Path] = None) -> Path:
    """
    Resolve cachequery.json config file path with precedence:
    1. CLI --config path
    2. CACHEQUERY_CONFIG env var
    3. CWD: .cachequery.json or cachequery.json (prefer .cachequery.json)
    4. User home: ~/.cachequery.json
    """
    if cli_path:
        return cli_path

    env = os.getenv(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()

    cwd = Path.cwd()
    for name in (".cachequery.json", "cachequery.json"):
        p = cwd / name
        if p.exists():
            return p

    return Path.home() / ".cachequery.json"


def load_json(path: Path) -> Dict[str, Any]:
    """Load and parse JSON file."""
    return json.loads(path.read_text(encoding="utf-8"))


__all__ = ["CONFIG_ENV_VAR", "load_json", "resolve_config_path"]
