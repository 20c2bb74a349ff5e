"""Run ID resolution: explicit or auto-generated from config.

Auto-generated ids look like `<producer_type>_<YYYYMMDD>_<HHMMSS>`, with the
producer type made path-safe ("sentence selector" -> "sentence_selector").
"""

from __future__ import annotations
import re
from datetime import datetime, timezone
from typing import Any, Dict

from .config.loader import PRODUCER_SECTION
from .output.contract import PRODUCER_TYPE_KEY

def _producer_name(cfg: Dict[str, Any]) -> str:
    params = cfg.get(PRODUCER_SECTION) or {}
    name = str(params.get(PRODUCER_TYPE_KEY) or "run")
    return re.sub(r"[^\w\-]", "_", name.strip()) or "run"

def generate_run_id(cfg: Dict[str, Any]) -> str:
    ts = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    return f"{_producer_name(cfg)}_{ts}"

def resolve_run_id(cfg: Dict[str, Any]) -> str:
    """Return run_id: explicit run.run_id, or auto-generated."""
    run = cfg.get("run") or {}
    explicit = run.get("run_id")
    if explicit is not None and str(explicit).strip():
        return str(explicit).strip()
    return generate_run_id(cfg)

def resolve_log_dir(cfg: Dict[str, Any]) -> str:
    run = cfg.get("run") or {}
    return run.get("log_dir") or "logs"
