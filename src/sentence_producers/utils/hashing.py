"""Hashing utilities.

- `sentence_key`: dedup key for a sanitized sentence (raw SHA-256 digest)
- `params_fingerprint`: hex digest of producer params, used to derive a
  default output path so identical configs share one sentence file
"""

from __future__ import annotations
from typing import Any, Dict
import hashlib
import json

def sentence_key(sentence: str) -> bytes:
    return hashlib.sha256(sentence.encode("utf-8", errors="ignore")).digest()

def params_fingerprint(params: Dict[str, Any]) -> str:
    # Key order in YAML must not change the path
    blob = json.dumps(params, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(blob.encode("utf-8")).hexdigest()
