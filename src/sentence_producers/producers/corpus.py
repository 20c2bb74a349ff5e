"""Local corpus reader.

Supports multiple input formats:
- Single file: "path/to/corpus.txt" or "path/to/corpus.jsonl"
- Multiple files: ["a.txt", "b.jsonl"]
- Directory: every .txt/.jsonl file below it
- Glob pattern: "path/to/*.txt"

.txt files yield one text per non-empty line; .jsonl files yield the
configured text field of each record.
"""

from __future__ import annotations
import glob
import json
import logging
import os
from pathlib import Path
from typing import Iterator, List, Set, Tuple, Union
from tqdm import tqdm

log = logging.getLogger("sentence_producers.producers.corpus")

CORPUS_SUFFIXES = (".txt", ".jsonl")

def resolve_files(dataset: Union[str, List[str]]) -> List[str]:
    if isinstance(dataset, list):
        files: List[str] = []
        for item in dataset:
            files.extend(resolve_files(item))
        return files

    if any(ch in dataset for ch in "*?["):
        matched = glob.glob(dataset, recursive=True)
        return sorted(f for f in matched if os.path.isfile(f) and f.endswith(CORPUS_SUFFIXES))

    path = Path(dataset)
    if path.is_dir():
        return sorted(str(f) for f in path.rglob("*") if f.is_file() and f.suffix in CORPUS_SUFFIXES)
    # Single file; a missing one is caught by the step input check
    return [dataset]

def corpus_inputs(dataset: Union[str, List[str]]) -> Set[Tuple[str, None]]:
    """Step inputs for a corpus: every resolved file, with no upstream step."""
    return {(f, None) for f in resolve_files(dataset)}

def iter_texts(dataset: Union[str, List[str]], text_field: str = "text", *, progress: bool = False) -> Iterator[str]:
    files = resolve_files(dataset)
    log.info(f"Reading corpus: {len(files)} file(s)")
    for file_path in tqdm(files, desc="corpus", unit="file", disable=not progress):
        with open(file_path, "r", encoding="utf-8") as f:
            if not file_path.endswith(".jsonl"):
                for line in f:
                    if line.strip():
                        yield line
                continue
            for line_num, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    ex = json.loads(line)
                except json.JSONDecodeError as e:
                    log.warning(f"Invalid JSON in {file_path}:{line_num}: {e}")
                    continue
                text = ex.get(text_field) if isinstance(ex, dict) else None
                if text:
                    yield str(text)
