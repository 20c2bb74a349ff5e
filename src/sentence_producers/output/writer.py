"""Sentence file writers.

We keep writers simple and robust:
- one record per line, UTF-8, every line terminated by "\n"
- write to a temporary sibling then `os.replace`, so readers never see a
  partially written file
- no escaping: a tab or newline inside a sentence goes out as-is

I/O errors are not caught here; the pipeline decides whether to abort.
"""

from __future__ import annotations
from typing import Iterable, List
import os
import logging

log = logging.getLogger("sentence_producers.output.writer")

def write_lines(lines: Iterable[str], path: str) -> int:
    """Overwrite `path` with `lines`; return the number of lines written."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    tmp = path + ".tmp"
    n = 0
    try:
        with open(tmp, "w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
                n += 1
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise
    log.debug(f"Wrote {n} lines to {path}")
    return n

def read_lines(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8", newline="\n") as f:
        return [line[:-1] if line.endswith("\n") else line for line in f]

def read_sentences(path: str, *, indexed: bool = False) -> List[str]:
    """Read a sentence file written by any producer.

    With `indexed=True` the leading "index<TAB>" is dropped from each line.
    """
    lines = read_lines(path)
    if not indexed:
        return lines
    sentences = []
    for line in lines:
        _, sep, sentence = line.partition("\t")
        sentences.append(sentence if sep else line)
    return sentences
