"""Output contract shared by every sentence producer.

Given the ordered candidates a producer computed, we:
1) pair each sentence with its 0-based position
2) format it as "sentence" or "index<TAB>sentence"
3) optionally shuffle and keep the first `max sentences` lines
4) persist the lines, overwriting the output file

Indices are assigned before sampling and never change, so an index always
points back to the candidate's original position. Formatting is pure
(`format_lines`); persistence is `writer.write_lines`.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence
import logging
import random

from ..config.params import get_param, require_param
from ..errors import ConfigurationError
from .writer import write_lines

log = logging.getLogger("sentence_producers.output")

PRODUCER_TYPE_KEY = "sentence producer type"
INDEX_KEY = "create sentence indices"
MAX_SENTENCES_KEY = "max sentences"
SEED_KEY = "random seed"

BASE_PARAMS = (PRODUCER_TYPE_KEY, INDEX_KEY, MAX_SENTENCES_KEY, SEED_KEY)

@dataclass(frozen=True)
class OutputConfig:
    producer_type: str
    create_sentence_indices: bool = False
    max_sentences: Optional[int] = None
    random_seed: Optional[int] = None

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "OutputConfig":
        owner = "output"
        max_sentences = get_param(params, MAX_SENTENCES_KEY, None, int, owner=owner)
        if max_sentences is not None and max_sentences < 0:
            raise ConfigurationError(f"{owner}: '{MAX_SENTENCES_KEY}' must be >= 0, got {max_sentences}")
        return cls(
            producer_type=require_param(params, PRODUCER_TYPE_KEY, str, owner=owner),
            create_sentence_indices=get_param(params, INDEX_KEY, False, bool, owner=owner),
            max_sentences=max_sentences,
            random_seed=get_param(params, SEED_KEY, None, int, owner=owner),
        )

    def make_rng(self) -> random.Random:
        # No seed means fresh OS entropy: repeated runs sample differently
        return random.Random(self.random_seed)

def format_lines(
    candidates: Sequence[str],
    config: OutputConfig,
    rng: Optional[random.Random] = None,
) -> List[str]:
    if config.create_sentence_indices:
        lines = [f"{i}\t{s}" for i, s in enumerate(candidates)]
    else:
        lines = list(candidates)
    if config.max_sentences is None:
        return lines
    rng = rng if rng is not None else config.make_rng()
    rng.shuffle(lines)
    return lines[: config.max_sentences]

class SentenceOutput:
    """Mixin: persists an ordered sentence sequence with formatting/sampling.

    Expects the host class to define `output_config`, `output_file` and `rng`.
    """
    output_config: OutputConfig
    output_file: str
    rng: random.Random

    def output_sentences(self, sentences: Sequence[str]) -> int:
        if log.isEnabledFor(logging.DEBUG):
            raw = sum(1 for s in sentences if "\t" in s or "\n" in s)
            if raw:
                log.debug(f"{raw} sentence(s) contain tab/newline characters; written unescaped")
        lines = format_lines(sentences, self.output_config, self.rng)
        n = write_lines(lines, self.output_file)
        log.info(
            f"Wrote {n}/{len(sentences)} sentences to {self.output_file} "
            f"indexed={self.output_config.create_sentence_indices} max={self.output_config.max_sentences}"
        )
        return n
