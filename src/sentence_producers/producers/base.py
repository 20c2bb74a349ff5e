"""Sentence producer interface.

A producer is two small capabilities joined with a pipeline Step:
- SentenceSource: computes an ordered list of candidate sentences
- SentenceOutput: formats/samples/persists them (shared output contract)

Generating producers subclass GeneratedSentenceProducer, implement
`produce_sentences()` and declare `valid_params`. The base class reads the
shared output params and resolves the output file; GeneratedSentenceProducer
wires `_run_step()` to the output contract.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional, Set, Tuple
import logging
import os
import random

from ..config.params import ensure_no_extras, get_param, require_param
from ..errors import ConfigurationError
from ..output.contract import BASE_PARAMS, PRODUCER_TYPE_KEY, SEED_KEY, OutputConfig, SentenceOutput
from ..output.writer import read_sentences
from ..pipeline.step import Step, in_progress_path
from ..utils.hashing import params_fingerprint

log = logging.getLogger("sentence_producers.producers")

OUTPUT_DIR_KEY = "output directory"
OUTPUT_FILE_KEY = "output file"
DEFAULT_OUTPUT_DIR = os.path.join("data", "sentences")

# Params holding a nested producer config (validated recursively at load time)
NESTED_PRODUCER_KEYS = ("positive data",)

GENERATED_PARAMS = BASE_PARAMS + (OUTPUT_DIR_KEY, OUTPUT_FILE_KEY)

class ProducerType(str, Enum):
    SENTENCE_SELECTOR = "sentence selector"
    SENTENCE_CORRUPTOR = "sentence corruptor"
    KB_SENTENCE_CORRUPTOR = "kb sentence corruptor"
    QUESTION_INTERPRETER = "question interpreter"
    MANUALLY_PROVIDED = "manually provided"

    @classmethod
    def parse(cls, value: Any) -> "ProducerType":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise ConfigurationError(
            f"unrecognized {PRODUCER_TYPE_KEY!r}: {value!r}. "
            f"Available: {[t.value for t in cls]}"
        )

class SentenceSource(ABC):
    """Produces an ordered sentence sequence."""

    @abstractmethod
    def produce_sentences(self) -> List[str]:
        ...

class SentenceProducer(Step, SentenceOutput):
    """Step whose output is a sentence file in the shared format.

    Subclasses that compute candidates derive from GeneratedSentenceProducer;
    a producer whose file already exists (manually provided) derives from
    this class directly and never touches the output contract.
    """
    name: str = "sentence producer"
    output_dir_name: str = "sentences"
    valid_params: Tuple[str, ...] = GENERATED_PARAMS

    def __init__(self, params: Dict[str, Any], rng: Optional[random.Random] = None):
        ensure_no_extras(params, self.valid_params, owner=self.name)
        self.params = params
        self.output_config = OutputConfig.from_params(params)
        self.rng = rng if rng is not None else self.output_config.make_rng()
        self._output_file = self._resolve_output_file()

    def _resolve_output_file(self) -> str:
        explicit = get_param(self.params, OUTPUT_FILE_KEY, None, str, owner=self.name)
        if explicit:
            return explicit
        out_dir = get_param(self.params, OUTPUT_DIR_KEY, DEFAULT_OUTPUT_DIR, str, owner=self.name)
        fp = params_fingerprint({k: v for k, v in self.params.items() if k != OUTPUT_DIR_KEY})
        return os.path.join(out_dir, self.output_dir_name, f"sentences_{fp[:12]}.tsv")

    @property
    def output_file(self) -> str:
        return self._output_file

    @property
    def outputs(self) -> Set[str]:
        return {self.output_file}

    @property
    def in_progress_file(self) -> str:
        return in_progress_path(self.output_file)

    def read_output(self) -> List[str]:
        """Sentences of the output file, index prefixes dropped."""
        return read_sentences(
            self.output_file,
            indexed=self.output_config.create_sentence_indices,
        )

    def _make_upstream(self, key: str) -> "SentenceProducer":
        """Build the nested producer configured under `key`."""
        from .registry import make_producer

        nested = require_param(self.params, key, dict, owner=self.name)
        # Child draws from our source unless it pins its own seed
        pinned = nested.get(SEED_KEY) is not None
        child_rng = None if pinned else random.Random(self.rng.getrandbits(64))
        return make_producer(nested, rng=child_rng)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(output_file={self.output_file!r})"

class GeneratedSentenceProducer(SentenceProducer, SentenceSource):
    """Producer that computes candidates and hands them to the output contract."""

    def _run_step(self) -> None:
        sentences = self.produce_sentences()
        log.info(f"{self.name}: produced {len(sentences)} candidate sentences")
        self.output_sentences(sentences)
