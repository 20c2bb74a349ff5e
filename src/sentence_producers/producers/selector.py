"""Sentence selector.

Scans a local corpus and keeps sentences that look like usable training
examples:
- sanitized (NFC, tags stripped, whitespace collapsed)
- word count inside [min words, max words]
- ends with terminal punctuation
- exact duplicates dropped (first occurrence wins)

Output order is corpus order.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Set
import random

from ..config.params import get_param, require_param
from ..errors import ConfigurationError
from ..utils.hashing import sentence_key
from ..utils.text import split_sentences, word_count
from .base import GENERATED_PARAMS, GeneratedSentenceProducer
from .corpus import corpus_inputs, iter_texts

class SentenceSelector(GeneratedSentenceProducer):
    name = "Sentence Selector"
    output_dir_name = "selected"
    valid_params = GENERATED_PARAMS + ("corpus", "text field", "min words", "max words")

    def __init__(self, params: Dict[str, Any], rng: Optional[random.Random] = None):
        super().__init__(params, rng)
        self.corpus = require_param(params, "corpus", (str, list), owner=self.name)
        self.text_field = get_param(params, "text field", "text", str, owner=self.name)
        self.min_words = get_param(params, "min words", 4, int, owner=self.name)
        self.max_words = get_param(params, "max words", 40, int, owner=self.name)
        if self.min_words > self.max_words:
            raise ConfigurationError(
                f"{self.name}: 'min words' ({self.min_words}) > 'max words' ({self.max_words})"
            )

    @property
    def inputs(self):
        return corpus_inputs(self.corpus)

    def keep(self, sentence: str) -> bool:
        if not sentence or sentence[-1] not in ".!?":
            return False
        return self.min_words <= word_count(sentence) <= self.max_words

    def produce_sentences(self) -> List[str]:
        seen: Set[bytes] = set()
        selected: List[str] = []
        for text in iter_texts(self.corpus, self.text_field, progress=True):
            for sentence in split_sentences(text):
                if not self.keep(sentence):
                    continue
                h = sentence_key(sentence)
                if h in seen:
                    continue
                seen.add(h)
                selected.append(sentence)
        return selected
