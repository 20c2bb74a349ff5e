"""Sentence corruptors.

Both corruptors turn positive sentences (the output of a nested producer,
configured under "positive data") into negative training sentences by
swapping one word for a different word.

- SentenceCorruptor: replacement words come from the positives themselves.
- KBSentenceCorruptor: replacement words come from a background corpus, and
  a corruption is rejected if it occurs verbatim as a corpus sentence (it
  would not be a negative).
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence, Set
import logging
import random

from ..config.params import get_param, require_param
from ..errors import ConfigurationError
from ..utils.hashing import sentence_key
from ..utils.text import content_words, split_sentences, word_spans
from .base import GENERATED_PARAMS, GeneratedSentenceProducer
from .corpus import corpus_inputs, iter_texts

log = logging.getLogger("sentence_producers.producers.corruptor")

MIN_SLOT_CHARS = 3

def build_vocabulary(sentences: Sequence[str]) -> List[str]:
    return sorted({w.lower() for s in sentences for w in content_words(s) if len(w) >= MIN_SLOT_CHARS})

def corrupt_sentence(sentence: str, vocabulary: Sequence[str], rng: random.Random, tries: int = 10) -> Optional[str]:
    """Replace one random word of `sentence` with a different vocabulary word.

    Returns None when the sentence has no replaceable word or the vocabulary
    offers no alternative.
    """
    slots = word_spans(sentence, MIN_SLOT_CHARS)
    if not slots or not vocabulary:
        return None
    start, end = rng.choice(slots)
    original = sentence[start:end]
    for _ in range(tries):
        word = rng.choice(vocabulary)
        if word.lower() != original.lower():
            break
    else:
        return None
    if original[0].isupper():
        word = word[0].upper() + word[1:]
    return sentence[:start] + word + sentence[end:]

class SentenceCorruptor(GeneratedSentenceProducer):
    name = "Sentence Corruptor"
    output_dir_name = "corrupted"
    valid_params = GENERATED_PARAMS + ("positive data", "corruptions per sentence")

    def __init__(self, params: Dict[str, Any], rng: Optional[random.Random] = None):
        super().__init__(params, rng)
        self.corruptions_per_sentence = get_param(params, "corruptions per sentence", 1, int, owner=self.name)
        if self.corruptions_per_sentence < 1:
            raise ConfigurationError(f"{self.name}: 'corruptions per sentence' must be >= 1")
        self.positive_producer = self._make_upstream("positive data")

    @property
    def inputs(self):
        return {(self.positive_producer.output_file, self.positive_producer)}

    def vocabulary(self, positives: Sequence[str]) -> List[str]:
        return build_vocabulary(positives)

    def accept(self, corrupted: str, original: str) -> bool:
        return corrupted != original

    def max_attempts(self) -> int:
        return 1

    def produce_sentences(self) -> List[str]:
        positives = self.positive_producer.read_output()
        vocabulary = self.vocabulary(positives)
        corrupted: List[str] = []
        skipped = 0
        for sentence in positives:
            for _ in range(self.corruptions_per_sentence):
                for _ in range(self.max_attempts()):
                    c = corrupt_sentence(sentence, vocabulary, self.rng)
                    if c is not None and self.accept(c, sentence):
                        corrupted.append(c)
                        break
                else:
                    skipped += 1
        if skipped:
            log.info(f"{self.name}: {skipped} corruption(s) skipped (no acceptable replacement)")
        return corrupted

class KBSentenceCorruptor(SentenceCorruptor):
    name = "KB Sentence Corruptor"
    output_dir_name = "kb_corrupted"
    valid_params = SentenceCorruptor.valid_params + ("corpus", "text field", "max attempts")

    def __init__(self, params: Dict[str, Any], rng: Optional[random.Random] = None):
        super().__init__(params, rng)
        self.corpus = require_param(params, "corpus", (str, list), owner=self.name)
        self.text_field = get_param(params, "text field", "text", str, owner=self.name)
        self._max_attempts = get_param(params, "max attempts", 10, int, owner=self.name)
        if self._max_attempts < 1:
            raise ConfigurationError(f"{self.name}: 'max attempts' must be >= 1")
        self._corpus_hashes: Set[bytes] = set()
        self._corpus_sentences: List[str] = []

    @property
    def inputs(self):
        return super().inputs | corpus_inputs(self.corpus)

    def _load_corpus(self) -> None:
        self._corpus_hashes.clear()
        self._corpus_sentences = []
        for text in iter_texts(self.corpus, self.text_field, progress=True):
            for sentence in split_sentences(text):
                self._corpus_hashes.add(sentence_key(sentence))
                self._corpus_sentences.append(sentence)
        log.info(f"{self.name}: loaded {len(self._corpus_sentences)} corpus sentences")

    def vocabulary(self, positives: Sequence[str]) -> List[str]:
        self._load_corpus()
        return build_vocabulary(self._corpus_sentences)

    def accept(self, corrupted: str, original: str) -> bool:
        return corrupted != original and sentence_key(corrupted) not in self._corpus_hashes

    def max_attempts(self) -> int:
        return self._max_attempts
