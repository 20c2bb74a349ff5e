"""Producer registry.

Producers are configured by "sentence producer type" in the build config.

Adding a new producer:
1) implement a GeneratedSentenceProducer subclass in `sentence_producers.producers.*`
2) register it here under a new ProducerType (static) OR use register_producer() (dynamic)
3) reference it in the build config

Adding a producer never touches the output contract.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Optional
import logging
import random

from ..errors import ConfigurationError
from .base import PRODUCER_TYPE_KEY, ProducerType, SentenceProducer
from .corruptor import KBSentenceCorruptor, SentenceCorruptor
from .manual import ManuallyProvidedSentences
from .question_interpreter import QuestionInterpreter
from .selector import SentenceSelector

log = logging.getLogger("sentence_producers.producers.registry")

ProducerFactory = Callable[[Dict[str, Any], Optional[random.Random]], SentenceProducer]

# Static registry (built-in producers)
_STATIC_REGISTRY: Dict[ProducerType, ProducerFactory] = {
    ProducerType.SENTENCE_SELECTOR: SentenceSelector,
    ProducerType.SENTENCE_CORRUPTOR: SentenceCorruptor,
    ProducerType.KB_SENTENCE_CORRUPTOR: KBSentenceCorruptor,
    ProducerType.QUESTION_INTERPRETER: QuestionInterpreter,
    ProducerType.MANUALLY_PROVIDED: ManuallyProvidedSentences,
}

# Dynamic registry (plugins/extensions)
_DYNAMIC_REGISTRY: Dict[str, ProducerFactory] = {}

def register_producer(kind: str, factory: ProducerFactory) -> None:
    """Register a new producer type dynamically.

    Args:
        kind: Discriminant used as "sentence producer type" in configs
        factory: Callable taking (params, rng) and returning a SentenceProducer

    Example:
        from sentence_producers.producers.registry import register_producer

        register_producer("paraphraser", lambda params, rng: Paraphraser(params, rng))
    """
    if kind in {t.value for t in ProducerType}:
        raise ValueError(f"Producer type '{kind}' is already registered statically. Use a different name.")
    _DYNAMIC_REGISTRY[kind] = factory

def unregister_producer(kind: str) -> None:
    """Unregister a dynamically registered producer."""
    _DYNAMIC_REGISTRY.pop(kind, None)

def list_producers() -> Dict[str, str]:
    """List all registered producer types (static + dynamic)."""
    all_producers = {t.value: "static" for t in _STATIC_REGISTRY}
    for kind in _DYNAMIC_REGISTRY:
        all_producers[kind] = "dynamic"
    return all_producers

def is_registered(kind: str) -> bool:
    return kind in _DYNAMIC_REGISTRY or kind in {t.value for t in _STATIC_REGISTRY}

def make_producer(params: Dict[str, Any], rng: Optional[random.Random] = None) -> SentenceProducer:
    """Create exactly one producer from its params.

    The full params are handed to the producer, which validates its own fields.
    Raises ConfigurationError if the producer type is missing or unknown.
    """
    if not isinstance(params, dict):
        raise ConfigurationError(f"producer params must be a mapping, got {type(params).__name__}")
    kind = params.get(PRODUCER_TYPE_KEY)

    if isinstance(kind, str) and kind in _DYNAMIC_REGISTRY:
        producer = _DYNAMIC_REGISTRY[kind](params, rng)
    else:
        try:
            ptype = ProducerType.parse(kind)
        except ConfigurationError:
            available = list(list_producers())
            raise ConfigurationError(
                f"unrecognized {PRODUCER_TYPE_KEY!r}: {kind!r}. "
                f"Available: {available}. "
                f"Register dynamically with register_producer() or add to registry.py"
            ) from None
        producer = _STATIC_REGISTRY[ptype](params, rng)
    log.debug(f"Created producer {producer!r} for type {kind!r}")
    return producer
