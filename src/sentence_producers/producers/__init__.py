"""Sentence producers and the factory that builds them from config."""

from .base import GeneratedSentenceProducer, ProducerType, SentenceProducer, SentenceSource
from .registry import make_producer, register_producer, unregister_producer, list_producers

__all__ = [
    "ProducerType",
    "SentenceProducer",
    "GeneratedSentenceProducer",
    "SentenceSource",
    "make_producer",
    "register_producer",
    "unregister_producer",
    "list_producers",
]
