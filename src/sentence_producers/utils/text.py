"""Text normalization and sentence heuristics."""

from __future__ import annotations
import re
import unicodedata
from typing import List, Tuple

_TAG_RE = re.compile(r"<[^>]+>")
# Split after ., ! or ? followed by whitespace and an upper-case letter or digit
_SENT_RE = re.compile(r"(?<=[.!?])\s+(?=[A-Z0-9\"'(])")
_WORD_RE = re.compile(r"[A-Za-z][A-Za-z'-]*")

def sanitize(text: str) -> str:
    """NFC-normalize, remove simple HTML tags and collapse whitespace."""
    if not text:
        return ""
    text = unicodedata.normalize("NFC", text)
    text = _TAG_RE.sub(" ", text)
    return re.sub(r"\s+", " ", text).strip()

def split_sentences(text: str) -> List[str]:
    text = sanitize(text)
    if not text:
        return []
    return [s.strip() for s in _SENT_RE.split(text) if s.strip()]

def word_count(sentence: str) -> int:
    return len(sentence.split())

def content_words(sentence: str) -> List[str]:
    """Alphabetic words, in order. Used as corruption slots and vocabulary."""
    return _WORD_RE.findall(sentence)

def word_spans(sentence: str, min_len: int = 1) -> List[Tuple[int, int]]:
    return [m.span() for m in _WORD_RE.finditer(sentence) if m.end() - m.start() >= min_len]
