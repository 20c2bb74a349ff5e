"""Output contract: formatting, sampling and persistence of sentence files."""

from .contract import OutputConfig, SentenceOutput, format_lines, BASE_PARAMS
from .writer import write_lines, read_lines, read_sentences

__all__ = [
    "OutputConfig",
    "SentenceOutput",
    "format_lines",
    "BASE_PARAMS",
    "write_lines",
    "read_lines",
    "read_sentences",
]
