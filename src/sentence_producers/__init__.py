"""sentence_producers

Config-driven producers of training sentences behind one output contract.

Public API surface:
- sentence_producers.cli.main : CLI entrypoint
- sentence_producers.producers.registry.make_producer : build a producer from params
- sentence_producers.output : formatting, sampling and persistence of sentence files
- sentence_producers.pipeline.step : minimal step adapter (inputs/outputs/in-progress marker)

Every producer writes "[sentence]" or "[index][tab][sentence]" lines, so consumers
never care which producer made a file.
"""
__all__ = ["__version__"]
__version__ = "0.1.0"
