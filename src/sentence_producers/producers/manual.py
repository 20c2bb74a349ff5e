"""Manually provided sentences.

Lets you override the pipeline with a sentence file that no step generated.
The file is declared as both input and output of the step, so the scheduler
sees it as already produced and `_run_step()` is a no-op. The file is used
as-is: whoever supplied it already formatted (and sampled) it. Consumers read
it through `read_output()` like any other producer's file.

Use sparingly, mostly for testing or hand-curated data.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
import random

from ..config.params import require_param
from ..output.contract import BASE_PARAMS
from .base import SentenceProducer

class ManuallyProvidedSentences(SentenceProducer):
    name = "Manually Provided Sentences"
    valid_params = BASE_PARAMS + ("filename",)

    def __init__(self, params: Dict[str, Any], rng: Optional[random.Random] = None):
        self.filename = require_param(params, "filename", str, owner=self.name)
        super().__init__(params, rng)

    def _resolve_output_file(self) -> str:
        return self.filename

    @property
    def inputs(self):
        return {(self.filename, None)}

    def _run_step(self) -> None:
        pass
