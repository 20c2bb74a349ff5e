"""Pipeline step adapter.

A Step declares what it reads and writes so the scheduler can track it:
- `inputs`: set of (path, upstream step or None)
- `outputs`: set of paths the step produces
- `in_progress_file`: marker present while the step runs

The marker is written before `_run_step()` and removed after it returns. If
the step crashes the marker stays behind and the next run redoes the step.

Staleness is deliberately simple: a step needs to run when one of its outputs
is missing or its marker exists.
"""

from __future__ import annotations
from typing import Optional, Set, Tuple
import os
import time
import logging

log = logging.getLogger("sentence_producers.pipeline")

def in_progress_path(output_file: str) -> str:
    """`data/out.tsv` -> `data/out_in_progress`."""
    return os.path.splitext(output_file)[0] + "_in_progress"

class Step:
    name: str = "step"

    @property
    def inputs(self) -> Set[Tuple[str, Optional["Step"]]]:
        return set()

    @property
    def outputs(self) -> Set[str]:
        return set()

    @property
    def in_progress_file(self) -> str:
        raise NotImplementedError

    def _run_step(self) -> None:
        raise NotImplementedError

    def needs_run(self) -> bool:
        if os.path.exists(self.in_progress_file):
            return True
        return any(not os.path.exists(p) for p in self.outputs)

    def run(self) -> None:
        """Execute the step once, bracketed by the in-progress marker."""
        marker = self.in_progress_file
        parent = os.path.dirname(marker)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(marker, "w", encoding="utf-8") as f:
            f.write(f"{int(time.time() * 1000)}\n")
        t0 = time.time()
        log.info(f"Running step '{self.name}'")
        self._run_step()
        os.remove(marker)
        log.info(f"Finished step '{self.name}' in {time.time() - t0:.2f}s")

    def run_upstream(self) -> None:
        """Run upstream steps; fail if an input without one is missing."""
        for path, upstream in sorted(self.inputs, key=lambda x: x[0]):
            if upstream is not None:
                upstream.run_pipeline()
            elif not os.path.exists(path):
                raise FileNotFoundError(f"Step '{self.name}': input not found: {path}")

    def run_pipeline(self) -> None:
        """Run upstream steps first, then this step if it needs to run."""
        self.run_upstream()
        if self.needs_run():
            self.run()
        else:
            log.info(f"Skipping step '{self.name}': outputs present")
