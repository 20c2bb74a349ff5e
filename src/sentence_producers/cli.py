"""CLI entrypoint.

Commands:
- `sentence-producers run --config configs/build.yaml [--seed N] [--force]`
- `sentence-producers list`

`run` loads the build config (the producer type is validated on load), builds
the producer and runs it after its upstream steps. Outputs that already exist
are skipped unless `--force` is given.
"""

from __future__ import annotations
import argparse
import random
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from .config.loader import PRODUCER_SECTION, load_build_config
from .logging_ import setup_logging
from .producers.registry import list_producers, make_producer
from .run_id import resolve_log_dir, resolve_run_id

def _print_producers(console: Console) -> None:
    table = Table(title="Sentence producer types")
    table.add_column("sentence producer type", style="cyan")
    table.add_column("registry")
    for kind, where in list_producers().items():
        table.add_row(kind, where)
    console.print(table)

def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="sentence-producers")
    sub = p.add_subparsers(dest="cmd", required=True)

    pr = sub.add_parser("run", help="Run the configured sentence producer")
    pr.add_argument("--config", required=True)
    pr.add_argument("--seed", type=int, default=None, help="Seed for sampling/corruption (overrides config)")
    pr.add_argument("--force", action="store_true", help="Re-run the producer even if its output exists")

    sub.add_parser("list", help="List registered producer types")

    args = p.parse_args(argv)
    console = Console()

    if args.cmd == "list":
        _print_producers(console)
        return 0

    cfg = load_build_config(args.config)
    run_id = resolve_run_id(cfg)
    log_path = setup_logging(resolve_log_dir(cfg), run_id)

    rng = random.Random(args.seed) if args.seed is not None else None
    producer = make_producer(cfg[PRODUCER_SECTION], rng=rng)
    if args.force:
        producer.run_upstream()
        producer.run()
    else:
        producer.run_pipeline()
    console.print(f"[green]{producer.name}[/green] -> {producer.output_file}  (log: {log_path})")
    return 0

if __name__ == "__main__":
    sys.exit(main())
