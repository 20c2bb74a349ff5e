"""Show information about a sentence file written by any producer.

Usage:
    python scripts/show_sentence_file.py <sentences.tsv> [--head N]
"""

from __future__ import annotations
import argparse
import os
import sys

from sentence_producers.output import read_lines
from sentence_producers.pipeline.step import in_progress_path

def show_sentence_file(path: str, head: int = 5) -> int:
    print(f"\n{'='*60}")
    print(f"Sentence file: {path}")
    print(f"{'='*60}\n")

    if not os.path.exists(path):
        print("  (missing)")
        return 1
    if os.path.exists(in_progress_path(path)):
        print("  WARNING: in-progress marker present; the producing step did not finish")

    lines = read_lines(path)
    indexed = sum(1 for line in lines if line.partition("\t")[0].isdigit())
    print(f"  Lines:   {len(lines):,}")
    print(f"  Indexed: {indexed:,}")
    print(f"  Size:    {os.path.getsize(path) / 1024:.1f} KB")

    if lines and head > 0:
        print(f"\n  First {min(head, len(lines))} line(s):")
        print("-" * 60)
        for line in lines[:head]:
            print(f"  {line}")
    print()
    return 0

if __name__ == "__main__":
    p = argparse.ArgumentParser()
    p.add_argument("path")
    p.add_argument("--head", type=int, default=5)
    args = p.parse_args()
    sys.exit(show_sentence_file(args.path, args.head))
