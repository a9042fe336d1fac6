#!/usr/bin/env python3
"""Deterministic timing harness for parsing notes serially and across threads."""

from __future__ import annotations

import argparse
import time
from concurrent.futures import ThreadPoolExecutor

from plebtext.parser import parse

_NPUB = "npub1" + ("qpzry9x8gf2tvdw0s3jn54khce6mua7l" * 2)[:58]

_TEMPLATES = (
    "gm #nostr {idx} https://example.com/cat-{idx}.png\n\nnostr:" + _NPUB,
    "Check this out: https://youtu.be/dQw4w9WgXcQ). $BTC :zap: #[{mod}]",
    "```python\nprint({idx})\n```\n`inline {idx}` [docs](https://example.com/docs/{idx})",
    "Pay me lnbc{idx}0n1pjexample please!!!\n\n\n\nThanks #zap_{idx}",
)


def _corpus(note_count: int) -> list[str]:
    return [
        _TEMPLATES[idx % len(_TEMPLATES)].format(idx=idx, mod=idx % 5) + (" lorem ipsum" * (idx % 40))
        for idx in range(note_count)
    ]


def _run_serial(notes: list[str], emoji: dict[str, str]) -> tuple[float, list]:
    started = time.perf_counter()
    results = [parse(note, emoji) for note in notes]
    return time.perf_counter() - started, results


def _run_threaded(notes: list[str], emoji: dict[str, str], workers: int) -> tuple[float, list]:
    started = time.perf_counter()
    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(lambda note: parse(note, emoji), notes))
    return time.perf_counter() - started, results


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--notes", type=int, default=5000, help="Number of synthetic notes")
    parser.add_argument("--workers", type=int, nargs="+", default=[1, 4, 8], help="Thread pool sizes")
    args = parser.parse_args()

    notes = _corpus(args.notes)
    emoji = {"zap": "https://example.com/zap.gif"}

    serial_s, expected = _run_serial(notes, emoji)
    print(f"serial           {serial_s:8.3f}s  ({args.notes / serial_s:,.0f} notes/s)")

    for workers in args.workers:
        elapsed, results = _run_threaded(notes, emoji, workers)
        if results != expected:
            raise SystemExit(f"threaded results diverged with {workers} workers")
        print(f"threads={workers:<8d} {elapsed:8.3f}s  ({args.notes / elapsed:,.0f} notes/s)")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
