from __future__ import annotations

import argparse
import json
import statistics
import tempfile
import time
from dataclasses import asdict, dataclass
from typing import Callable

from textglob import FileTextStore, MemoryTextStore, TextStore


@dataclass
class CaseResult:
    backend: str
    case: str
    seconds_mean: float
    seconds_min: float
    seconds_max: float


def _populate(store: TextStore, prefix: str, file_count: int) -> None:
    for i in range(file_count):
        store.write_text(f"{prefix}f{i:05d}.txt", "x")
        store.write_text(f"{prefix}g{i:05d}.log", "y")


def bench_list_names(store: TextStore, pattern: str, expected: int) -> None:
    found = len(store.list_names(pattern))
    if found != expected:
        raise RuntimeError(f"list_names({pattern!r}) found {found}, expected {expected}")


def run_case(
    backend: str,
    case: str,
    fn: Callable[[], None],
    repeat: int,
    warmup: int,
) -> CaseResult:
    for _ in range(warmup):
        fn()

    elapsed_list: list[float] = []
    for _ in range(repeat):
        start = time.perf_counter()
        fn()
        elapsed_list.append(time.perf_counter() - start)

    return CaseResult(
        backend=backend,
        case=case,
        seconds_mean=statistics.mean(elapsed_list),
        seconds_min=min(elapsed_list),
        seconds_max=max(elapsed_list),
    )


def _fmt_ms(seconds: float) -> str:
    return f"{seconds * 1000.0:.2f}"


def print_table(results: list[CaseResult]) -> None:
    print("| Case | Backend | mean(ms) | min(ms) | max(ms) |")
    print("|---|---:|---:|---:|---:|")
    for r in results:
        print(
            f"| {r.case} | {r.backend} | {_fmt_ms(r.seconds_mean)} |"
            f" {_fmt_ms(r.seconds_min)} | {_fmt_ms(r.seconds_max)} |"
        )


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark list_names on MemoryTextStore vs FileTextStore"
    )
    parser.add_argument("--repeat", type=int, default=5)
    parser.add_argument("--warmup", type=int, default=1)
    parser.add_argument("--files", type=int, default=2000)
    parser.add_argument("--json", action="store_true")
    args = parser.parse_args()

    cases = [
        ("star", "f*.txt", args.files),
        ("question_mark", "f0000?.txt", min(args.files, 10)),
        ("exact", "f00000.txt", 1 if args.files else 0),
    ]
    results: list[CaseResult] = []

    memory = MemoryTextStore()
    _populate(memory, "", args.files)
    for case, pattern, expected in cases:
        results.append(
            run_case(
                "MemoryTextStore",
                case,
                lambda p=pattern, e=expected: bench_list_names(memory, p, e),
                args.repeat,
                args.warmup,
            )
        )

    with tempfile.TemporaryDirectory() as td:
        files = FileTextStore()
        prefix = td.replace("\\", "/") + "/"
        _populate(files, prefix, args.files)
        for case, pattern, expected in cases:
            results.append(
                run_case(
                    "FileTextStore",
                    case,
                    lambda p=prefix + pattern, e=expected: bench_list_names(files, p, e),
                    args.repeat,
                    args.warmup,
                )
            )

    if args.json:
        print(json.dumps([asdict(r) for r in results], indent=2))
    else:
        print(f"files per backend: {args.files}")
        print_table(results)


if __name__ == "__main__":
    main()
