# Huffman tree codec
# experiments.py
# 10/19/26

"""
Huffman coding experiments

Runs repeated encode/decode experiments over synthetic datasets and records
how close the code gets to the source entropy, and how long each stage takes

Outputs (in --outdir):
  - metrics.csv     (raw row per run per configuration)
  - summary.csv     (grouped mean/stdev)
  - *.png           (charts)

How to run:
  python experiments.py --outdir results --runs 5
  python experiments.py --outdir results --runs 3 --exp1_size_kb 64 --exp2_max_kb 512
  python experiments.py --outdir results --exp1_generators uniform256,zipf128,english_like --no_exp2

Notes:
  Sizes are reported in bits of the combined encoding. Byte packing is not
  part of the codec, so there is no padding to account for
"""

from __future__ import annotations

import argparse
import csv
import random
import statistics
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from loguru import logger

import huffman as huff


# Utilities

def now_ns() -> int:
    return time.perf_counter_ns()

def ns_to_ms(ns: int) -> float:
    return ns / 1_000_000.0

def safe_mkdir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


# Synthetic dataset generators

def _sample_cdf(rng: random.Random, cdf: List[float]) -> int:
    r = rng.random()
    lo, hi = 0, len(cdf) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if r <= cdf[mid]:
            hi = mid
        else:
            lo = mid + 1
    return lo

def _cdf(weights: List[float]) -> List[float]:
    total = sum(weights)
    cdf = []
    acc = 0.0
    for w in weights:
        acc += w / total
        cdf.append(acc)
    return cdf

def gen_uniform(size: int, alphabet: int = 256, seed: int = 0) -> bytes:
    rng = random.Random(seed)
    return bytes(rng.randrange(0, alphabet) for _ in range(size))

def gen_repetitive(size: int, dominant: int = ord('A'), dom_frac: float = 0.90, seed: int = 0) -> bytes:
    rng = random.Random(seed)
    other_symbols = [i for i in range(256) if i != dominant]
    out = bytearray()
    for _ in range(size):
        if rng.random() < dom_frac:
            out.append(dominant)
        else:
            out.append(rng.choice(other_symbols))
    return bytes(out)

def gen_zipf_like(size: int, alphabet: int = 128, s: float = 1.2, seed: int = 0) -> bytes:
    rng = random.Random(seed)
    cdf = _cdf([1.0 / ((i + 1) ** s) for i in range(alphabet)])
    return bytes(_sample_cdf(rng, cdf) for _ in range(size))

def gen_english_like(size: int, seed: int = 0) -> bytes:
    rng = random.Random(seed)
    chars = (
        " etaoinshrdlcumwfgypbvkjxq"
        "ETAOINSHRDLCUMWFGYPBVKJXQ"
        "\n"
    )
    weights = []
    for ch in chars:
        if ch == ' ':
            weights.append(13.0)
        elif ch == '\n':
            weights.append(1.5)
        elif ch.lower() in "etaoinshrdlu":
            weights.append(6.0)
        elif ch.lower() in "cmfwgypbvk":
            weights.append(2.5)
        else:
            weights.append(1.2)

    cdf = _cdf(weights)
    return bytes(ord(chars[_sample_cdf(rng, cdf)]) for _ in range(size))

def gen_single_symbol(size: int, seed: int = 0) -> bytes:
    return bytes([ord('A')]) * size

GENERATOR_REGISTRY: Dict[str, Callable[[int, int], bytes]] = {
    "uniform256": lambda size, seed: gen_uniform(size, alphabet=256, seed=seed),
    "uniform16": lambda size, seed: gen_uniform(size, alphabet=16, seed=seed),
    "zipf128": lambda size, seed: gen_zipf_like(size, alphabet=128, s=1.2, seed=seed),
    "zipf64": lambda size, seed: gen_zipf_like(size, alphabet=64, s=1.2, seed=seed),
    "repetitive90": lambda size, seed: gen_repetitive(size, dominant=ord('A'), dom_frac=0.90, seed=seed),
    "repetitive99": lambda size, seed: gen_repetitive(size, dominant=ord('A'), dom_frac=0.99, seed=seed),
    "english_like": lambda size, seed: gen_english_like(size, seed=seed),
    "single_symbol": lambda size, seed: gen_single_symbol(size, seed=seed),
}

def generate_dataset(name: str, size_bytes: int, seed: int) -> Tuple[str, bytes]:
    """
    Unknown dataset names fall back to uniform256 so a typo in the
    generator list does not abort a long run
    """
    fn = GENERATOR_REGISTRY.get(name)
    if fn is None:
        logger.warning("unknown generator {!r}, falling back to uniform256", name)
        return f"{name}_fallback_uniform256", gen_uniform(size_bytes, alphabet=256, seed=seed)
    return name, fn(size_bytes, seed)


# Experiment runner

@dataclass
class MetricRow:
    exp_name: str
    dataset_name: str
    size_symbols: int
    run_id: int
    unique_symbols: int

    count_ms: float
    build_tree_ms: float
    derive_table_ms: float
    encode_ms: float
    decode_ms: float
    total_ms: float

    encoded_bits: int
    bits_per_symbol: float
    avg_code_length: float
    entropy_bits: float
    efficiency: float  # entropy / avg code length, 1.0 is optimal
    max_code_length: int
    compression_ratio: float  # encoded bits / (8 * symbols)

    correctness_ok: int  # 1 or 0


def run_one(data: bytes) -> MetricRow:
    symbols = list(data)

    t0 = now_ns()
    freqs = huff.count_frequencies(symbols)
    t1 = now_ns()
    tree = huff.build_tree(freqs)
    t2 = now_ns()
    table = huff.derive_table(tree)
    t3 = now_ns()
    bits = huff.encode_with_table(table, symbols)
    t4 = now_ns()
    decoded = huff.decode(tree, bits)
    t5 = now_ns()

    avg_len = huff.average_code_length(table, freqs)
    h = huff.entropy(freqs)
    n = len(symbols)

    return MetricRow(
        exp_name="",
        dataset_name="",
        size_symbols=n,
        run_id=0,
        unique_symbols=len(freqs),
        count_ms=ns_to_ms(t1 - t0),
        build_tree_ms=ns_to_ms(t2 - t1),
        derive_table_ms=ns_to_ms(t3 - t2),
        encode_ms=ns_to_ms(t4 - t3),
        decode_ms=ns_to_ms(t5 - t4),
        total_ms=ns_to_ms(t5 - t0),
        encoded_bits=len(bits),
        bits_per_symbol=len(bits) / max(1, n),
        avg_code_length=avg_len,
        entropy_bits=h,
        # a one-symbol alphabet has zero entropy and zero-length codes
        efficiency=(h / avg_len) if avg_len > 0 else 1.0,
        max_code_length=max(len(c) for c in table.values()),
        compression_ratio=len(bits) / max(1, 8 * n),
        correctness_ok=1 if decoded == symbols else 0,
    )


def write_csv(path: Path, rows: List[MetricRow]) -> None:
    fields = list(MetricRow.__dataclass_fields__.keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for r in rows:
            w.writerow({k: getattr(r, k) for k in fields})


SUMMARY_METRICS = [
    "bits_per_symbol",
    "entropy_bits",
    "efficiency",
    "compression_ratio",
    "build_tree_ms",
    "encode_ms",
    "decode_ms",
    "total_ms",
]


def mean_stdev(vals: List[float]) -> Tuple[float, float]:
    if len(vals) == 1:
        return vals[0], 0.0
    return statistics.mean(vals), statistics.stdev(vals)


def group_summary(rows: List[MetricRow], out_path: Path) -> None:
    """
    Group by exp_name, dataset_name, size_symbols and compute mean/stdev
    """
    key_to: Dict[Tuple[str, str, int], List[MetricRow]] = {}
    for r in rows:
        key = (r.exp_name, r.dataset_name, r.size_symbols)
        key_to.setdefault(key, []).append(r)

    summary_fields = ["exp_name", "dataset_name", "size_symbols", "n_runs"]
    for m in SUMMARY_METRICS:
        summary_fields += [f"{m}_mean", f"{m}_stdev"]
    summary_fields.append("correctness_ok_rate")

    with out_path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=summary_fields)
        w.writeheader()
        for key, items in sorted(key_to.items()):
            exp_name, dataset_name, size_n = key
            out = {
                "exp_name": exp_name,
                "dataset_name": dataset_name,
                "size_symbols": size_n,
                "n_runs": len(items),
            }
            for m in SUMMARY_METRICS:
                out[f"{m}_mean"], out[f"{m}_stdev"] = mean_stdev([getattr(x, m) for x in items])
            out["correctness_ok_rate"] = sum(x.correctness_ok for x in items) / len(items)
            w.writerow(out)


# Plotting

def plot_experiment_1(rows: List[MetricRow], outdir: Path) -> None:
    exp_rows = [r for r in rows if r.exp_name == "exp1_distribution"]
    if not exp_rows:
        return

    datasets = sorted(set(r.dataset_name for r in exp_rows))

    def mean_for(dataset: str, field: str) -> float:
        vals = [getattr(r, field) for r in exp_rows if r.dataset_name == dataset]
        return statistics.mean(vals) if vals else float("nan")

    x = list(range(len(datasets)))

    plt.figure()
    plt.plot(x, [mean_for(d, "bits_per_symbol") for d in datasets], marker="o", label="huffman")
    plt.plot(x, [mean_for(d, "entropy_bits") for d in datasets], marker="x", linestyle="--", label="entropy")
    plt.xticks(x, datasets, rotation=20, ha="right")
    plt.ylabel("Bits per Symbol")
    plt.title("Experiment 1: Code Length vs Entropy by Distribution")
    plt.legend()
    plt.tight_layout()
    plt.savefig(outdir / "exp1_bits_per_symbol.png", dpi=200)
    plt.close()

    plt.figure()
    for field, label in (("build_tree_ms", "build tree"), ("encode_ms", "encode"), ("decode_ms", "decode")):
        plt.plot(x, [mean_for(d, field) for d in datasets], marker="o", label=label)
    plt.xticks(x, datasets, rotation=20, ha="right")
    plt.ylabel("Time (ms)")
    plt.title("Experiment 1: Stage Times by Distribution")
    plt.legend()
    plt.tight_layout()
    plt.savefig(outdir / "exp1_stage_times.png", dpi=200)
    plt.close()


def plot_experiment_2(rows: List[MetricRow], outdir: Path) -> None:
    exp_rows = [r for r in rows if r.exp_name == "exp2_size_scaling"]
    if not exp_rows:
        return

    distributions = sorted(set(r.dataset_name for r in exp_rows))

    for dist in distributions:
        dist_rows = [r for r in exp_rows if r.dataset_name == dist]
        sizes = sorted(set(r.size_symbols for r in dist_rows))

        def mean_size(size: int, field: str) -> float:
            vals = [getattr(r, field) for r in dist_rows if r.size_symbols == size]
            return statistics.mean(vals) if vals else float("nan")

        plt.figure()
        for field, label in (("encode_ms", "encode"), ("decode_ms", "decode")):
            plt.plot(sizes, [mean_size(s, field) for s in sizes], marker="o", label=label)
        plt.xlabel("Input Size (symbols)")
        plt.ylabel("Time (ms)")
        plt.title(f"Experiment 2: Encode/Decode Time vs Size ({dist})")
        plt.legend()
        plt.tight_layout()
        plt.savefig(outdir / f"exp2_times_{dist}.png", dpi=200)
        plt.close()

        plt.figure()
        plt.plot(sizes, [mean_size(s, "efficiency") for s in sizes], marker="o")
        plt.xlabel("Input Size (symbols)")
        plt.ylabel("Entropy / Average Code Length")
        plt.title(f"Experiment 2: Coding Efficiency vs Size ({dist})")
        plt.tight_layout()
        plt.savefig(outdir / f"exp2_efficiency_{dist}.png", dpi=200)
        plt.close()


# Main

def parse_csv_list(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Huffman coding experiments")
    ap.add_argument("--outdir", type=str, default="results", help="Output directory for CSV and plots")
    ap.add_argument("--runs", type=int, default=5, help="Repetitions per configuration (>=3 recommended for timing)")
    ap.add_argument("--seed", type=int, default=123, help="Base random seed")
    ap.add_argument("--log-level", type=str, default="INFO", help="loguru level for progress output")

    # Experiment toggles
    ap.add_argument("--no_exp1", action="store_true", help="Disable experiment 1 (distribution)")
    ap.add_argument("--no_exp2", action="store_true", help="Disable experiment 2 (size scaling)")

    # Experiment 1 controls
    ap.add_argument("--exp1_size_kb", type=int, default=128, help="Experiment 1 fixed input size in KB")
    ap.add_argument("--exp1_generators", type=str, default="uniform256,zipf128,repetitive90,english_like,single_symbol",
                    help="Comma-separated dataset generator names for experiment 1")

    # Experiment 2 controls
    ap.add_argument("--exp2_min_kb", type=int, default=4, help="Experiment 2 min size in KB (power-of-two growth)")
    ap.add_argument("--exp2_max_kb", type=int, default=1024, help="Experiment 2 max size in KB (power-of-two growth)")
    ap.add_argument("--exp2_generators", type=str, default="uniform256,zipf128,repetitive90",
                    help="Comma-separated dataset generator names for experiment 2")
    return ap

def run_experiments(args: argparse.Namespace) -> List[MetricRow]:
    rows: List[MetricRow] = []

    # Experiment 1: distributions (fixed size)
    if not args.no_exp1:
        fixed_size = max(1, args.exp1_size_kb) * 1024
        for gen_name in parse_csv_list(args.exp1_generators):
            logger.info("exp1: {} at {} symbols", gen_name, fixed_size)
            for run_id in range(1, args.runs + 1):
                dataset_name, data = generate_dataset(gen_name, fixed_size, args.seed + run_id)
                row = run_one(data)
                row.exp_name = "exp1_distribution"
                row.dataset_name = dataset_name
                row.run_id = run_id
                rows.append(row)

    # Experiment 2: size scaling (powers of 2)
    if not args.no_exp2:
        min_bytes = max(1, args.exp2_min_kb) * 1024
        max_bytes = max(1, args.exp2_max_kb) * 1024

        sizes: List[int] = []
        s = min_bytes
        while s <= max_bytes:
            sizes.append(s)
            s *= 2

        for gen_name in parse_csv_list(args.exp2_generators):
            for size_b in sizes:
                logger.info("exp2: {} at {} symbols", gen_name, size_b)
                for run_id in range(1, args.runs + 1):
                    dataset_name, data = generate_dataset(gen_name, size_b, args.seed + 10_000 + size_b + run_id)
                    row = run_one(data)
                    row.exp_name = "exp2_size_scaling"
                    row.dataset_name = dataset_name
                    row.run_id = run_id
                    rows.append(row)

    for r in rows:
        if not r.correctness_ok:
            logger.error("round trip failed: {} run {} ({} symbols)", r.dataset_name, r.run_id, r.size_symbols)
    return rows

def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    outdir = Path(args.outdir)
    safe_mkdir(outdir)

    rows = run_experiments(args)

    # Write raw and summary
    metrics_csv = outdir / "metrics.csv"
    summary_csv = outdir / "summary.csv"
    write_csv(metrics_csv, rows)
    group_summary(rows, summary_csv)

    # Plots
    plot_experiment_1(rows, outdir)
    plot_experiment_2(rows, outdir)

    ok_rate = sum(r.correctness_ok for r in rows) / max(1, len(rows))
    print(f"Wrote {len(rows)} rows to {metrics_csv}")
    print(f"Wrote grouped summary to {summary_csv}")
    print(f"Correctness rate across all runs: {ok_rate:.3f}")
    print("Charts saved in:", outdir.resolve())
    return 0 if ok_rate == 1.0 or not rows else 1


if __name__ == "__main__":
    raise SystemExit(main())
