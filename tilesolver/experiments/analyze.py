#!/usr/bin/env python3
from __future__ import annotations
import argparse, os, sys
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

METRICS = ["expanded", "generated", "duplicates", "time_sec"]

def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)

def load(paths: List[Path]) -> pd.DataFrame:
    frames = []
    for p in paths:
        df = pd.read_csv(p)
        if "algorithm" not in df or "depth" not in df:
            print(f"Skipping {p}: missing algorithm/depth columns")
            continue
        if "solvable" not in df.columns:
            df["solvable"] = 1
        if "termination" not in df.columns:
            df["termination"] = "solved"
        frames.append(df)
    if not frames:
        return pd.DataFrame()
    return pd.concat(frames, ignore_index=True)

def summarize(df: pd.DataFrame, solvable: int = 1) -> pd.DataFrame:
    """Mean and SEM per (algorithm, depth) for the finished runs of one solvability class."""
    if df.empty:
        return df
    part = df[df["solvable"] == solvable]
    if solvable:
        part = part[part["termination"].fillna("solved") == "solved"]
    if part.empty:
        return pd.DataFrame()
    aggs = {}
    present = [m for m in METRICS if m in part.columns]
    for m in present:
        aggs[f"{m}_mean"] = (m, "mean")
        aggs[f"{m}_sem"] = (m, sem)
    aggs["n"] = (present[0], "count")
    g = part.groupby(["algorithm", "depth"], as_index=False).agg(**aggs)
    return g.sort_values(["algorithm", "depth"]).reset_index(drop=True)

def plot_metric(ax, g: pd.DataFrame, metric: str):
    for algo, part in g.groupby("algorithm"):
        ax.errorbar(part["depth"], part[f"{metric}_mean"], yerr=part[f"{metric}_sem"],
                    marker="o", capsize=3, label=algo)
    ax.set_xlabel("Depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs Depth (mean ± SEM)")
    ax.grid(True, alpha=0.25, ls=":")
    ax.legend()

def save_plots(g: pd.DataFrame, outdir: Path, base: str) -> List[Path]:
    outdir.mkdir(parents=True, exist_ok=True)
    saved = []
    metrics = [m for m in METRICS if f"{m}_mean" in g.columns]
    fig, axes = plt.subplots(1, len(metrics), figsize=(5 * len(metrics), 4.5))
    for ax, metric in zip(np.atleast_1d(axes), metrics):
        plot_metric(ax, g, metric)
    fig.tight_layout()
    path = outdir / f"{base}_combined.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved: {path}")
    saved.append(path)
    return saved

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs and save plots.")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load(args.csv)
    if df.empty:
        print("No rows to analyze. Are your CSVs empty?")
        sys.exit(0)

    base = "combo" if len(args.csv) > 1 else args.csv[0].stem
    g = summarize(df, solvable=1)
    print("\n=== Solvable (mean per algorithm/depth) ===")
    print(g.to_string(index=False))

    uns = summarize(df, solvable=0)
    if not uns.empty:
        print("\n=== Unsolvable (mean per algorithm/depth) ===")
        print(uns.to_string(index=False))

    if not g.empty:
        save_plots(g, Path(args.save), base)
    if args.show:
        plt.show()

if __name__ == "__main__":
    main()
