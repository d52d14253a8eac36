# src/fastwarp/cli.py
from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.markup import escape
from rich.table import Table

from fastwarp.bench.runner import BenchRow, run_benchmark
from fastwarp.config.defaults import load_config
from fastwarp.dtw.align import align as align_sequences
from fastwarp.dtw.fast import resolution_levels
from fastwarp.errors import FastWarpError
from fastwarp.io.sequences import load_sequence, write_path_csv

app = typer.Typer(add_completion=False, help="FastDTW alignment of scalar sequences.")


def _fail(e: Exception) -> typer.Exit:
    print(f"[red]error:[/red] {escape(str(e))}")
    return typer.Exit(code=1)


def _fmt(v: Optional[float], spec: str) -> str:
    return "-" if v is None else format(v, spec)


@app.command()
def align(
    x_path: Path = typer.Argument(..., help="First sequence (.npy, .csv/.tsv, or plain text)"),
    y_path: Path = typer.Argument(..., help="Second sequence"),
    radius: Optional[int] = typer.Option(None, "--radius", "-r", help="FastDTW radius (default from config: 1)"),
    exact: Optional[bool] = typer.Option(None, "--exact/--fast", help="Full-grid DTW instead of FastDTW"),
    metric: Optional[str] = typer.Option(None, help="Metric for --exact: abs | sq"),
    column: Optional[str] = typer.Option(None, help="Column to read from delimited inputs"),
    out: Optional[Path] = typer.Option(None, help="Write the path as CSV (i,j)"),
    show_path: bool = typer.Option(False, "--show-path", help="Print every path coordinate"),
    config: Optional[Path] = typer.Option(None, help="YAML config (align: section)"),
):
    """Align two sequences and print the distance and warping path."""
    try:
        cfg = load_config(config).align
        cfg = replace(
            cfg,
            radius=cfg.radius if radius is None else int(radius),
            exact=cfg.exact if exact is None else bool(exact),
            metric=cfg.metric if metric is None else metric,
            column=cfg.column if column is None else column,
        )

        x = load_sequence(x_path, column=cfg.column)
        y = load_sequence(y_path, column=cfg.column)
        print(f"Loaded x: {x.size} samples | y: {y.size} samples")

        if cfg.exact:
            print(f"[bold]Exact DTW[/bold] (metric={cfg.metric})")
            res = align_sequences(x, y, radius=None, metric=cfg.metric)
        else:
            levels = resolution_levels(x.size, y.size, cfg.radius)
            print(f"[bold]FastDTW[/bold] (radius={cfg.radius}, levels={levels})")
            res = align_sequences(x, y, radius=cfg.radius)

        print(f"distance: {res.dist:.6g}")
        print(f"path length: {res.steps} | distance/step: {res.dist_per_step:.6g}")
        if show_path:
            print(res.pairs())

        if out is not None:
            write_path_csv(out, res.pairs())
            print("[green]Wrote[/green]", out)
    except (FastWarpError, OSError) as e:
        raise _fail(e) from e


@app.command()
def bench(
    length: Optional[List[int]] = typer.Option(None, "--length", "-n", help="Sequence length (repeatable)"),
    radius: Optional[List[int]] = typer.Option(None, "--radius", "-r", help="FastDTW radius (repeatable)"),
    repeats: Optional[int] = typer.Option(None, help="Timing repeats (best of)"),
    exact_max_len: Optional[int] = typer.Option(None, help="Skip exact DTW above this length"),
    seed: Optional[str] = typer.Option(None, help="Seed label for synthetic data"),
    heartbeat: Optional[Path] = typer.Option(None, help="Progress JSON written after each row"),
    config: Optional[Path] = typer.Option(None, help="YAML config (bench: section)"),
):
    """Time FastDTW against exact DTW on synthetic warped pairs."""
    try:
        cfg = load_config(config).bench
        cfg = replace(
            cfg,
            lengths=tuple(length) if length else cfg.lengths,
            radii=tuple(radius) if radius else cfg.radii,
            repeats=cfg.repeats if repeats is None else int(repeats),
            exact_max_len=cfg.exact_max_len if exact_max_len is None else int(exact_max_len),
            seed_label=cfg.seed_label if seed is None else seed,
            heartbeat=cfg.heartbeat if heartbeat is None else heartbeat,
        )

        print(f"[bold]Benchmark[/bold] lengths={list(cfg.lengths)} radii={list(cfg.radii)} repeats={cfg.repeats}")

        def _progress(row: BenchRow) -> None:
            print(f"  n={row.length} r={row.radius} fast={row.fast_s:.4f}s")

        rows = run_benchmark(cfg, on_row=_progress)
    except (FastWarpError, OSError) as e:
        raise _fail(e) from e

    table = Table(title="fastwarp benchmark")
    for col in ("n", "radius", "levels", "fast s", "exact s", "fast dist", "exact dist", "rel err", "path len"):
        table.add_column(col, justify="right")
    for r in rows:
        table.add_row(
            str(r.length),
            str(r.radius),
            str(r.levels),
            f"{r.fast_s:.4f}",
            _fmt(r.exact_s, ".4f"),
            f"{r.fast_dist:.6g}",
            _fmt(r.exact_dist, ".6g"),
            _fmt(r.rel_err, ".3%"),
            str(r.path_len),
        )
    print(table)
    if cfg.heartbeat is not None:
        print("[green]Wrote[/green]", cfg.heartbeat)


if __name__ == "__main__":
    app()
