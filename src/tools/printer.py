"""Render a puzzle and its solution to a landscape A4 PDF."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

import project_config
from solver.board import EMPTY, SIZE

INCH_PER_CM = 0.3937007874
PAGE_W_IN = 29.7 * INCH_PER_CM
PAGE_H_IN = 21.0 * INCH_PER_CM

GIVEN_COLOR = "black"
FILLED_COLOR = "#1f7a1f"


def _draw_grid(fig, cells: Sequence[int], givens: Sequence[int], left_in: float, bottom_in: float, size_in: float, title: str) -> None:
    ax = fig.add_axes(
        [left_in / PAGE_W_IN, bottom_in / PAGE_H_IN, size_in / PAGE_W_IN, size_in / PAGE_H_IN],
        frameon=False,
    )
    for i in range(SIZE + 1):
        lw = 1.0 if i % 3 else 2.5
        ax.axvline(i / SIZE, color="k", linewidth=lw)
        ax.axhline(i / SIZE, color="k", linewidth=lw)
    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.axis("off")
    ax.set_title(title, fontsize=12)

    fs = int(0.6 * size_in * 72 / SIZE)
    for idx, value in enumerate(cells):
        if value == EMPTY:
            continue
        r, c = divmod(idx, SIZE)
        color = GIVEN_COLOR if givens[idx] != EMPTY else FILLED_COLOR
        ax.text((c + 0.5) / SIZE, 1 - (r + 0.5) / SIZE, str(value), ha="center", va="center", fontsize=fs, color=color)


def export_pdf(puzzle: Sequence[int], solution: Sequence[int] | None, out_path: str | Path) -> Path:
    """Write ``puzzle`` (left) and ``solution`` (right) on one page.

    Digits the solver filled in are drawn in green.  When ``solution`` is
    ``None`` only the puzzle is drawn with a "no solution" caption.
    """

    margin_in = float(project_config.get_section("pdf.margin_cm", 2.0)) * INCH_PER_CM
    gap_in = float(project_config.get_section("pdf.gap_cm", 2.0)) * INCH_PER_CM
    size_in = min((PAGE_W_IN - 2 * margin_in - gap_in) / 2.0, PAGE_H_IN - 2 * margin_in)
    bottom_in = (PAGE_H_IN - size_in) / 2.0

    out = Path(out_path)
    with PdfPages(out) as pdf:
        fig = plt.figure(figsize=(PAGE_W_IN, PAGE_H_IN))
        _draw_grid(fig, puzzle, puzzle, margin_in, bottom_in, size_in, "Puzzle")
        if solution is not None:
            _draw_grid(fig, solution, puzzle, margin_in + size_in + gap_in, bottom_in, size_in, "Solution")
        else:
            fig.text(0.75, 0.5, "No solution found", ha="center", va="center", fontsize=14)
        pdf.savefig(fig)
        plt.close(fig)
    return out


__all__ = ["export_pdf"]
