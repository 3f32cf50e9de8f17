from __future__ import annotations

import math

import matplotlib.pyplot as plt

from exactrref.reduce.trace import INITIAL, SCALED, Trace


def draw_trace(
    trace: Trace,
    *,
    per_row: int = 4,
    figsize: tuple[float, float] | None = None,
    cell_font_size: int = 10,
    max_cells_to_draw: int = 400,
    save_path: str | None = None,
    show: bool = False,
):
    """
    Draw every snapshot of a reduction trace as a table, in chronological
    order, `per_row` panels per figure row (figsize defaults to 3.2 x 2.4
    inches per panel). Panels are titled
    "<index>: <label>" with the pivot step number for non-initial entries.

    If save_path is set the figure is written there (PNG, 200 dpi) and closed.
    Returns the Figure.
    """
    n = len(trace)
    if n == 0:
        raise ValueError("empty trace; nothing to draw")
    per_row = max(1, per_row)
    n_fig_rows = math.ceil(n / per_row)
    n_fig_cols = min(per_row, n)

    fig, axes = plt.subplots(
        n_fig_rows,
        n_fig_cols,
        figsize=figsize or (3.2 * n_fig_cols, 2.4 * n_fig_rows),
        squeeze=False,
    )
    for ax in axes.flat:
        ax.set_axis_off()

    step = 0
    for i, entry in enumerate(trace):
        ax = axes.flat[i]
        if entry.label == SCALED:
            step += 1
        title = f"{i}: {entry.label}" if entry.label == INITIAL else f"{i}: {entry.label} (step {step})"
        ax.set_title(title, fontsize=cell_font_size + 1)

        M = entry.snapshot
        if M.n_rows * M.n_cols == 0:
            ax.text(0.5, 0.5, "(empty)", ha="center", va="center", transform=ax.transAxes)
            continue
        if M.n_rows * M.n_cols > max_cells_to_draw:
            ax.text(
                0.5,
                0.5,
                f"Too large to draw\n({M.n_rows}x{M.n_cols})",
                ha="center",
                va="center",
                transform=ax.transAxes,
            )
            continue

        cells = [[str(v) for v in row] for row in M.to_lists()]
        table = ax.table(cellText=cells, loc="center", cellLoc="right")
        table.auto_set_font_size(False)
        table.set_fontsize(cell_font_size)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=200)
        plt.close(fig)
    elif show:
        plt.show()

    return fig
