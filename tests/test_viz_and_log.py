"""Tests for exactrref.viz and exactrref.utils."""
import importlib
import logging

import matplotlib.pyplot as plt
import pytest

from exactrref.matrix.matrix import Matrix
from exactrref.reduce.rref import reduce_to_rref
from exactrref.reduce.trace import Trace
from exactrref.utils.log import setup_logging
from exactrref.viz.draw import draw_trace


def test_draw_trace_one_panel_per_entry():
    trace = reduce_to_rref(Matrix.from_rows([[1, 2], [3, 4]]))
    fig = draw_trace(trace, per_row=4)
    titled = [ax for ax in fig.axes if ax.get_title()]
    assert len(titled) == len(trace)
    assert titled[0].get_title() == "0: initial"
    assert titled[1].get_title() == "1: scaled (step 1)"
    assert titled[4].get_title() == "4: scaled (step 2)"
    plt.close(fig)


def test_draw_trace_saves(tmp_path):
    trace = reduce_to_rref(Matrix.from_rows([[2, 3]]))
    out = tmp_path / "trace.png"
    draw_trace(trace, save_path=str(out))
    assert out.exists()


def test_draw_trace_empty_raises():
    with pytest.raises(ValueError):
        draw_trace(Trace())


def test_setup_logging():
    log = logging.getLogger("exactrref.test_setup_logging")
    setup_logging(log, level="DEBUG")
    assert log.level == logging.DEBUG
    assert any(isinstance(h, logging.StreamHandler) for h in log.handlers)
    fmt = log.handlers[-1].formatter
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
    assert fmt.format(record).endswith("[INFO    ] hello")


def test_draw_trace_figsize_and_large_snapshots():
    trace = reduce_to_rref(Matrix.from_rows([[1, 2, 3], [4, 5, 6]]))
    fig = draw_trace(trace, per_row=2, figsize=(5.0, 7.0), max_cells_to_draw=4)
    width, height = fig.get_size_inches()
    assert (width, height) == (5.0, 7.0)
    assert len(fig.axes) == 2 * ((len(trace) + 1) // 2)
    texts = [t.get_text() for ax in fig.axes for t in ax.texts]
    assert "Too large to draw\n(2x3)" in texts
    plt.close(fig)


def test_setup_logging_twice_keeps_one_handler():
    log = logging.getLogger("exactrref.test_setup_logging_twice")
    setup_logging(log, level="INFO")
    setup_logging(log, level="DEBUG")
    assert len(log.handlers) == 1
    assert log.level == logging.DEBUG


def test_setup_logging_level_from_environment(monkeypatch):
    from exactrref import config

    monkeypatch.setenv("EXACTRREF_LOG_LEVEL", "debug")
    importlib.reload(config)
    try:
        assert config.EXACTRREF_LOG_LEVEL == "DEBUG"
        log = logging.getLogger("exactrref.test_setup_logging_env")
        setup_logging(log)
        assert log.level == logging.DEBUG
    finally:
        monkeypatch.delenv("EXACTRREF_LOG_LEVEL")
        importlib.reload(config)
