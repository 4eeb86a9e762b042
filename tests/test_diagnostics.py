import logging

import pytest

from dotsim.diagnostics import FrameDiagnostics


def test_reports_once_per_interval(caplog):
    diag = FrameDiagnostics(interval=1.0)

    with caplog.at_level(logging.INFO, logger="dotsim.diagnostics"):
        assert diag.record(0.5, dots=3, edges=1) is None
        report = diag.record(0.5, dots=4, edges=2)

    assert report is not None
    assert report.frames == 2
    assert report.fps == pytest.approx(2.0)
    assert report.frame_ms_avg == pytest.approx(500.0)
    assert (report.dots, report.edges) == (4, 2)
    assert diag.last_report is report
    assert "dots 4 | edges 2" in caplog.text

    # Counters restart after a report
    assert diag.record(0.5, dots=4, edges=2) is None


def test_zero_interval_disables_reports():
    diag = FrameDiagnostics(interval=0)
    assert diag.record(5.0, dots=1, edges=0) is None
    assert diag.last_report is None
