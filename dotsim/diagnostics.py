#!/usr/bin/env python3
"""
Frame diagnostics: average frame time, fps and scene size, logged periodically.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .constants import DIAGNOSTICS_INTERVAL

logger = logging.getLogger(__name__)


@dataclass
class FrameReport:
    frames: int
    fps: float
    frame_ms_avg: float
    dots: int
    edges: int


class FrameDiagnostics:
    def __init__(self, interval: float = DIAGNOSTICS_INTERVAL):
        self.interval = max(0.0, float(interval))
        self._elapsed = 0.0
        self._frames = 0
        self.last_report: Optional[FrameReport] = None

    def record(self, dt: float, dots: int, edges: int) -> Optional[FrameReport]:
        """Account for one frame; returns and logs a report once per interval."""
        self._elapsed += max(0.0, dt)
        self._frames += 1
        if self.interval <= 0 or self._elapsed < self.interval:
            return None

        report = FrameReport(
            frames=self._frames,
            fps=self._frames / self._elapsed,
            frame_ms_avg=1000.0 * self._elapsed / self._frames,
            dots=dots,
            edges=edges,
        )
        logger.info(
            "fps %.1f | frame %.2f ms | dots %d | edges %d",
            report.fps, report.frame_ms_avg, report.dots, report.edges,
        )
        self._elapsed = 0.0
        self._frames = 0
        self.last_report = report
        return report
