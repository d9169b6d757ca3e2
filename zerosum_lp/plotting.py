"""
Strategy plots
==============

Optional post-solve visualization. For a payoff matrix with 2 or 3 rows,
each column strategy j becomes one named line segment; the renderer draws
them. Nothing here is called by the solver unless the caller asks for it.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrategySegment:
    name: str
    coords: Tuple[np.ndarray, ...]   # one length-2 array per axis

    @property
    def dim(self) -> int:
        return len(self.coords)


class Renderer(Protocol):
    def draw(self, segments: Sequence[StrategySegment]) -> None: ...


def strategy_segments(payoff) -> List[StrategySegment]:
    """
    One segment per column strategy when the payoff has 2 or 3 rows:
        x = (0, M[0, j]),  y = (1, M[1, j]),  z = (1, M[2, j])
    Any other row count yields no segments.
    """
    M = np.asarray(payoff, dtype=np.float64)
    m, n = M.shape
    if m not in (2, 3):
        return []

    starts = (0.0,) + (1.0,) * (m - 1)
    segments = []
    for j in range(n):
        coords = tuple(np.array([starts[i], M[i, j]]) for i in range(m))
        segments.append(StrategySegment(name=f"Strategy {j}", coords=coords))
    return segments


class MatplotlibRenderer:
    """Draw strategy segments on 2-D or 3-D axes; optionally save to disk."""

    def __init__(self, save_path: Optional[str] = None, title: str = "Column strategies",
                 figsize=(6, 6), dpi: int = 150):
        self.save_path = save_path
        self.title = title
        self.figsize = figsize
        self.dpi = dpi

    def draw(self, segments: Sequence[StrategySegment]) -> None:
        if not segments:
            return

        dim = segments[0].dim
        if any(seg.dim != dim for seg in segments):
            raise ValueError("cannot mix 2-D and 3-D strategy segments in one plot")

        fig = plt.figure(figsize=self.figsize)
        try:
            if dim == 3:
                ax = fig.add_subplot(projection="3d")
            else:
                ax = fig.add_subplot()
            for seg in segments:
                ax.plot(*seg.coords, label=seg.name)
            ax.set_title(self.title)
            ax.legend(loc="lower center")
            if dim == 2:
                ax.grid(True, alpha=0.3)

            if self.save_path:
                folder = os.path.dirname(self.save_path)
                if folder:
                    os.makedirs(folder, exist_ok=True)
                fig.savefig(self.save_path, dpi=self.dpi, bbox_inches="tight")
                logger.info("saved strategy plot to %s", self.save_path)
        finally:
            plt.close(fig)
