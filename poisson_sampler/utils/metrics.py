# poisson_sampler/utils/metrics.py
from __future__ import annotations
from typing import Any, Dict

import numpy as np
from scipy.spatial import cKDTree

from ..core.types import Extent, as_extent


def compute_metrics(points: np.ndarray, radius: float, extent: Extent) -> Dict[str, Any]:
    """
    Считает метрики набора точек: плотность, расстояния до ближайшего соседа,
    проверку минимального расстояния и строгой вложенности в область.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    (bx, by), (tx, ty) = as_extent(extent)
    area = (tx - bx) * (ty - by)
    count = int(pts.shape[0])

    inside = bool(
        np.all((pts[:, 0] > bx) & (pts[:, 0] < tx) & (pts[:, 1] > by) & (pts[:, 1] < ty))
    )

    if count < 2:
        return {
            "count": count,
            "density": count / area if area > 0 else 0.0,
            "min_nn_distance": float("inf"),
            "mean_nn_distance": float("inf"),
            "separation_ok": True,
            "inside_ok": inside,
        }

    tree = cKDTree(pts)
    # k=2: первый сосед - сама точка
    dist, _ = tree.query(pts, k=2)
    nn = dist[:, 1]

    return {
        "count": count,
        "density": count / area,
        "min_nn_distance": float(nn.min()),
        "mean_nn_distance": float(nn.mean()),
        "separation_ok": bool(nn.min() >= radius),
        "inside_ok": inside,
    }
