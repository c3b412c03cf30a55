from __future__ import annotations

from typing import Any

import numpy as np

from .axes import ros_to_engine


def pointcloud_xyz(points: Any) -> np.ndarray:
    """
    Extract (N,3) float64 xyz from a point cloud.

    Accepts a structured array with x/y/z fields (other fields such as
    intensity are ignored) or a plain (N, >=3) array.
    """
    arr = np.asarray(points)
    if arr.dtype.names is not None:
        missing = [c for c in ("x", "y", "z") if c not in arr.dtype.names]
        if missing:
            raise ValueError(f"Point cloud is missing fields: {missing}")
        return np.stack([arr["x"], arr["y"], arr["z"]], axis=-1).reshape(-1, 3).astype(np.float64)
    if arr.ndim != 2 or arr.shape[1] < 3:
        raise ValueError(f"Point cloud must be structured or (N,>=3), got shape {arr.shape}")
    return arr[:, :3].astype(np.float64)


def pointcloud_to_engine(points: Any) -> np.ndarray:
    """xyz in engine axes as float32, rows with NaN/inf dropped."""
    xyz = pointcloud_xyz(points)
    xyz = xyz[np.isfinite(xyz).all(axis=1)]
    return ros_to_engine(xyz).astype(np.float32)
