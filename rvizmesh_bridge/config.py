from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Union


@dataclass
class BridgeConfig:
    """
    MeshBridge settings.

    cylinder_segments: default polygon count for "cylinder" requests that
                       do not pass their own `segments`
    engine_axes:       convert Z-up middleware output to engine Y-up axes
    normalize_normals: hand unit normals to the sink instead of raw cross products
    log_level:         level for the `rvizmesh_bridge` logger; None leaves it alone
    """
    cylinder_segments: int = 12
    engine_axes: bool = True
    normalize_normals: bool = False
    log_level: Optional[Union[int, str]] = None

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "BridgeConfig":
        known = {f.name for f in fields(BridgeConfig)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ValueError(f"Unknown BridgeConfig keys: {unknown}")
        return BridgeConfig(**d)
