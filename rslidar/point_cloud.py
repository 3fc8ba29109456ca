"""Point types and the point cloud message."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar


@dataclass
class PointXYZI:
    """Point with position and intensity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    intensity: int = 0


@dataclass
class PointXYZIRT:
    """Point with position, intensity, ring and timestamp."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    intensity: int = 0
    ring: int = 0
    timestamp: float = 0.0


PointT = TypeVar("PointT")


@dataclass
class PointCloud(Generic[PointT]):
    """A frame of points with its metadata."""

    height: int = 0
    width: int = 0
    is_dense: bool = False
    timestamp: float = 0.0
    frame_id: str = "rslidar"
    seq: int = 0
    points: List[PointT] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)