from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.types import Extent


@dataclass(frozen=True)
class SamplingPreset:
    id: str
    radius: float
    extent: Extent
    max_attempts: int
    seed: Optional[int] = None

    @property
    def area(self) -> float:
        (bx, by), (tx, ty) = self.extent
        return (tx - bx) * (ty - by)

    def to_dict(self) -> Dict[str, Any]:
        (bx, by), (tx, ty) = self.extent
        return {
            "id": self.id,
            "radius": self.radius,
            "extent": {
                "bottom_left": [bx, by],
                "top_right": [tx, ty],
            },
            "max_attempts": self.max_attempts,
            "seed": self.seed,
        }
