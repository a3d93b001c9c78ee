# core/config.py
"""Render settings and shared tuning constants."""

import os
from dataclasses import dataclass, replace
from typing import Optional

DEFAULT_MAX_DEPTH = 50
DEFAULT_ASPECT_RATIO = 16.0 / 9.0

# Half-thickness of the slab given to zero-width rectangles.
RECT_THICKNESS = 0.0001
# Step past the first boundary crossing when looking for the medium exit.
MEDIUM_EXIT_OFFSET = 0.0001

LOG_LEVEL = os.environ.get("TRACING_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class RenderSettings:
    width: int = 400
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    samples_per_pixel: int = 100
    max_depth: int = DEFAULT_MAX_DEPTH
    workers: int = 1
    seed: int = 42

    def __post_init__(self):
        if self.width < 1:
            raise ValueError(f"Image width must be at least 1, got {self.width}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"Need at least one sample per pixel, got {self.samples_per_pixel}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"Aspect ratio must be positive, got {self.aspect_ratio}")

    @property
    def height(self) -> int:
        return max(1, int(self.width / self.aspect_ratio))

    def with_overrides(self, **overrides) -> "RenderSettings":
        """Copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


QUALITY_LEVELS = {
    "draft": RenderSettings(width=200, samples_per_pixel=10, max_depth=8),
    "balanced": RenderSettings(width=400, samples_per_pixel=100, max_depth=20),
    "high": RenderSettings(width=800, samples_per_pixel=500, max_depth=DEFAULT_MAX_DEPTH),
}


def settings_for(quality: str = "balanced", aspect_ratio: Optional[float] = None,
                 **overrides) -> RenderSettings:
    try:
        base = QUALITY_LEVELS[quality]
    except KeyError:
        raise ValueError(f"Unknown quality level: {quality!r}") from None
    return base.with_overrides(aspect_ratio=aspect_ratio, **overrides)
