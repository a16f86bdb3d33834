# renderer/config.py
import os
from dataclasses import dataclass, field

from core.errors import ConfigError

def default_threads() -> int:
    """Number of logical CPUs, or 1 when it cannot be determined."""
    return os.cpu_count() or 1

@dataclass
class RenderConfig:
    """
    Render settings supplied by the caller (normally the command line).
    """
    width: int = 200
    height: int = 100
    samples_per_pixel: int = 100
    max_depth: int = 50
    threads: int = field(default_factory=default_threads)
    seed: int = 0
    tile_size: int = 32
    bvh: bool = True

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def validate(self) -> "RenderConfig":
        """
        Check every field, raising ConfigError on the first invalid one.
        Returns self so it can be chained.
        """
        minimums = (
            ("width", 1),
            ("height", 1),
            ("samples_per_pixel", 1),
            ("max_depth", 0),
            ("threads", 1),
            ("tile_size", 1),
        )
        for name, minimum in minimums:
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value < minimum:
                rule = "must be > 0" if minimum == 1 else f"must be >= {minimum}"
                raise ConfigError(f"{name} {rule}, got {value}")
        if not isinstance(self.seed, int) or self.seed < 0:
            raise ConfigError(f"seed must be a non-negative integer, got {self.seed!r}")
        return self
