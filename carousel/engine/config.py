import math
from dataclasses import dataclass

from carousel.engine.errors import ConfigurationError

PATH_RADIUS = 20.0

# drag normalization: a drag across (width - 2r) * DRAG_DAMPING px moves one item
DRAG_DAMPING = 0.4
# weight of the velocity-predicted end position when settling a drag
MOMENTUM_WEIGHT = 0.3


@dataclass(frozen=True)
class CarouselConfig:
  item_count: int
  path_radius: float = PATH_RADIUS

  def __post_init__(self):
    if isinstance(self.item_count, bool) or not isinstance(self.item_count, int) or self.item_count < 1:
      raise ConfigurationError(f"item_count must be an integer >= 1, got {self.item_count!r}")
    if not math.isfinite(self.path_radius) or self.path_radius < 0:
      raise ConfigurationError(f"path_radius must be finite and >= 0, got {self.path_radius!r}")


@dataclass(frozen=True)
class SpringParams:
  mass: float = 0.1
  stiffness: float = 20.0
  damping: float = 1.5
  initial_velocity: float = 0.0

  def __post_init__(self):
    values = (self.mass, self.stiffness, self.damping, self.initial_velocity)
    if not all(math.isfinite(v) for v in values):
      raise ConfigurationError(f"spring parameters must be finite: {self}")
    if self.mass <= 0 or self.stiffness <= 0 or self.damping < 0:
      raise ConfigurationError(f"spring needs mass > 0, stiffness > 0, damping >= 0: {self}")
