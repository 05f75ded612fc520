from dataclasses import dataclass
from functools import lru_cache

import numpy as np

from carousel.engine.errors import ConfigurationError

MIN_PROJECTABLE_ITEMS = 4

# front slots: left shoulder, center, right shoulder
HERO_PHASES = (0.2, 1.0, 1.8)
HERO_SCALES = (0.3, 1.0, 0.3)
BACK_RUN_START = 3.0
BACK_SCALE = 0.05
# slot 0 one period later, closes the loop
GUARD_PHASE = 5.2
GUARD_SCALE = 0.3


@dataclass(frozen=True)
class PhaseTable:
  item_count: int
  phases: tuple[float, ...]
  scales: tuple[float, ...]

  @property
  def is_empty(self) -> bool:
    return len(self.phases) == 0

  def require_projectable(self) -> None:
    if self.is_empty:
      raise ConfigurationError(f"carousel needs at least {MIN_PROJECTABLE_ITEMS} items to lay out, got {self.item_count}")


@lru_cache(maxsize=32)
def build_phase_table(item_count: int) -> PhaseTable:
  if item_count < MIN_PROJECTABLE_ITEMS:
    return PhaseTable(item_count, (), ())

  # remaining items share the back run, evenly spaced after its start
  back_count = item_count - 3
  step = 1.0 / (item_count - 2)
  back_phases = BACK_RUN_START + step * np.arange(1, back_count + 1)

  phases = np.concatenate([HERO_PHASES, back_phases, [GUARD_PHASE]])
  scales = np.concatenate([HERO_SCALES, np.full(back_count, BACK_SCALE), [GUARD_SCALE]])
  return PhaseTable(item_count, tuple(float(p) for p in phases), tuple(float(s) for s in scales))
