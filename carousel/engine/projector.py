import math
from dataclasses import dataclass

from carousel.common.swaglog import cloudlog
from carousel.engine.config import CarouselConfig
from carousel.engine.geometry import Point, Rect, path_position
from carousel.engine.phase_table import PhaseTable, build_phase_table


@dataclass(frozen=True)
class ProjectedItem:
  position: Point
  scale: float
  tint_intensity: float
  hue: float


def item_hue(item_index: int, item_count: int) -> float:
  return 2 * math.pi * item_index / item_count


def split_index(virtual_index: float, item_count: int) -> tuple[int, float]:
  """Reduce a virtual index to (slot, fraction toward the next slot)."""
  reduced = virtual_index % item_count
  idx = math.floor(reduced)
  if idx >= item_count:  # -tiny % n rounds up to n
    return 0, 0.0
  return idx, reduced - idx


def project(virtual_index: float, table: PhaseTable, rect: Rect, path_radius: float,
            item_index: int = 0) -> ProjectedItem:
  table.require_projectable()
  idx, frac = split_index(virtual_index, table.item_count)

  base_phase = table.phases[idx]
  phase_len = table.phases[idx + 1] - base_phase
  position = path_position(base_phase + frac * phase_len, rect, path_radius)

  lo, hi = table.scales[idx], table.scales[idx + 1]
  scale = lo + (hi - lo) * frac
  return ProjectedItem(position=position, scale=scale, tint_intensity=1.0 - scale,
                       hue=item_hue(item_index, table.item_count))


class ItemProjector:
  def __init__(self, config: CarouselConfig):
    self._config = config
    self._table = build_phase_table(config.item_count)
    self._table.require_projectable()
    cloudlog.debug(f"phase table built for {config.item_count} items: {self._table.phases}")

  @property
  def config(self) -> CarouselConfig:
    return self._config

  @property
  def table(self) -> PhaseTable:
    return self._table

  @property
  def item_count(self) -> int:
    return self._config.item_count

  def project(self, virtual_index: float, rect: Rect, item_index: int = 0) -> ProjectedItem:
    return project(virtual_index, self._table, rect, self._config.path_radius, item_index)

  def project_all(self, scroll_offset: float, rect: Rect) -> list[ProjectedItem]:
    return [self.project(i + scroll_offset, rect, i) for i in range(self.item_count)]
