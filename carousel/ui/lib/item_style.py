"""How a projected item is painted: frame, crop, corner rounding, tint and stacking."""
import colorsys
import math

from carousel.engine.geometry import Rect
from carousel.engine.projector import ProjectedItem

BASE_CORNER_RADIUS = 16.0
# overlay base color, rotated by each item's hue
OVERLAY_COLOR = (255, 110, 72)


def item_size(viewport: Rect) -> float:
  return viewport.width / 2


def corner_radius(scale: float, size: float) -> float:
  # unscaled frame; receding items round off toward a circle
  return BASE_CORNER_RADIUS + size * (1.0 - scale)


def item_roundness(scale: float, size: float) -> float:
  if size <= 0:
    return 1.0
  return min(1.0, corner_radius(scale, size) / (size / 2))


def item_dest_rect(item: ProjectedItem, size: float, origin: tuple[float, float] = (0.0, 0.0)) -> tuple[float, float, float, float]:
  side = size * item.scale
  return (origin[0] + item.position.x - side / 2,
          origin[1] + item.position.y - side / 2,
          side, side)


def fill_source_rect(width: float, height: float) -> tuple[float, float, float, float]:
  """Centered square crop, so images fill the square frame without distortion."""
  side = min(width, height)
  return ((width - side) / 2, (height - side) / 2, side, side)


def hue_rotate(rgb: tuple[int, int, int], radians: float) -> tuple[int, int, int]:
  h, s, v = colorsys.rgb_to_hsv(*(c / 255 for c in rgb))
  h = (h + radians / (2 * math.pi)) % 1.0
  return tuple(round(c * 255) for c in colorsys.hsv_to_rgb(h, s, v))


def overlay_color(item: ProjectedItem) -> tuple[int, int, int, int]:
  r, g, b = hue_rotate(OVERLAY_COLOR, item.hue)
  alpha = round(255 * min(max(item.tint_intensity, 0.0), 1.0))
  return r, g, b, alpha


def paint_order(items: list[ProjectedItem]) -> list[int]:
  """Back to front: smallest first, ties keep slot order."""
  return sorted(range(len(items)), key=lambda i: items[i].scale)


def hit_test(items: list[ProjectedItem], size: float, origin: tuple[float, float],
             point: tuple[float, float]) -> int | None:
  px, py = point
  for i in reversed(paint_order(items)):
    x, y, w, h = item_dest_rect(items[i], size, origin)
    if x <= px <= x + w and y <= py <= y + h:
      return i
  return None
