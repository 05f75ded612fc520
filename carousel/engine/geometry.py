"""
Closed carousel track.

The track is parameterized by a phase with period 5; each unit segment is one
piece of a rounded stadium sitting at the bottom of the viewport:

  [0, 2)  front run, left to right, dipping up into an eased valley
  [2, 3)  right end cap
  [3, 4)  back run, right to left, flat on the bottom edge
  [4, 5)  left end cap
"""
import math
from typing import NamedTuple

from carousel.engine.errors import InvalidInputError

PATH_PERIOD = 5.0


class Point(NamedTuple):
  x: float
  y: float


class Rect(NamedTuple):
  width: float
  height: float

  @classmethod
  def checked(cls, width: float, height: float) -> 'Rect':
    if not (math.isfinite(width) and math.isfinite(height)):
      raise InvalidInputError(f"viewport must be finite, got {width}x{height}")
    return cls(float(width), float(height))


def ease_in_out(p: float) -> float:
  # rational ease, no trig: 0 -> 0, 0.5 -> 0.5, 1 -> 1, flat at both ends
  p2 = p * p
  q2 = (1.0 - p) * (1.0 - p)
  return p2 / (p2 + q2)


def path_position(phase: float, rect: Rect, path_radius: float) -> Point:
  p = phase % PATH_PERIOD
  if p >= PATH_PERIOD:  # -tiny % 5 rounds up to 5
    p = 0.0

  r = path_radius
  line_segment = rect.width - 2 * r
  valley_depth = rect.height / 3
  baseline = rect.height - 2 * r

  if p < 1.0:
    x = p / 2 * line_segment + r
    y = baseline - ease_in_out(p) * valley_depth
  elif p < 2.0:
    x = p / 2 * line_segment + r
    y = baseline - ease_in_out(2.0 - p) * valley_depth
  elif p < 3.0:
    angle = -math.pi / 2 + (p - 2.0) * math.pi
    x = r + line_segment + math.cos(angle) * r
    y = rect.height - r + math.sin(angle) * r
  elif p < 4.0:
    x = rect.width - r - (p - 3.0) * line_segment
    y = rect.height
  else:
    angle = math.pi / 2 + (p - 4.0) * math.pi
    x = r + math.cos(angle) * r
    y = rect.height - r + math.sin(angle) * r

  return Point(x, y)
