import math
from typing import NamedTuple

from carousel.common.filter_simple import FirstOrderFilter

MIN_DRAG_DISTANCE = 1.0  # px
# seconds of release velocity projected past the release point
PREDICTION_HORIZON = 0.5
VELOCITY_RC = 0.05


class DragRelease(NamedTuple):
  translation: float
  predicted_translation: float
  was_drag: bool


class DragTracker:
  """Turns horizontal pointer samples into a drag translation and a predicted end translation."""

  def __init__(self, dt: float, min_distance: float = MIN_DRAG_DISTANCE):
    self._min_distance = min_distance
    self._velocity = FirstOrderFilter(0.0, VELOCITY_RC, dt)
    self._start_x = 0.0
    self._last_x = 0.0
    self._last_t = 0.0
    self._tracking = False
    self._dragging = False

  @property
  def is_tracking(self) -> bool:
    return self._tracking

  @property
  def is_dragging(self) -> bool:
    return self._dragging

  @property
  def velocity(self) -> float:
    return self._velocity.x

  def press(self, x: float, t: float) -> None:
    self._start_x = x
    self._last_x = x
    self._last_t = t
    self._velocity.x = 0.0
    self._tracking = True
    self._dragging = False

  def move(self, x: float, t: float) -> float | None:
    if not self._tracking:
      return None

    translation = x - self._start_x
    if not self._dragging and abs(translation) >= self._min_distance:
      self._dragging = True

    self._sample(x, t)
    return translation if self._dragging else None

  def release(self, x: float, t: float) -> DragRelease | None:
    if not self._tracking:
      return None

    self._sample(x, t)
    translation = x - self._start_x
    was_drag = self._dragging or abs(translation) >= self._min_distance
    self._tracking = False
    self._dragging = False

    predicted = translation + self._velocity.x * PREDICTION_HORIZON if was_drag else translation
    return DragRelease(translation, predicted, was_drag)

  def cancel(self) -> None:
    self._tracking = False
    self._dragging = False
    self._velocity.x = 0.0

  def _sample(self, x: float, t: float) -> None:
    dt = t - self._last_t
    if dt > 0 and math.isfinite(x):
      self._velocity.update((x - self._last_x) / dt)
      self._last_x = x
      self._last_t = t
