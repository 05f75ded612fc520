import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from carousel.common.filter_simple import SpringFilter
from carousel.common.swaglog import cloudlog
from carousel.engine.config import DRAG_DAMPING, MOMENTUM_WEIGHT, SpringParams
from carousel.engine.errors import ConfigurationError, InvalidInputError

DEFAULT_DT = 1 / 60


class DragPhase(IntEnum):
  IDLE = 0
  DRAGGING = 1


@dataclass(frozen=True)
class ScrollState:
  committed_offset: float
  live_delta: float
  is_dragging: bool

  @property
  def scroll_offset(self) -> float:
    return self.committed_offset + self.live_delta


def round_half_away(x: float) -> float:
  return math.copysign(math.floor(abs(x) + 0.5), x)


def _check_finite(name: str, value: float) -> None:
  if not math.isfinite(value):
    raise InvalidInputError(f"{name} must be finite, got {value}")


class ScrollController:
  """
  Owns the carousel scroll offset.

  Drags move the offset 1:1 with the pointer; releasing settles onto a whole
  item and animates there through the interpolator. Inputs are validated before
  any state changes, so a rejected event leaves the controller untouched.
  """

  def __init__(self, path_radius: float, spring: SpringParams | None = None, dt: float = DEFAULT_DT,
               interpolator_factory: Callable[[float], object] | None = None, initial_offset: float = 0.0):
    if not math.isfinite(path_radius) or path_radius < 0:
      raise ConfigurationError(f"path_radius must be finite and >= 0, got {path_radius!r}")
    if not math.isfinite(dt) or dt <= 0:
      raise ConfigurationError(f"dt must be finite and > 0, got {dt!r}")
    _check_finite("initial_offset", initial_offset)
    self._path_radius = path_radius
    self._spring = spring if spring is not None else SpringParams()
    self._dt = dt
    if interpolator_factory is None:
      interpolator_factory = lambda x0: SpringFilter.from_params(x0, self._spring, self._dt)
    self._interpolator_factory = interpolator_factory

    self._phase = DragPhase.IDLE
    self._committed_offset = float(initial_offset)
    self._live_delta = 0.0
    # last raw translation of the current drag, used when the drag is cancelled
    self._last_delta_width = 0.0
    self._last_rect_width: float | None = None

    self._animator = None

  @property
  def phase(self) -> DragPhase:
    return self._phase

  @property
  def is_dragging(self) -> bool:
    return self._phase == DragPhase.DRAGGING

  @property
  def is_animating(self) -> bool:
    return self._animator is not None

  @property
  def committed_offset(self) -> float:
    return self._committed_offset

  @property
  def live_delta(self) -> float:
    return self._live_delta

  @property
  def state(self) -> ScrollState:
    return ScrollState(self._committed_offset, self._live_delta, self.is_dragging)

  def normalize_drag(self, delta_width: float, rect_width: float) -> float:
    _check_finite("drag translation", delta_width)
    _check_finite("rect width", rect_width)
    run = rect_width - 2 * self._path_radius
    if run <= 0:
      raise InvalidInputError(f"rect width {rect_width} leaves no straight run for path radius {self._path_radius}")
    return delta_width / (run * DRAG_DAMPING)

  def current_offset(self) -> float:
    if self.is_dragging:
      return self._committed_offset + self._live_delta
    if self._animator is not None:
      return self._animator.x
    return self._committed_offset

  def begin_drag(self) -> None:
    if self.is_dragging:
      return

    if self._animator is not None:
      # grab the carousel mid-flight
      self._committed_offset = self._animator.x
      self._animator = None

    self._phase = DragPhase.DRAGGING
    self._live_delta = 0.0
    self._last_delta_width = 0.0
    self._last_rect_width = None

  def on_drag_changed(self, delta_width: float, rect_width: float) -> float:
    normalized = self.normalize_drag(delta_width, rect_width)
    self.begin_drag()
    self._live_delta = normalized
    self._last_delta_width = delta_width
    self._last_rect_width = rect_width
    return self.current_offset()

  def on_drag_ended(self, predicted_delta_width: float, rect_width: float) -> float:
    if not self.is_dragging:
      return self._committed_offset

    predicted = self._committed_offset + self.normalize_drag(predicted_delta_width, rect_width)
    scroll_offset = self._committed_offset + self._live_delta
    # 0.7 * actual + 0.3 * predicted
    settled = round_half_away(scroll_offset + MOMENTUM_WEIGHT * (predicted - scroll_offset))

    cloudlog.event("carousel.drag_settled", debug=True, scroll_offset=scroll_offset,
                   predicted=predicted, settled=settled)
    self._committed_offset = settled
    self._live_delta = 0.0
    self._phase = DragPhase.IDLE
    self._animate_from(scroll_offset)
    return settled

  def on_drag_cancelled(self) -> float:
    if not self.is_dragging:
      return self._committed_offset

    if self._last_rect_width is None:
      # nothing moved yet, but the grab may have stopped a settle mid-flight
      start = self._committed_offset
      self._committed_offset = round_half_away(start)
      self._live_delta = 0.0
      self._phase = DragPhase.IDLE
      self._animate_from(start)
      return self._committed_offset

    cloudlog.info("drag cancelled, settling without momentum")
    return self.on_drag_ended(self._last_delta_width, self._last_rect_width)

  def tap_advance(self) -> bool:
    if self.is_dragging:
      return False

    start = self.current_offset()
    self._committed_offset += 1.0
    cloudlog.event("carousel.tap_advance", debug=True, committed_offset=self._committed_offset)
    if self._animator is None:
      self._animate_from(start)
    return True

  def update(self) -> float:
    if self._animator is not None:
      self._animator.update(self._committed_offset)
      if self._animator.converged(self._committed_offset):
        self._animator = None
    return self.current_offset()

  def _animate_from(self, start: float) -> None:
    animator = self._interpolator_factory(start)
    self._animator = None if animator.converged(self._committed_offset) else animator
