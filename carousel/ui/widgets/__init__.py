from __future__ import annotations

import abc

import pyray as rl

from carousel.ui.lib.application import gui_app, MouseEvent


class Widget(abc.ABC):
  """
  Base for everything drawn by gui_app.

  A frame is `render(rect)`: update state, lay out, draw, then dispatch this
  frame's pointer events. A press inside the rect captures the pointer until
  release, so drags that leave the rect keep reaching the widget.
  """

  def __init__(self):
    self._rect = rl.Rectangle(0, 0, 0, 0)
    self._pointer_captured = False

  def set_rect(self, rect: rl.Rectangle) -> None:
    resized = (rect.x, rect.y, rect.width, rect.height) != (self._rect.x, self._rect.y, self._rect.width, self._rect.height)
    self._rect = rect
    if resized:
      self._update_layout_rects()

  def render(self, rect: rl.Rectangle | None = None):
    if rect is not None:
      self.set_rect(rect)

    self._update_state()
    self._layout()
    ret = self._render(self._rect)
    self._dispatch_pointer()
    return ret

  def _dispatch_pointer(self) -> None:
    for event in gui_app.mouse_events:
      if event.slot != 0:
        continue

      if event.left_pressed:
        inside = rl.check_collision_point_rec(rl.Vector2(event.pos.x, event.pos.y), self._rect)
        self._pointer_captured = inside
      elif not self._pointer_captured:
        continue

      if self._pointer_captured:
        self._handle_mouse_event(event)
      if event.left_released:
        self._pointer_captured = False

  def _update_state(self) -> None:
    """Per-frame state, before layout."""

  def _layout(self) -> None:
    """Per-frame child layout, before drawing."""

  @abc.abstractmethod
  def _render(self, rect: rl.Rectangle):
    """Draw into rect."""

  def _update_layout_rects(self) -> None:
    """Called when the rect moves or resizes."""

  def _handle_mouse_event(self, mouse_event: MouseEvent) -> None:
    """Pointer events while captured, press included."""

  def show_event(self) -> None:
    pass
