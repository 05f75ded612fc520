import pyray as rl

from carousel.common.swaglog import cloudlog
from carousel.engine import CarouselConfig, InvalidInputError, ItemProjector, ProjectedItem, Rect, ScrollController, SpringParams
from carousel.ui.lib.application import gui_app, MouseEvent
from carousel.ui.lib.drag_tracker import DragTracker
from carousel.ui.lib.item_style import fill_source_rect, hit_test, item_dest_rect, item_roundness, item_size, overlay_color, paint_order
from carousel.ui.widgets import Widget

PADDING = 16
ROUNDED_SEGMENTS = 12
OUTLINE_WIDTH = 2
OUTLINE_COLOR = rl.Color(255, 255, 255, 90)


class CarouselView(Widget):
  def __init__(self, textures: list[rl.Texture], spring: SpringParams | None = None):
    super().__init__()
    self._textures = textures
    self._projector = ItemProjector(CarouselConfig(item_count=len(textures)))
    # a non-positive fps is rejected by the controller
    dt = 1 / gui_app.target_fps if gui_app.target_fps > 0 else 0.0
    self._controller = ScrollController(self._projector.config.path_radius, spring=spring, dt=dt)
    self._tracker = DragTracker(dt)

    self._items: list[ProjectedItem] = []
    self._viewport = Rect(0.0, 0.0)

  @property
  def controller(self) -> ScrollController:
    return self._controller

  @property
  def _origin(self) -> tuple[float, float]:
    return self._rect.x + PADDING, self._rect.y + PADDING

  def _update_layout_rects(self) -> None:
    self._viewport = Rect.checked(self._rect.width, self._rect.height)

  def _update_state(self):
    if self._tracker.is_tracking and not rl.is_window_focused():
      self._tracker.cancel()
      self._controller.on_drag_cancelled()
    self._controller.update()

  def _layout(self) -> None:
    self._items = self._projector.project_all(self._controller.current_offset(), self._viewport)

  def _handle_mouse_event(self, mouse_event: MouseEvent) -> None:
    x, t = mouse_event.pos.x, mouse_event.t
    width = self._viewport.width
    try:
      if mouse_event.left_pressed:
        self._tracker.press(x, t)

      elif mouse_event.left_released:
        release = self._tracker.release(x, t)
        if release is None:
          return
        if release.was_drag:
          self._controller.on_drag_changed(release.translation, width)
          self._controller.on_drag_ended(release.predicted_translation, width)
        elif hit_test(self._items, item_size(self._viewport), self._origin, mouse_event.pos) is not None:
          self._controller.tap_advance()

      elif mouse_event.left_down:
        translation = self._tracker.move(x, t)
        if translation is not None:
          self._controller.on_drag_changed(translation, width)

    except InvalidInputError:
      cloudlog.warning("carousel input rejected", exc_info=True)

  def _render(self, rect: rl.Rectangle):
    size = item_size(self._viewport)
    origin = self._origin

    for i in paint_order(self._items):
      item = self._items[i]
      texture = self._textures[i]
      dest = rl.Rectangle(*item_dest_rect(item, size, origin))
      if dest.width <= 0:
        continue

      src = rl.Rectangle(*fill_source_rect(texture.width, texture.height))
      rl.draw_texture_pro(texture, src, dest, rl.Vector2(0, 0), 0.0, rl.WHITE)

      roundness = item_roundness(item.scale, size)
      rl.draw_rectangle_rounded(dest, roundness, ROUNDED_SEGMENTS, rl.Color(*overlay_color(item)))
      rl.draw_rectangle_rounded_lines_ex(dest, roundness, ROUNDED_SEGMENTS, OUTLINE_WIDTH, OUTLINE_COLOR)
