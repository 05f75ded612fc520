import pyray as rl
rl.set_config_flags(rl.ConfigFlags.FLAG_WINDOW_HIDDEN)

import unittest
from unittest import mock

from carousel.engine import ConfigurationError
from carousel.ui.lib.application import gui_app, MousePos, MouseEvent
from carousel.ui.widgets.carousel_view import PADDING, CarouselView

DT = 1 / 60
CAROUSEL_RECT = rl.Rectangle(0, 0, 400, 250)
# hero slot center at offset 0, (200, 210 - 250 / 3) plus padding
HERO_POS = (200 + PADDING, 210 - 250 / 3 + PADDING)
EMPTY_POS = (414, 18)


def press(x, y, t):
  return MouseEvent(MousePos(x, y), 0, True, False, True, t)


def hold(x, y, t):
  return MouseEvent(MousePos(x, y), 0, False, False, True, t)


def release(x, y, t):
  return MouseEvent(MousePos(x, y), 0, False, True, False, t)


class TestCarouselView(unittest.TestCase):
  @classmethod
  def setUpClass(cls):
    gui_app.init_window("test-carousel-view")
    cls.textures = [gui_app.placeholder_texture(str(i), 200, rl.Color(60, 120, 200, 255)) for i in range(8)]

  @classmethod
  def tearDownClass(cls):
    gui_app.close()

  def setUp(self):
    self.view = CarouselView(self.textures)
    self.view.set_rect(CAROUSEL_RECT)
    self.view._layout()

  def _send(self, *events):
    for event in events:
      self.view._handle_mouse_event(event)
      self.view._layout()

  def _settle(self, max_frames: int = 600):
    controller = self.view.controller
    for _ in range(max_frames):
      if not controller.is_animating:
        break
      controller.update()
    assert not controller.is_animating, "animation did not settle"

  def test_tap_on_item_advances(self):
    self._send(press(*HERO_POS, 0.0), release(*HERO_POS, 0.1))
    assert self.view.controller.committed_offset == 1.0
    assert self.view.controller.is_animating
    self._settle()
    assert self.view.controller.current_offset() == 1.0

  def test_tap_on_background_is_ignored(self):
    self._send(press(*EMPTY_POS, 0.0), release(*EMPTY_POS, 0.1))
    assert self.view.controller.committed_offset == 0.0
    assert not self.view.controller.is_animating

  def test_drag_settles_on_whole_item(self):
    x, y = HERO_POS
    events = [press(x, y, 0.0)]
    events += [hold(x - 10 * k, y, k * DT) for k in range(1, 11)]
    assert self.view.controller.current_offset() == 0.0

    self._send(*events)
    controller = self.view.controller
    assert controller.is_dragging
    assert controller.current_offset() < 0

    self._send(release(x - 100, y, 11 * DT))
    assert not controller.is_dragging
    assert controller.committed_offset < 0
    assert controller.committed_offset == round(controller.committed_offset)
    self._settle()
    assert controller.current_offset() == controller.committed_offset

  def test_rejected_drag_leaves_offset(self):
    self.view.set_rect(rl.Rectangle(0, 0, 30, 250))
    x, y = 10, 100
    self._send(press(x, y, 0.0), hold(x + 20, y, DT), release(x + 20, y, 2 * DT))
    controller = self.view.controller
    assert not controller.is_dragging
    assert controller.current_offset() == 0.0

  def test_render_frame(self):
    rl.begin_drawing()
    self.view.render(CAROUSEL_RECT)
    rl.end_drawing()
    assert len(self.view._items) == 8

  def test_too_few_items(self):
    with self.assertRaises(ConfigurationError):
      CarouselView(self.textures[:3])

  def test_zero_fps_rejected(self):
    with mock.patch.object(gui_app, "_target_fps", 0):
      with self.assertRaises(ConfigurationError):
        CarouselView(self.textures)


if __name__ == "__main__":
  unittest.main()
