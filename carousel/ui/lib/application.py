import os
from collections.abc import Generator
from typing import NamedTuple

import pyray as rl

from carousel.common.swaglog import cloudlog

DEFAULT_FPS = int(os.getenv("FPS", "60"))
DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 450


class MousePos(NamedTuple):
  x: float
  y: float


class MouseEvent(NamedTuple):
  pos: MousePos
  slot: int
  left_pressed: bool
  left_released: bool
  left_down: bool
  t: float


class GuiApplication:
  def __init__(self, width: int, height: int):
    self._width = width
    self._height = height
    self._target_fps: int = DEFAULT_FPS
    self._textures: dict[str, rl.Texture] = {}
    self._mouse_events: list[MouseEvent] = []
    self._nav_stack: list = []

  @property
  def target_fps(self) -> int:
    return self._target_fps

  @property
  def mouse_events(self) -> list[MouseEvent]:
    return self._mouse_events

  def init_window(self, title: str, width: int | None = None, height: int | None = None) -> None:
    if width is not None:
      self._width = width
    if height is not None:
      self._height = height

    rl.set_config_flags(rl.ConfigFlags.FLAG_MSAA_4X_HINT | rl.ConfigFlags.FLAG_VSYNC_HINT)
    rl.init_window(self._width, self._height, title)
    rl.set_target_fps(self._target_fps)
    cloudlog.info(f"window initialized {self._width}x{self._height} at {self._target_fps} fps")

  def push_widget(self, widget) -> None:
    self._nav_stack.append(widget)
    widget.show_event()

  def texture(self, asset_path: str, width: int, height: int, keep_aspect_ratio: bool = True) -> rl.Texture:
    cache_key = f"{asset_path}#{width}x{height}#{keep_aspect_ratio}"
    if cache_key in self._textures:
      return self._textures[cache_key]

    if not os.path.isfile(asset_path):
      raise FileNotFoundError(asset_path)
    image = rl.load_image(asset_path)
    if keep_aspect_ratio and image.width > 0 and image.height > 0:
      # cover the requested box, the crop happens at draw time
      scale = max(width / image.width, height / image.height)
      width, height = round(image.width * scale), round(image.height * scale)
    rl.image_resize(image, width, height)
    texture = self._upload(image)
    self._textures[cache_key] = texture
    return texture

  def placeholder_texture(self, label: str, size: int, color: rl.Color) -> rl.Texture:
    cache_key = f"placeholder:{label}#{size}"
    if cache_key in self._textures:
      return self._textures[cache_key]

    image = rl.gen_image_gradient_radial(size, size, 0.2, rl.Color(255, 255, 255, 255), color)
    font_size = size // 3
    text_w = rl.measure_text(label, font_size)
    rl.image_draw_text(image, label, (size - text_w) // 2, (size - font_size) // 2, font_size, rl.Color(20, 20, 30, 255))
    texture = self._upload(image)
    self._textures[cache_key] = texture
    return texture

  def _upload(self, image: rl.Image) -> rl.Texture:
    texture = rl.load_texture_from_image(image)
    rl.unload_image(image)
    rl.set_texture_filter(texture, rl.TextureFilter.TEXTURE_FILTER_BILINEAR)
    return texture

  def _update_mouse_events(self) -> None:
    # single pointer, slot 0
    pos = rl.get_mouse_position()
    self._mouse_events = [MouseEvent(
      MousePos(pos.x, pos.y),
      0,
      rl.is_mouse_button_pressed(rl.MouseButton.MOUSE_BUTTON_LEFT),
      rl.is_mouse_button_released(rl.MouseButton.MOUSE_BUTTON_LEFT),
      rl.is_mouse_button_down(rl.MouseButton.MOUSE_BUTTON_LEFT),
      rl.get_time(),
    )]

  def render(self) -> Generator[None, None, None]:
    while not rl.window_should_close():
      self._update_mouse_events()

      rl.begin_drawing()
      rl.clear_background(rl.BLACK)
      if self._nav_stack:
        self._nav_stack[-1].render(rl.Rectangle(0, 0, self._width, self._height))
      yield
      rl.end_drawing()

  def close(self) -> None:
    if not rl.is_window_ready():
      return
    for texture in self._textures.values():
      rl.unload_texture(texture)
    self._textures.clear()
    rl.close_window()


gui_app = GuiApplication(DEFAULT_WIDTH, DEFAULT_HEIGHT)
