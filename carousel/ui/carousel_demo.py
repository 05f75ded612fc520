#!/usr/bin/env python3
import os

import pyray as rl

from carousel.common.swaglog import cloudlog
from carousel.engine import ConfigurationError
from carousel.ui.lib.application import gui_app
from carousel.ui.widgets import Widget
from carousel.ui.widgets.carousel_view import CarouselView

CAROUSEL_WIDTH = 400
CAROUSEL_HEIGHT = 250
CAROUSEL_PADDING = 100
ITEM_SIZE = CAROUSEL_WIDTH // 2
PLACEHOLDER_COUNT = 8
IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".bmp", ".gif")

BACKGROUND_TOP = rl.Color(44, 62, 112, 255)
BACKGROUND_BOTTOM = rl.Color(12, 14, 28, 255)
PLACEHOLDER_COLORS = [
  rl.Color(233, 87, 63, 255),
  rl.Color(246, 187, 66, 255),
  rl.Color(140, 193, 82, 255),
  rl.Color(55, 188, 155, 255),
  rl.Color(59, 175, 218, 255),
  rl.Color(74, 137, 220, 255),
  rl.Color(150, 122, 220, 255),
  rl.Color(215, 112, 173, 255),
]


def image_paths(image_dir: str) -> list[str]:
  return sorted(os.path.join(image_dir, f) for f in os.listdir(image_dir)
                if f.lower().endswith(IMAGE_EXTENSIONS))


def load_textures() -> list[rl.Texture]:
  image_dir = os.getenv("CAROUSEL_IMAGE_DIR")
  if image_dir:
    paths = image_paths(image_dir)
    cloudlog.info(f"loading {len(paths)} images from {image_dir}")
    return [gui_app.texture(p, ITEM_SIZE, ITEM_SIZE) for p in paths]

  return [gui_app.placeholder_texture(str(i + 1), ITEM_SIZE, PLACEHOLDER_COLORS[i % len(PLACEHOLDER_COLORS)])
          for i in range(PLACEHOLDER_COUNT)]


class CarouselDemo(Widget):
  def __init__(self, textures: list[rl.Texture]):
    super().__init__()
    self._carousel = CarouselView(textures)

  def _render(self, rect: rl.Rectangle):
    rl.draw_rectangle_gradient_v(int(rect.x), int(rect.y), int(rect.width), int(rect.height),
                                 BACKGROUND_TOP, BACKGROUND_BOTTOM)
    carousel_rect = rl.Rectangle(rect.x + (rect.width - CAROUSEL_WIDTH) / 2,
                                 rect.y + (rect.height - CAROUSEL_HEIGHT) / 2,
                                 CAROUSEL_WIDTH, CAROUSEL_HEIGHT)
    self._carousel.render(carousel_rect)


def main() -> int:
  try:
    gui_app.init_window("Carousel", CAROUSEL_WIDTH + 2 * CAROUSEL_PADDING, CAROUSEL_HEIGHT + 2 * CAROUSEL_PADDING)
    textures = load_textures()
    cloudlog.bind(item_count=len(textures))
    gui_app.push_widget(CarouselDemo(textures))
    for _ in gui_app.render():
      pass
  except ConfigurationError:
    cloudlog.exception("carousel misconfigured")
    return 1
  finally:
    gui_app.close()
  return 0


if __name__ == "__main__":
  raise SystemExit(main())
