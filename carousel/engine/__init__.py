from carousel.engine.config import CarouselConfig, SpringParams, PATH_RADIUS
from carousel.engine.errors import CarouselError, ConfigurationError, InvalidInputError
from carousel.engine.geometry import Point, Rect, path_position
from carousel.engine.phase_table import PhaseTable, build_phase_table
from carousel.engine.projector import ItemProjector, ProjectedItem, project
from carousel.engine.scroll import DragPhase, ScrollController, ScrollState

__all__ = [
  "CarouselConfig", "SpringParams", "PATH_RADIUS",
  "CarouselError", "ConfigurationError", "InvalidInputError",
  "Point", "Rect", "path_position",
  "PhaseTable", "build_phase_table",
  "ItemProjector", "ProjectedItem", "project",
  "DragPhase", "ScrollController", "ScrollState",
]
