class CarouselError(Exception):
  """Base class for carousel engine errors."""


class ConfigurationError(CarouselError, ValueError):
  """The carousel cannot be laid out with this configuration (e.g. too few items)."""


class InvalidInputError(CarouselError, ValueError):
  """An input event carried values the engine refuses to absorb (NaN, inf, empty viewport)."""
