class FirstOrderFilter:
  def __init__(self, x0: float, rc: float, dt: float):
    self.x = x0
    self._alpha = dt / (rc + dt)

  def update(self, x: float) -> float:
    self.x = (1. - self._alpha) * self.x + self._alpha * x
    return self.x

  def converged(self, target: float, tol: float = 1e-4) -> bool:
    return abs(self.x - target) < tol


class SpringFilter:
  """
  Mass-spring-damper pulled toward the target passed to update().

  Integrated with semi-implicit Euler at a fixed dt, so it stays stable for
  stiffness/mass ratios well above what UI springs use.
  """
  POS_TOL = 1e-4
  VEL_TOL = 1e-3

  def __init__(self, x0: float, mass: float, stiffness: float, damping: float, dt: float,
               initial_velocity: float = 0.0):
    self.x = x0
    self.velocity = initial_velocity
    self._mass = mass
    self._stiffness = stiffness
    self._damping = damping
    self._dt = dt

  @classmethod
  def from_params(cls, x0: float, params, dt: float) -> 'SpringFilter':
    return cls(x0, params.mass, params.stiffness, params.damping, dt, params.initial_velocity)

  def update(self, target: float) -> float:
    accel = (self._stiffness * (target - self.x) - self._damping * self.velocity) / self._mass
    self.velocity += accel * self._dt
    self.x += self.velocity * self._dt
    return self.x

  def converged(self, target: float) -> bool:
    return abs(self.x - target) < self.POS_TOL and abs(self.velocity) < self.VEL_TOL
