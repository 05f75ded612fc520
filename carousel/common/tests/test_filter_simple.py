import unittest

import hypothesis.strategies as st
from hypothesis import given

from carousel.common.filter_simple import FirstOrderFilter, SpringFilter
from carousel.engine.config import SpringParams

DT = 1 / 60


class TestFirstOrderFilter(unittest.TestCase):
  def test_alpha(self):
    f = FirstOrderFilter(0.0, 0.05, DT)
    assert abs(f.update(1.0) - 0.25) < 1e-12

  @given(st.floats(-100, 100), st.floats(-100, 100))
  def test_monotonic_approach(self, x0, target):
    f = FirstOrderFilter(x0, 0.1, DT)
    prev_err = abs(x0 - target)
    for _ in range(50):
      f.update(target)
      err = abs(f.x - target)
      assert err <= prev_err + 1e-12
      prev_err = err


class TestSpringFilter(unittest.TestCase):
  def test_from_params(self):
    f = SpringFilter.from_params(1.0, SpringParams(initial_velocity=2.0), DT)
    assert f.x == 1.0
    assert f.velocity == 2.0

  def test_not_converged_with_velocity(self):
    f = SpringFilter(0.0, 0.1, 20.0, 1.5, DT, initial_velocity=1.0)
    assert not f.converged(0.0)

  @given(st.floats(-50, 50), st.floats(-50, 50))
  def test_converges(self, x0, target):
    f = SpringFilter.from_params(x0, SpringParams(), DT)
    for _ in range(1200):
      if f.converged(target):
        break
      f.update(target)
    assert f.converged(target), f"x={f.x} v={f.velocity} target={target}"

  def test_overdamped_does_not_overshoot(self):
    f = SpringFilter(0.0, 0.1, 20.0, 4.0, DT)
    for _ in range(600):
      f.update(1.0)
      assert f.x <= 1.0 + 1e-9


if __name__ == "__main__":
  unittest.main()
