import json
import logging
import unittest
from unittest import mock

from carousel.common.swaglog import SwagFormatter, SwagLogFileFormatter, cloudlog, get_print_level


class CaptureHandler(logging.Handler):
  def __init__(self, formatter):
    super().__init__(logging.DEBUG)
    self.setFormatter(formatter)
    self.lines: list[str] = []

  def emit(self, record):
    self.lines.append(self.format(record))


class TestSwaglog(unittest.TestCase):
  def setUp(self):
    self.handler = CaptureHandler(SwagFormatter(cloudlog))
    cloudlog.addHandler(self.handler)

  def tearDown(self):
    cloudlog.removeHandler(self.handler)

  def _last(self) -> dict:
    return json.loads(self.handler.lines[-1])

  def test_event_is_structured(self):
    cloudlog.event("carousel.test", settled=3.0)
    d = self._last()
    assert d['msg'] == {'event': 'carousel.test', 'settled': 3.0}
    assert d['level'] == 'INFO'

  def test_debug_event(self):
    cloudlog.event("carousel.test", debug=True)
    assert self._last()['level'] == 'DEBUG'

  def test_error_event(self):
    cloudlog.event("carousel.test", error="boom")
    assert self._last()['level'] == 'ERROR'

  def test_ctx(self):
    with cloudlog.ctx(item_count=8):
      cloudlog.warning("inside")
      assert self._last()['ctx'] == {'item_count': 8}
    cloudlog.warning("outside")
    assert 'item_count' not in self._last()['ctx']

  def test_bind_sticks_for_following_records(self):
    with cloudlog.ctx():
      cloudlog.bind(item_count=8)
      cloudlog.warning("first")
      cloudlog.warning("second")
      assert self._last()["ctx"] == {"item_count": 8}
    cloudlog.warning("after")
    assert "item_count" not in self._last()["ctx"]

  def test_exception_info(self):
    try:
      raise ValueError("bad offset")
    except ValueError:
      cloudlog.exception("failed")
    d = self._last()
    assert d['msg'] == "failed"
    assert "bad offset" in d['exc_info']

  def test_console_format(self):
    formatter = SwagLogFileFormatter(cloudlog)
    record = cloudlog.makeRecord("carousel", logging.WARNING, __file__, 1, "drag rejected: %s", ("nan",), None)
    assert formatter.format(record).startswith("WARNING carousel: drag rejected: nan")


class TestPrintLevel(unittest.TestCase):
  def test_from_env(self):
    with mock.patch.dict("os.environ", {"LOGPRINT": "debug"}):
      assert get_print_level() == logging.DEBUG
    with mock.patch.dict("os.environ", {"LOGPRINT": "nonsense"}):
      assert get_print_level() == logging.WARNING


if __name__ == "__main__":
  unittest.main()
