import contextlib
import os

import pytest


@contextlib.contextmanager
def clean_env():
  starting_env = dict(os.environ)
  yield
  os.environ.clear()
  os.environ.update(starting_env)


@pytest.fixture(scope="function", autouse=True)
def carousel_function_fixture(request):
  with clean_env():
    yield
