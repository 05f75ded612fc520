import json
import logging
import os
import sys
from contextlib import contextmanager
from threading import local


def get_print_level() -> int:
  level = getattr(logging, os.getenv("LOGPRINT", "warning").upper(), None)
  return level if isinstance(level, int) else logging.WARNING


class SwagFormatter(logging.Formatter):
  def __init__(self, swaglogger):
    logging.Formatter.__init__(self, None, '%a %b %d %H:%M:%S %Z %Y')
    self.swaglogger = swaglogger

  def format_dict(self, record):
    record_dict = {}
    if isinstance(record.msg, dict):
      record_dict['msg'] = record.msg
    else:
      try:
        record_dict['msg'] = record.getMessage()
      except (ValueError, TypeError):
        record_dict['msg'] = [record.msg] + list(record.args or ())

    record_dict['ctx'] = self.swaglogger.get_ctx()
    if record.exc_info:
      record_dict['exc_info'] = self.formatException(record.exc_info)

    record_dict['level'] = record.levelname
    record_dict['levelnum'] = record.levelno
    record_dict['name'] = record.name
    record_dict['filename'] = record.filename
    record_dict['lineno'] = record.lineno
    record_dict['created'] = record.created
    return record_dict

  def format(self, record):
    return json.dumps(self.format_dict(record), default=repr)


class SwagLogFileFormatter(SwagFormatter):
  """Human readable single-line records for the console."""

  def format(self, record):
    d = self.format_dict(record)
    msg = d['msg']
    if isinstance(msg, dict):
      msg = json.dumps(msg, default=repr)
    ctx = f" {json.dumps(d['ctx'], default=repr)}" if d['ctx'] else ""
    s = f"{d['level']:<7} {d['name']}: {msg}{ctx}"
    if 'exc_info' in d:
      s += "\n" + d['exc_info']
    return s


class SwagLogger(logging.Logger):
  def __init__(self):
    logging.Logger.__init__(self, "carousel")

    self.log_local = local()
    self.log_local.ctx = {}

  def local_ctx(self):
    try:
      return self.log_local.ctx
    except AttributeError:
      self.log_local.ctx = {}
      return self.log_local.ctx

  def get_ctx(self):
    return dict(self.local_ctx())

  @contextmanager
  def ctx(self, **kwargs):
    old_ctx = self.local_ctx()
    self.log_local.ctx = dict(old_ctx, **kwargs)
    try:
      yield
    finally:
      self.log_local.ctx = old_ctx

  def bind(self, **kwargs):
    self.local_ctx().update(kwargs)

  def event(self, event, *args, **kwargs):
    evt = {'event': event}
    if args:
      evt['args'] = args
    evt.update(kwargs)
    if 'error' in kwargs:
      self.error(evt)
    elif 'debug' in kwargs:
      self.debug(evt)
    else:
      self.info(evt)


cloudlog = log = SwagLogger()
log.setLevel(logging.DEBUG)

outhandler = logging.StreamHandler(sys.stderr)
outhandler.setLevel(get_print_level())
outhandler.setFormatter(SwagLogFileFormatter(log))
log.addHandler(outhandler)
