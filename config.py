"""
BloodLink configuration.

Every setting can be overridden from the environment; create_app() also
accepts a mapping of overrides (tests use it to point DATA_DIR at a
temporary directory).
"""

import logging
import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


DATA_DIR = os.environ.get('BLOODLINK_DATA_DIR', os.path.join(BASE_DIR, 'data'))
SECRET_KEY = os.environ.get('SECRET_KEY', 'bloodlink-secret-key-dev')
HOST = os.environ.get('BLOODLINK_HOST', '0.0.0.0')
PORT = int(os.environ.get('BLOODLINK_PORT', '5000'))
DEBUG = _env_flag('BLOODLINK_DEBUG')
LOG_LEVEL = os.environ.get('BLOODLINK_LOG_LEVEL', 'INFO').upper()

DEFAULTS = {
    'DATA_DIR': DATA_DIR,
    'SECRET_KEY': SECRET_KEY,
    'LOG_LEVEL': LOG_LEVEL,
}


def configure_logging(level=LOG_LEVEL):
    """Timestamped log lines on stderr"""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='[%(asctime)s] %(levelname)s %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )
