"""
Pong Logging

Small leveled logger shared by the simulation core and the pygame host.
Each module asks for its own named logger; levels can be set globally or
per module, from code or from the environment.

Usage:
    from pong.logging import get_logger

    log = get_logger('loop')
    log.debug("Tick %d", tick)
    log.info("Match started")

Configuration:
    Environment variables:
        PONG_LOG_LEVEL=DEBUG          # Global default level
        PONG_LOG_LOOP=TRACE           # Module-specific level
        PONG_LOG_SESSION=WARNING

    Or programmatically:
        from pong.logging import configure_logging
        configure_logging(level='DEBUG', modules={'physics': 'INFO'})
"""

import os
import sys
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional, TextIO


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Per-tick detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


_LEVEL_NAMES: Dict[str, LogLevel] = {
    'TRACE': LogLevel.TRACE,
    'DEBUG': LogLevel.DEBUG,
    'INFO': LogLevel.INFO,
    'WARNING': LogLevel.WARNING,
    'WARN': LogLevel.WARNING,
    'ERROR': LogLevel.ERROR,
    'CRITICAL': LogLevel.CRITICAL,
    'OFF': LogLevel.OFF,
}

_ENV_PREFIX = 'PONG_LOG_'

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'stream': None,          # None = sys.stderr at write time
}


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel, defaulting to INFO."""
    return _LEVEL_NAMES.get(level_str.strip().upper(), LogLevel.INFO)


def _module_key(module: str) -> str:
    return module.lower().replace('.', '_').replace('/', '_')


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
        stream: Where formatted lines go (default: stderr)
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][_module_key(mod)] = _level_from_string(mod_level)

    if stream is not None:
        _config['stream'] = stream


def _load_env_config() -> None:
    """Load levels from PONG_LOG_LEVEL and PONG_LOG_<MODULE> variables."""
    if 'PONG_LOG_LEVEL' in os.environ:
        _config['default_level'] = _level_from_string(os.environ['PONG_LOG_LEVEL'])

    for key, value in os.environ.items():
        if key.startswith(_ENV_PREFIX) and key != 'PONG_LOG_LEVEL':
            module_name = key[len(_ENV_PREFIX):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)


_load_env_config()


class PongLogger:
    """
    Logger for a specific module.

    Lines are written as ``[module] LEVEL: message``.
    """

    def __init__(self, module: str):
        self.module = module
        self._module_key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        return _config['module_levels'].get(self._module_key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _write(self, line: str) -> None:
        stream = _config['stream'] or sys.stderr
        stream.write(line + "\n")

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        self._write(f"[{self.module}] {level_name}: {msg}")

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (very verbose)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def warn(self, msg: str, *args) -> None:
        """Alias for warning()."""
        self.warning(msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def critical(self, msg: str, *args) -> None:
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)

    def exception(self, msg: str, *args, exc: Optional[BaseException] = None) -> None:
        """
        Log an error followed by a traceback.

        Args:
            msg: Message describing what failed
            exc: Exception to format (uses the one being handled if None)
        """
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

        if exc is not None:
            tb_lines = traceback.format_exception(type(exc), exc, exc.__traceback__)
        else:
            tb_lines = traceback.format_exc().splitlines()

        for chunk in tb_lines:
            for line in chunk.rstrip().split('\n'):
                if line.strip() and line.strip() != 'NoneType: None':
                    self._log(LogLevel.ERROR, 'TRACE', line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> PongLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.
    """
    return PongLogger(module)


def disable_logging() -> None:
    """Disable all logging."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()
