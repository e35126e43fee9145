"""Unified logging configuration for chromakit entrypoints.

The library modules only ever call ``logging.getLogger(__name__)``; handlers
are installed exclusively by an application (the ``chromakit`` CLI, a test,
or a caller embedding the library) through :func:`setup_logging`:
    - Console and file handlers with rotation
    - JSON output mode for ingestion (ELK, Vector, etc.)
    - Contextual fields (command, model, metric)
    - Warning capture (Python warnings → logging)
    - Uncaught exception logging

Public API:
    setup_logging(log_level="INFO", context={"app": "chromakit"})
    get_logger(name)
    push_context(command="blend", model="hcl")
    pop_context(keys=["model"])
    install_excepthook()

Format examples:
    Human: 2026-10-17T13:45:12.345Z | INFO     | app=chromakit command=blend | Message
    JSON: {"t":"2026-10-17T13:45:12.345000+00:00","lvl":"INFO","command":"blend","msg":"..."}

Context uses contextvars for thread isolation.
Idempotent: repeated setup_logging() calls don't duplicate handlers.
"""

import contextvars
import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


# Context variable for per-thread contextual fields
_context_var = contextvars.ContextVar('logging_context', default={})

# Handlers installed by setup_logging (removed again on reconfiguration)
_installed_handlers: List[logging.Handler] = []


class ContextFormatter(logging.Formatter):
    """Formatter that appends contextual fields to every record.

    Supports:
        - Human-readable format with colors (optional)
        - JSON format for machine ingestion
        - Contextual fields from push_context()
    """

    def __init__(
        self,
        fmt_mode: str = "human",
        use_color: bool = True,
        tz: str = "UTC"
    ):
        super().__init__()
        if fmt_mode not in ("human", "json"):
            raise ValueError(f"Unknown format mode: {fmt_mode}. Use 'human' or 'json'.")
        self.fmt_mode = fmt_mode
        self.use_color = use_color and sys.stderr.isatty()
        self.tz = tz

        # ANSI color codes
        self.colors = {
            'DEBUG': '\033[36m',    # Cyan
            'INFO': '\033[32m',     # Green
            'WARNING': '\033[33m',  # Yellow
            'ERROR': '\033[31m',    # Red
            'CRITICAL': '\033[35m', # Magenta
            'RESET': '\033[0m'
        }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record."""
        context = _context_var.get({})

        if self.tz == "UTC":
            ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        else:
            ts = datetime.fromtimestamp(record.created)

        if self.fmt_mode == "json":
            return self._format_json(record, ts, context)
        return self._format_human(record, ts, context)

    def _format_json(
        self,
        record: logging.LogRecord,
        ts: datetime,
        context: dict
    ) -> str:
        """Format as JSON line."""
        log_dict = {
            't': ts.isoformat(),
            'lvl': record.levelname,
            'name': record.name,
            'pid': os.getpid(),
            'msg': record.getMessage()
        }
        log_dict.update(context)

        if record.exc_info:
            log_dict['exc'] = self.formatException(record.exc_info)

        return json.dumps(log_dict, default=str)

    def _format_human(
        self,
        record: logging.LogRecord,
        ts: datetime,
        context: dict
    ) -> str:
        """Format as human-readable line."""
        ts_str = ts.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'

        level = record.levelname
        if self.use_color:
            level = f"{self.colors.get(level, '')}{level:8s}{self.colors['RESET']}"
        else:
            level = f"{level:8s}"

        parts = [ts_str, '|', level, '|']
        context_str = ' '.join(f"{k}={v}" for k, v in context.items())
        if context_str:
            parts.extend([context_str, '|'])
        parts.append(record.getMessage())

        line = ' '.join(parts)
        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    *,
    json: bool = False,
    json_console: bool = False,
    color: bool = True,
    to_stderr: bool = True,
    rotate: Optional[Dict[str, Any]] = None,
    tz: str = "UTC",
    capture_warnings: bool = True,
    quiet_libs: Optional[List[str]] = None,
    context: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Configure root logger (idempotent).

    Parameters
    ----------
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
    log_file : str, optional
        Log file path; None for no file logging
    json : bool
        Use JSON format for the file handler, default False
    json_console : bool
        Use JSON format for the console handler, default False
    color : bool
        Use ANSI colors in console output, default True
    to_stderr : bool
        Log to stderr (console), default True
    rotate : dict, optional
        Rotation config:
        - {"mode": "size", "max_bytes": 10_000_000, "backup_count": 5}
        - {"mode": "time", "when": "D", "interval": 1, "backup_count": 7}
    tz : str
        Timezone for timestamps, "UTC" (default) or "local"
    capture_warnings : bool
        Capture Python warnings to logging, default True
    quiet_libs : list[str], optional
        Library names to set to WARNING level (e.g., ["PIL"])
    context : dict, optional
        Initial contextual fields (e.g., {"app": "chromakit"})

    Returns
    -------
    dict
        Configuration info: {"handlers": [...]}

    Raises
    ------
    ValueError
        If log_level or the rotation mode is unknown

    Notes
    -----
    Idempotent: handlers installed by a previous call are removed first,
    handlers installed by anyone else are left alone.

    Examples
    --------
    >>> setup_logging(log_level="DEBUG", log_file="logs/chromakit.log",
    ...               rotate={"mode": "size", "max_bytes": 10_000_000, "backup_count": 5},
    ...               context={"app": "chromakit"})
    """
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    root = logging.getLogger()

    # Remove our own handlers from a previous call
    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root.setLevel(level)

    if to_stderr:
        console_handler = logging.StreamHandler(sys.stderr)
        console_mode = "json" if json_console else "human"
        console_handler.setFormatter(ContextFormatter(console_mode, color, tz))
        root.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    if log_file:
        file_handler = _create_file_handler(log_file, rotate, json, tz)
        root.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if context:
        push_context(**context)

    if quiet_libs:
        for lib in quiet_libs:
            logging.getLogger(lib).setLevel(logging.WARNING)

    if capture_warnings:
        route_warnings()

    return {'handlers': list(_installed_handlers)}


def _create_file_handler(
    log_file: str,
    rotate: Optional[Dict[str, Any]],
    json_format: bool,
    tz: str
) -> logging.Handler:
    """Create file handler with optional rotation."""
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    if rotate:
        mode = rotate.get('mode', 'size')

        if mode == 'size':
            handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=rotate.get('max_bytes', 10_000_000),
                backupCount=rotate.get('backup_count', 5),
                encoding='utf-8'
            )
        elif mode == 'time':
            handler = logging.handlers.TimedRotatingFileHandler(
                log_path,
                when=rotate.get('when', 'D'),
                interval=rotate.get('interval', 1),
                backupCount=rotate.get('backup_count', 7),
                encoding='utf-8'
            )
        else:
            raise ValueError(f"Unknown rotation mode: {mode}. Use 'size' or 'time'.")
    else:
        handler = logging.FileHandler(log_path, encoding='utf-8')

    fmt_mode = "json" if json_format else "human"
    handler.setFormatter(ContextFormatter(fmt_mode, use_color=False, tz=tz))
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get logger by name.

    Parameters
    ----------
    name : str
        Logger name (typically __name__)

    Returns
    -------
    logging.Logger
        Logger instance
    """
    return logging.getLogger(name)


def set_level(level: str) -> None:
    """Update root logger level at runtime.

    Examples
    --------
    >>> set_level("DEBUG")  # Enable debug logging
    """
    logging.getLogger().setLevel(getattr(logging, level.upper()))


def push_context(**kwargs) -> None:
    """Add contextual fields to all subsequent log records.

    Parameters
    ----------
    **kwargs
        Key-value pairs to add (e.g., command="blend", model="lab")

    Notes
    -----
    Context is thread-local (uses contextvars).
    Fields appear in all log messages until popped.

    Examples
    --------
    >>> push_context(app="chromakit")
    >>> logger.info("Started")  # → "... | app=chromakit | Started"
    """
    current = _context_var.get({})
    _context_var.set({**current, **kwargs})


def pop_context(keys: Optional[List[str]] = None) -> None:
    """Remove contextual fields.

    Parameters
    ----------
    keys : list[str], optional
        Keys to remove; if None, clears all context
    """
    if keys is None:
        _context_var.set({})
        return
    current = dict(_context_var.get({}))
    for key in keys:
        current.pop(key, None)
    _context_var.set(current)


def install_excepthook() -> None:
    """Install handler to log uncaught exceptions.

    Notes
    -----
    Logs the exception with traceback; Ctrl+C goes to the default hook.
    """
    def log_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logger = logging.getLogger(__name__)
        logger.critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback)
        )

    sys.excepthook = log_exception


def route_warnings() -> None:
    """Route Python warnings to logging.warning()."""
    logging.captureWarnings(True)
    logging.getLogger('py.warnings').setLevel(logging.WARNING)
