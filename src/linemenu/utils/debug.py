"""Debug logging utility."""

import sys
from datetime import datetime

from linemenu.utils.config import Config, get_linemenu_dir

_config = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_linemenu_dir())
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_path = _get_config().log_path
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'menu', 'match', 'completion'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v!r}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[linemenu:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass


def debug_menu(message: str, **kwargs):
    """Log menu rendering and prompting."""
    debug("menu", message, **kwargs)


def debug_match(message: str, **kwargs):
    """Log input resolution."""
    debug("match", message, **kwargs)


def debug_completion(message: str, **kwargs):
    """Log completion stack changes."""
    debug("completion", message, **kwargs)


def log_error(category: str, message: str, exc: Exception = None):
    """Log error message ALWAYS (even if debug mode is off).

    Args:
        category: Category like 'cli', 'menu'
        message: Error message
        exc: Optional exception to include traceback
    """
    import traceback

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    line = f"[linemenu:{category}] {timestamp} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    _log_to_file(line)

    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass
