"""
Library defaults and logging settings.

All defaults are centralized here so the helpers and the CLI agree.
"""

from typing import Dict, Any

CONFIG: Dict[str, Any] = {
    # String helpers
    "default_omission": "...",  # Appended by truncate when text is cut
    # Sequence helpers
    "default_base": 10,  # Positional base used by to_i
    # Logging (only active when the CLI enables it)
    "log_level": "INFO",
    "verbose_log_level": "DEBUG",
    "log_format": "<level>{level: <8}</level> | {name}:{function} - {message}",
}
