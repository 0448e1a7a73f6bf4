"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only simple,
shared anchors and cross-cutting constants that many modules can import.
"""

from pathlib import Path

# Core roots
PACKAGE_ROOT: Path = Path(__file__).resolve().parent

# Core Names
PROJECT_NAME = "punchclock"
PACKAGE_NAME = "punchclock"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "PUNCHCLOCK_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
