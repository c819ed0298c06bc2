"""Entry point for the dating app demo.

Runs the demo scenario and prints matches, messages and a password
check to standard output.  Settings such as ``LOG_LEVEL`` and
``MATCH_MIN_SCORE`` are read from environment variables; see
``dating_app/app/core/config.py``.

Usage:
    python run.py [--min-score N] [--log-level DEBUG]
"""
from dating_app.app.main import main


if __name__ == "__main__":
    main()
