"""
main.py

Demo driver: runs the observer walkthrough, then the content workflow.

Run:
  python main.py
"""

from __future__ import annotations

import sys

from core.logging.setup import configure_logging
from demos.observer_demo import run_observer_demo
from demos.state_demo import run_state_demo


def main() -> int:
    configure_logging()
    run_observer_demo()
    run_state_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())
