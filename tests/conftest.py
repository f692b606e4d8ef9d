"""
Pytest configuration for the MealTracker suite.

The app, api, domain, repositories, services and scripts packages live at
the repository root, which is put on sys.path before any test module loads.
"""

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent

if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))
