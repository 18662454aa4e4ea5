"""Make the package importable when running tests from a source checkout."""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import blameparse  # noqa: E402,F401
