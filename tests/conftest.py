"""Shared pytest configuration."""

import os

# Keep test runs from writing log files into the working tree.  Must happen
# before convkit.utils.config is first imported.
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("CONVERSION_LOG_FILE", "")
