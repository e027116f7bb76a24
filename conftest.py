"""
Pytest configuration file.

This file is automatically loaded by pytest before the test modules. It puts the
project root on the Python path so the flat modules (main, file_processing,
settings, utils) import directly, and sends the service's log files to a
temporary directory instead of ./logs.
"""
import os
import sys
import tempfile

# Add the current directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

os.environ.setdefault("NMIN_LOG_DIR", tempfile.mkdtemp(prefix="n-min-finder-logs-"))
