"""
N-Min Finder

This package provides an HTTP API that finds the N-th minimum number in the
first column of an Excel workbook, with OpenAPI documentation served at /docs.

Key modules:
- main.py: FastAPI application with API endpoints
- file_processing.py: Workbook reading, number extraction and lookup orchestration
- settings.py: Environment-driven configuration
- utils/heap_selection.py: Max-heap selection of the N-th minimum
- utils/result.py: Result pattern implementation for error handling
"""
