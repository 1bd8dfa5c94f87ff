"""
Claims portal test suites.

`claimsuite` is kept importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - CI/CD module imports

All credentials in the shipped configuration are placeholders.
"""

__version__ = "1.0.0"
