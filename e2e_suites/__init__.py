"""
E2E suites package.

Kept importable so that:
  - the page objects and framework can be reused from other suites
  - `run_tests.py` and CI jobs can import configuration helpers
"""
