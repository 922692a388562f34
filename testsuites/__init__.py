"""
Test suites package.

Kept importable so programmatic runners (``run_tests.py``) and IDEs can
resolve test modules.
"""
