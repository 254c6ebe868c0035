"""
Test suites package.

`testsuites` stays importable so that:
  - UI tests import page objects and data as `testsuites.ui_testing...`
  - `run_tests.py` and CI jobs can select suites by path
  - the login workbook generator runs as a module

The UI suite lives in `ui_testing/`; offline framework tests in `unit/`.
"""
