"""Test suite for starbar.

Test Structure:
- unit/: Unit tests for individual components
  - rating/: Star resolution, input controller, widget host
  - config/: Config loading (JSON/YAML)
  - utils/: Math, JSON and logging helpers
  - cli/: Command line
- fixtures/: Widget and app config files
- conftest.py: Shared fixtures
"""
