"""Pytest configuration and shared fixtures."""

# The intervalkit testing plugin is registered via a ``pytest11`` entry
# point (pyproject.toml) for external consumers.  In our own test
# suite we disable it (``-p no:intervalkit``) and load explicitly here
# instead, because conftest-based loading is processed after
# ``pytest-cov`` starts coverage tracing, so the intervalkit import
# chain is measured.
pytest_plugins = ["intervalkit.testing._plugin"]
