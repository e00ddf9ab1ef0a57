"""Root conftest: enable the datalocations pytest plugin for this test suite."""

pytest_plugins = ["datalocations.presentation.pytest_plugin"]
