"""Global pytest fixtures for CSLMATCH."""

pytest_plugins = [
    "tests.fixtures.library",
]
