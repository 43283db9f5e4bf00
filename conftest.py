"""Pytest configuration: register custom markers."""


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "dataset: marks tests that sweep a whole reference table"
    )
