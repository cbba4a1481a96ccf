"""
Pytest configuration for the application packages.

Tests are marked by filename so that fast unit tests can be run on
their own (pytest -m unit).
"""

import pytest


def pytest_collection_modifyitems(items):
    """
    Auto-mark tests based on filename patterns.

    Mapping:
    - test_views.py, test_paylike_webhook.py, etc. → integration
    - test_models.py, test_paylike_adapter.py, etc. → unit
    - Unmatched files → integration (safe default for Django)

    Explicit markers on test functions/classes take precedence.
    """
    integration_patterns = [
        "test_views.py",
        "test_paylike_webhook.py",
        "test_helpers.py",
    ]

    unit_patterns = [
        "test_models.py",
        "test_services.py",
        "test_paylike_adapter.py",
        "test_paylike_gateway.py",
        "test_registry.py",
    ]

    for item in items:
        # Skip if test already has unit/integration marker
        existing_markers = {m.name for m in item.iter_markers()}
        if existing_markers & {"unit", "integration"}:
            continue

        filename = str(item.fspath).split("/")[-1]

        if any(pattern in filename for pattern in integration_patterns):
            item.add_marker(pytest.mark.integration)
        elif any(pattern in filename for pattern in unit_patterns):
            item.add_marker(pytest.mark.unit)
        else:
            # Default: integration (safe for Django where most tests hit DB)
            item.add_marker(pytest.mark.integration)
