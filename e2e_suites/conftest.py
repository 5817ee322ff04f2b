"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers the markers shared by the UI scenarios and the framework unit
tests, and tags collected items by directory.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against the live demo pages"
    )
    config.addinivalue_line(
        "markers", "ui: Browser-driven tests"
    )
    config.addinivalue_line(
        "markers", "unit: Framework tests that run without a browser"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to the login page"
    )
    config.addinivalue_line(
        "markers", "form: Tests related to form submission and validation"
    )


def pytest_collection_modifyitems(config, items):
    """Tag tests by the directory they live in."""
    for item in items:
        parts = item.path.parts
        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)
            item.add_marker(pytest.mark.e2e)
        elif "unit" in parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Demo-site E2E Suite (Playwright)",
        "=" * 60,
        "",
    ]
