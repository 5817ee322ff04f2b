"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser management, page objects and failure artifacts.

Key Features:
- One browser per test process, one fresh context + page per scenario
- Page Object fixtures for the login and form pages
- Screenshot / trace capture according to the `run.screenshot` and
  `run.trace` policies

Async fixtures share the session event loop with the scenarios, so every
scenario module sets `pytestmark = pytest.mark.asyncio(loop_scope="session")`.

================================================================================
"""

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import BrowserContext, Page

from e2e_suites.ui_testing.framework.artifacts import (
    capture_screenshot,
    should_start_trace,
    trace_path,
)
from e2e_suites.ui_testing.framework.browser_manager import BrowserManager
from e2e_suites.ui_testing.framework.config_loader import ConfigLoader
from e2e_suites.ui_testing.pages.form_page import FormPage
from e2e_suites.ui_testing.pages.login_page import LoginPage
from e2e_suites.ui_testing.scenario_data import SCENARIO_DATA, ScenarioData


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_config() -> ConfigLoader:
    """Shared suite configuration (YAML + environment overrides)."""
    return ConfigLoader()


@pytest.fixture(scope="session")
def artifacts_dir(ui_config: ConfigLoader) -> Path:
    """Directory for traces and screenshots."""
    path = Path(ui_config.get("run.artifacts_dir", "reports/artifacts"))
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def test_data() -> ScenarioData:
    """Static scenario inputs and expected messages."""
    return SCENARIO_DATA


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager(ui_config: ConfigLoader) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager.

    Launches a single browser per test process; pytest-xdist workers each
    get their own.
    """
    manager = BrowserManager(config=ui_config)
    await manager.start()
    yield manager
    await manager.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(
    request: pytest.FixtureRequest,
    browser_manager: BrowserManager,
    ui_config: ConfigLoader,
    artifacts_dir: Path,
) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context.

    Each scenario gets its own context, so cookies and storage never leak
    between scenarios.
    """
    policy = ui_config.get("run.trace", "on-first-retry")
    attempt = getattr(request.node, "execution_count", 1)
    tracing = should_start_trace(policy, attempt)

    context = await browser_manager.new_context(trace=tracing)
    yield context

    saved_trace = trace_path(request.node, policy, attempt, artifacts_dir) if tracing else None
    await browser_manager.close_context(context, trace_path=saved_trace, tracing=tracing)


@pytest_asyncio.fixture(loop_scope="session")
async def page(
    request: pytest.FixtureRequest,
    context: BrowserContext,
    ui_config: ConfigLoader,
    artifacts_dir: Path,
) -> AsyncGenerator[Page, None]:
    """Function-scoped page; captures a screenshot per `run.screenshot`."""
    page = await context.new_page()
    yield page

    try:
        await capture_screenshot(page, request.node, ui_config, artifacts_dir)
    except Exception as e:
        # Artifact capture must not mask the scenario's own result
        logger.warning(f"Failed to capture screenshot for {request.node.name}: {e}")
    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page, ui_config: ConfigLoader) -> LoginPage:
    """LoginPage bound to this scenario's page."""
    return LoginPage(page, config=ui_config)


@pytest.fixture
def form_page(page: Page, ui_config: ConfigLoader) -> FormPage:
    """FormPage bound to this scenario's page."""
    return FormPage(page, config=ui_config)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report as `item.rep_<phase>` for fixture teardown."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
