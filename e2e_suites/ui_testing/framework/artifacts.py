"""
================================================================================
Failure Artifacts
================================================================================

Trace and screenshot capture for the demo-site scenarios.

Mirrors the runner options:

    run.trace:      off | on | retain-on-failure | on-first-retry
    run.screenshot: off | on | only-on-failure

`attempt` counts executions of one test: 1 is the first run, 2 the first
retry (pytest-rerunfailures exposes it as `item.execution_count`).

A scenario counts as failed when its setup or call phase failed, so a page
that never loads still leaves a screenshot and trace behind.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Optional

import allure
from loguru import logger

from .page_base import BasePage


TRACE_POLICIES = ("off", "on", "retain-on-failure", "on-first-retry")
SCREENSHOT_POLICIES = ("off", "on", "only-on-failure")


def _check(policy: str, allowed: tuple) -> str:
    if policy not in allowed:
        raise ValueError(f"Unknown artifact policy: {policy!r} (expected one of {allowed})")
    return policy


def should_start_trace(policy: str, attempt: int) -> bool:
    policy = _check(policy, TRACE_POLICIES)
    if policy in ("on", "retain-on-failure"):
        return True
    return policy == "on-first-retry" and attempt == 2


def should_keep_trace(policy: str, failed: bool) -> bool:
    policy = _check(policy, TRACE_POLICIES)
    if policy == "retain-on-failure":
        return failed
    return policy in ("on", "on-first-retry")


def should_take_screenshot(policy: str, failed: bool) -> bool:
    policy = _check(policy, SCREENSHOT_POLICIES)
    if policy == "on":
        return True
    return policy == "only-on-failure" and failed


def artifact_name(node_name: str) -> str:
    """File-system safe name for a test node (`test_x[param]` -> `test_x_param`)."""
    return re.sub(r"[^\w.-]+", "_", node_name).strip("_")


def scenario_failed(node: Any) -> bool:
    """True when the setup or call phase report of `node` failed."""
    for phase in ("setup", "call"):
        report = getattr(node, f"rep_{phase}", None)
        if report is not None and report.failed:
            return True
    return False


def trace_path(node: Any, policy: str, attempt: int, output_dir: Path) -> Optional[Path]:
    """Where to save the trace of a finished scenario, or None to discard it."""
    if not should_keep_trace(policy, scenario_failed(node)):
        return None
    return Path(output_dir) / f"{artifact_name(node.name)}-attempt{attempt}.zip"


async def capture_screenshot(page: Any, node: Any, config: Any, output_dir: Path) -> Optional[Path]:
    """
    Capture the final page state of a scenario per `run.screenshot`.

    Failed scenarios go through BasePage.capture_failure (file + Allure
    attachment); passing ones under the "on" policy are only attached.

    Returns:
        Path of the saved failure screenshot, if one was written
    """
    failed = scenario_failed(node)
    if not should_take_screenshot(config.get("run.screenshot", "only-on-failure"), failed):
        return None

    name = artifact_name(node.name)
    if failed:
        return await BasePage(page, config=config).capture_failure(name, output_dir)

    allure.attach(
        await page.screenshot(full_page=True),
        name=f"final_{name}",
        attachment_type=allure.attachment_type.PNG,
    )
    logger.debug(f"Final screenshot attached for {name}")
    return None


__all__ = [
    "SCREENSHOT_POLICIES",
    "TRACE_POLICIES",
    "artifact_name",
    "capture_screenshot",
    "scenario_failed",
    "trace_path",
    "should_keep_trace",
    "should_start_trace",
    "should_take_screenshot",
]
