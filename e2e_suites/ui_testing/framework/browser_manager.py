"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for the demo-site scenarios.

Features:
    - One browser per test process (pytest-xdist workers each get their own)
    - A fresh, isolated context per scenario
    - Default action / navigation timeouts applied to every context
    - Optional Playwright tracing, saved only when the caller asks for it

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Playwright,
)

from .config_loader import ConfigLoader


BROWSER_TYPES = ("chromium", "firefox", "webkit")


class BrowserManager:
    """
    Manages the browser instance and per-scenario contexts.

    Usage:
        manager = BrowserManager()
        await manager.start()
        context = await manager.new_context(trace=True)
        page = await context.new_page()
        await page.goto("https://the-internet.herokuapp.com/login")
        await manager.close_context(context, trace_path=Path("trace.zip"), tracing=True)
        await manager.close()
    """

    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
    }

    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
        config: Optional[Any] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode. Defaults to `ui.headless`.
            browser_type: 'chromium', 'firefox' or 'webkit'. Defaults to `ui.browser`.
            config: Object with a `get(key, default)` method. Defaults to ConfigLoader.
        """
        self.config = config if config is not None else ConfigLoader()
        self.headless = self.config.get("ui.headless", True) if headless is None else headless
        self.browser_type = browser_type or self.config.get("ui.browser", "chromium")
        if self.browser_type not in BROWSER_TYPES:
            raise ValueError(
                f"Unsupported browser: {self.browser_type!r} (expected one of {BROWSER_TYPES})"
            )

        self.action_timeout = self.config.get("ui.action_timeout", 10000)
        self.navigation_timeout = self.config.get("ui.navigation_timeout", 30000)

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: list[BrowserContext] = []

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self.browser_type)

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }

        self._browser = await browser_launcher.launch(**launch_options)
        logger.info(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )

    async def close(self) -> None:
        """Close remaining contexts, the browser and Playwright."""
        for context in list(self._contexts):
            await self.close_context(context)

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    def context_options(self, **options: Any) -> Dict[str, Any]:
        """Merge defaults, configured viewport and caller options."""
        context_options = dict(self.DEFAULT_CONTEXT_OPTIONS)
        viewport = self.config.get("ui.viewport")
        if isinstance(viewport, dict):
            context_options["viewport"] = {
                "width": int(viewport.get("width", 1280)),
                "height": int(viewport.get("height", 720)),
            }
        context_options.update(options)
        return context_options

    async def new_context(self, trace: bool = False, **options: Any) -> BrowserContext:
        """
        Create a new isolated browser context.

        Args:
            trace: Start Playwright tracing (screenshots + DOM snapshots)
            **options: Additional context options

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = await self._browser.new_context(**self.context_options(**options))
        context.set_default_timeout(self.action_timeout)
        context.set_default_navigation_timeout(self.navigation_timeout)

        if trace:
            await context.tracing.start(screenshots=True, snapshots=True, sources=False)
        self._contexts.append(context)
        return context

    async def close_context(
        self,
        context: BrowserContext,
        trace_path: Optional[Path] = None,
        tracing: bool = False,
    ) -> None:
        """
        Close a context, stopping tracing first when it was started.

        Args:
            context: Context created by new_context()
            trace_path: Save the trace here; discard it when None
            tracing: Whether tracing was started on this context
        """
        if tracing:
            if trace_path is not None:
                trace_path.parent.mkdir(parents=True, exist_ok=True)
                await context.tracing.stop(path=str(trace_path))
                logger.info(f"Trace saved: {trace_path}")
            else:
                await context.tracing.stop()

        if context in self._contexts:
            self._contexts.remove(context)
        await context.close()

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser


__all__ = [
    "BROWSER_TYPES",
    "BrowserManager",
]
