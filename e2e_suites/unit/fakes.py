"""
In-memory stand-ins for the parts of Playwright's async Page / Locator API
the page objects use, so the framework can be tested without a browser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class DummyConfig:
    def __init__(self, data=None):
        self.data = data or {}

    def get(self, key, default=None):
        return self.data.get(key, default)


@dataclass
class FakeElement:
    text: Optional[str] = ""
    class_attr: Optional[str] = None
    visible: bool = True
    value: str = ""


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str, index: Optional[int] = None):
        self.page = page
        self.selector = selector
        self.index = index

    def _elements(self) -> List[FakeElement]:
        elements = self.page.elements.get(self.selector, [])
        if self.index is None:
            return elements
        return elements[self.index:self.index + 1]

    def _one(self, timeout) -> FakeElement:
        elements = self._elements()
        if not elements:
            raise PlaywrightTimeoutError(
                f"Timeout {timeout}ms exceeded waiting for locator('{self.selector}')"
            )
        return elements[0]

    @property
    def first(self) -> "FakeLocator":
        return FakeLocator(self.page, self.selector, 0)

    def nth(self, index: int) -> "FakeLocator":
        return FakeLocator(self.page, self.selector, index)

    async def count(self) -> int:
        return len(self._elements())

    async def fill(self, value: str, timeout=None) -> None:
        self._one(timeout).value = value
        self.page.actions.append(("fill", self.selector, value))

    async def click(self, timeout=None) -> None:
        self._one(timeout)
        self.page.actions.append(("click", self.selector))
        if self.selector in self.page.click_navigates_to:
            self.page.url = self.page.click_navigates_to[self.selector]

    async def text_content(self, timeout=None) -> Optional[str]:
        return self._one(timeout).text

    async def is_visible(self) -> bool:
        elements = self._elements()
        return bool(elements) and elements[0].visible

    async def wait_for(self, state: str = "visible", timeout=None) -> None:
        element = self._one(timeout)
        if state == "visible" and not element.visible:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for visibility")

    async def evaluate_all(self, expression: str):
        if self.selector != "[class]":
            raise AssertionError(f"Unexpected evaluate_all on {self.selector}")
        return [
            [element.class_attr, element.text]
            for elements in self.page.elements.values()
            for element in elements
            if element.class_attr is not None
        ]


@dataclass
class FakePage:
    url: str = "about:blank"
    elements: Dict[str, List[FakeElement]] = field(default_factory=dict)
    actions: list = field(default_factory=list)
    click_navigates_to: Dict[str, str] = field(default_factory=dict)
    goto_error: Optional[Exception] = None
    goto_calls: list = field(default_factory=list)
    screenshots: list = field(default_factory=list)

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    async def goto(self, url: str, wait_until=None, timeout=None):
        self.goto_calls.append((url, wait_until, timeout))
        if self.goto_error is not None:
            raise self.goto_error
        self.url = url

    async def screenshot(self, path=None, full_page=False) -> bytes:
        data = b"\x89PNG fake"
        self.screenshots.append(path)
        if path:
            Path(path).write_bytes(data)
        return data
