"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based page object framework for the demo-site scenarios.

Components:
    - config_loader: YAML configuration with environment overrides
    - log_config: Loguru setup
    - locators: element references and error-like class patterns
    - page_base: base page object (navigation, actions, tolerant queries)
    - browser_manager: browser and per-scenario context lifecycle
    - artifacts: trace / screenshot capture policies

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError
from .locators import (
    ClassPattern,
    DEFAULT_ERROR_PATTERNS,
    ElementNotFoundError,
    ElementRef,
    NavigationError,
    PatternSet,
)
from .page_base import BasePage, FieldOutcome
from .browser_manager import BrowserManager
from .log_config import init_logger

__all__ = [
    "BasePage",
    "BrowserManager",
    "ClassPattern",
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_ERROR_PATTERNS",
    "ElementNotFoundError",
    "ElementRef",
    "FieldOutcome",
    "NavigationError",
    "PatternSet",
    "init_logger",
]
