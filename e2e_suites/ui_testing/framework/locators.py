"""
================================================================================
Element References and Feedback Patterns
================================================================================

Declarative descriptions of *how to find* elements on the demo pages.

    - ElementRef: named, immutable selector descriptor (primary + fallbacks)
    - ClassPattern / PatternSet: OR-combined predicates over an element's
      class attribute, used to detect "error-like" feedback regions on pages
      whose markup we do not control

Nothing here touches the DOM. Resolution into Playwright Locators happens
lazily in BasePage, on every action.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple


class ElementNotFoundError(Exception):
    """Raised when a page object has no reference for the requested element."""
    pass


class NavigationError(Exception):
    """Raised when a page does not finish loading within the navigation timeout."""
    pass


@dataclass(frozen=True)
class ElementRef:
    """
    Immutable locator descriptor.

    Attributes:
        name: Semantic element name used by page objects and logs
        primary: Preferred CSS selector
        fallbacks: Alternative selectors, OR'd with the primary one
    """
    name: str
    primary: str
    fallbacks: Tuple[str, ...] = ()

    @property
    def selector(self) -> str:
        """CSS selector union covering the primary and all fallbacks."""
        return ", ".join((self.primary,) + tuple(self.fallbacks))


PATTERN_KINDS = ("class", "contains")


@dataclass(frozen=True)
class ClassPattern:
    """
    Single predicate over an element's class attribute.

    kind "class" matches a whole class token (`.alert-danger`),
    kind "contains" matches any substring (`[class*="error"]`).
    """
    kind: str
    value: str

    def __post_init__(self) -> None:
        if self.kind not in PATTERN_KINDS:
            raise ValueError(
                f"Unknown class pattern kind: {self.kind!r} (expected one of {PATTERN_KINDS})"
            )
        if not self.value:
            raise ValueError("Class pattern value must not be empty")

    def matches(self, class_attr: Optional[str]) -> bool:
        if not class_attr:
            return False
        if self.kind == "class":
            return self.value in class_attr.split()
        return self.value in class_attr

    def to_selector(self) -> str:
        if self.kind == "class":
            return f".{self.value}"
        return f'[class*="{self.value}"]'


@dataclass(frozen=True)
class PatternSet:
    """
    OR-combination of ClassPatterns.

    Usage:
        >>> patterns = PatternSet.from_config([{"kind": "contains", "value": "error"}])
        >>> patterns.matches("flash error")
        True
        >>> patterns.selector
        '[class*="error"]'
    """
    patterns: Tuple[ClassPattern, ...] = field(default_factory=tuple)

    def matches(self, class_attr: Optional[str]) -> bool:
        return any(p.matches(class_attr) for p in self.patterns)

    @property
    def selector(self) -> str:
        """CSS selector union equivalent to this pattern set."""
        return ", ".join(p.to_selector() for p in self.patterns)

    def filter_texts(self, candidates: Iterable[Tuple[Optional[str], Optional[str]]]) -> List[str]:
        """
        Keep the trimmed texts of candidates whose class attribute matches.

        Args:
            candidates: (class attribute, text content) pairs in document order

        Returns:
            Non-empty trimmed texts, order preserved
        """
        texts: List[str] = []
        for class_attr, text in candidates:
            if not self.matches(class_attr):
                continue
            text = (text or "").strip()
            if text:
                texts.append(text)
        return texts

    @classmethod
    def from_config(cls, entries: Optional[Iterable[Dict[str, Any]]]) -> "PatternSet":
        """
        Build a pattern set from the `error_patterns` config section.

        Falls back to DEFAULT_ERROR_PATTERNS when the section is missing or empty.
        """
        entries = list(entries or [])
        if not entries:
            return DEFAULT_ERROR_PATTERNS
        return cls(tuple(ClassPattern(str(e["kind"]), str(e["value"])) for e in entries))


DEFAULT_ERROR_PATTERNS = PatternSet((
    ClassPattern("class", "alert-danger"),
    ClassPattern("class", "invalid-feedback"),
    ClassPattern("contains", "error"),
))


__all__ = [
    "ClassPattern",
    "DEFAULT_ERROR_PATTERNS",
    "ElementNotFoundError",
    "ElementRef",
    "NavigationError",
    "PatternSet",
]
