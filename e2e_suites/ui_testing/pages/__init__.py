"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the demo pages.

Each page class encapsulates:
    - Element references
    - Page-specific actions
    - Tolerant queries for feedback regions

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .form_page import FormPage

__all__ = [
    "FormPage",
    "LoginPage",
]
