"""
================================================================================
Scenario Data
================================================================================

Static inputs and expected message fragments for the demo-site scenarios.

Keeps literal strings out of test bodies. Every record is a frozen
dataclass, so the shared SCENARIO_DATA constant cannot be mutated by a test.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str


@dataclass(frozen=True)
class FormInput:
    first_name: str
    last_name: str
    email: str


@dataclass(frozen=True)
class InvalidFormInput:
    empty: str
    invalid_email: str


@dataclass(frozen=True)
class Messages:
    """Substrings expected in feedback regions."""
    login_success: str
    login_error: str
    form_success: str


@dataclass(frozen=True)
class ScenarioData:
    valid_credentials: Credentials
    invalid_credentials: Credentials
    valid_form: FormInput
    invalid_form: InvalidFormInput
    messages: Messages


SCENARIO_DATA = ScenarioData(
    valid_credentials=Credentials(
        username="tomsmith",
        password="SuperSecretPassword!",
    ),
    invalid_credentials=Credentials(
        username="invaliduser",
        password="wrongpassword",
    ),
    valid_form=FormInput(
        first_name="John",
        last_name="Doe",
        email="john.doe@example.com",
    ),
    invalid_form=InvalidFormInput(
        empty="",
        invalid_email="not-an-email",
    ),
    messages=Messages(
        login_success="You logged into a secure area!",
        login_error="Your username is invalid!",
        form_success="The form was successfully submitted!",
    ),
)


__all__ = [
    "Credentials",
    "FormInput",
    "InvalidFormInput",
    "Messages",
    "SCENARIO_DATA",
    "ScenarioData",
]
