import pytest

from e2e_suites.unit.fakes import DummyConfig, FakePage


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def dummy_config() -> DummyConfig:
    return DummyConfig(
        {
            "ui.base_url": "https://demo.example.com/",
            "ui.form_url": "https://forms.example.com/form",
            "ui.navigation_timeout": 3000,
            "ui.action_timeout": 1000,
            "ui.optional_field_timeout": 200,
            "ui.settle_timeout": 100,
        }
    )
