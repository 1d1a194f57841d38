from kolibrium.cli import config as config_module
from kolibrium.cli.config import ProjectConfiguration
from kolibrium.core.site import current_site
from kolibrium.dsl import browser_test

from .conftest import FakeWebDriver


def configure(monkeypatch, **kwargs):
    drivers = {}

    def factory_for(name):
        def factory():
            drivers[name] = FakeWebDriver()
            return drivers[name]
        return factory

    config = ProjectConfiguration(
        base_url="https://example.com",
        driver_factories={name: factory_for(name) for name in ("chrome", "firefox")},
        **kwargs,
    )
    monkeypatch.setattr(config_module, "_project_configuration", config)
    return drivers


def test_browser_test_uses_project_configuration(monkeypatch):
    drivers = configure(monkeypatch)
    seen = []
    browser_test(lambda entry: seen.append(current_site().base_url))
    assert seen == ["https://example.com"]
    assert drivers["chrome"].visited == ["https://example.com"]
    assert drivers["chrome"].quit_called


def test_browser_test_overrides(monkeypatch):
    drivers = configure(monkeypatch, keep_browser_open=True)
    browser_test(lambda entry: None, browser="firefox", base_url="https://other.example.com")
    assert "chrome" not in drivers
    assert drivers["firefox"].visited == ["https://other.example.com"]
    assert not drivers["firefox"].quit_called

    browser_test(lambda entry: None, browser="firefox", keep_browser_open=False)
    assert drivers["firefox"].quit_called
