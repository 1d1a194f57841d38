import pytest

from kolibrium.cli.config import ProjectConfiguration
from kolibrium.core.site import SessionContext, current_driver
from kolibrium.pytest_plugin import kolibrium_driver  # noqa: F401

from .conftest import FakeWebDriver

STARTED = {}


def start(name):
    def factory():
        STARTED[name] = FakeWebDriver()
        return STARTED[name]
    return factory


@pytest.fixture
def kolibrium_config():
    return ProjectConfiguration(
        base_url="https://example.com",
        cookies=[{"name": "consent", "value": "yes"}],
        driver_factories={"chrome": start("chrome"), "safari": start("safari")},
    )


def test_driver_is_bound_to_a_session(kolibrium_driver):
    assert current_driver() is kolibrium_driver
    assert SessionContext.get().site.base_url == "https://example.com"
    assert kolibrium_driver.visited == ["https://example.com", "https://example.com"]
    assert kolibrium_driver.cookies["consent"]["value"] == "yes"


@pytest.mark.kolibrium_browser("safari")
def test_marker_selects_browser(kolibrium_driver):
    assert STARTED["safari"] is kolibrium_driver
