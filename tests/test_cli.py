import json

import pytest
from selenium.webdriver.common.by import By

from kolibrium.__main__ import main
from kolibrium.cli.argument_parser import explicit_options, parse_args
from kolibrium.cli.config import ProjectConfiguration

from .conftest import FakeElement, FakeWebDriver

FAST = ["--timeout", "0.2", "--polling", "0.01"]


@pytest.fixture
def fake_browser(monkeypatch):
    driver = FakeWebDriver(title="Example Domain")
    monkeypatch.setattr(ProjectConfiguration, "driver_factory",
                        lambda self, browser=None: lambda: driver)
    return driver


def test_parse_args_defaults():
    args = parse_args(["https://example.com"])
    assert args.browser == "chrome"
    assert args.visible is False
    assert args.check_css == []
    assert args.retry_count == 1


@pytest.mark.parametrize("argv", [
    ["not-a-url"],
    ["https://example.com", "--browser", "opera"],
    ["https://example.com", "--timeout", "0"],
])
def test_parse_args_rejects_invalid_input(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_all_selectors_ready(fake_browser, capsys):
    fake_browser.register(By.CSS_SELECTOR, "#main", FakeElement("main"))
    code = main(["https://example.com", "--check-css", "#main", *FAST])
    out = capsys.readouterr().out
    assert code == 0
    assert "Title: Example Domain" in out
    assert "- #main: ready" in out
    assert fake_browser.visited == ["https://example.com"]
    assert fake_browser.quit_called


def test_missing_selector_fails(fake_browser, capsys):
    code = main(["https://example.com", "--check-css", "#missing", *FAST])
    assert code == 1
    assert "- #missing: NOT READY" in capsys.readouterr().out
    assert fake_browser.quit_called


def test_keep_browser_open(fake_browser):
    assert main(["https://example.com", "--keep-browser-open", *FAST]) == 0
    assert not fake_browser.quit_called


def test_save_config_only(tmp_path, fake_browser):
    source = tmp_path / "in.json"
    source.write_text(json.dumps({"base_url": "https://example.com", "headless": True}))
    target = tmp_path / "out.json"
    assert main(["--config", str(source), "--save-config", str(target), "--browser", "firefox"]) == 0
    saved = json.loads(target.read_text())
    assert saved["default_browser"] == "firefox"
    assert saved["base_url"] == "https://example.com"
    assert fake_browser.visited == []


def test_errors_return_one(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.json")]) == 1
    assert "Configuration file not found" in capsys.readouterr().out


def test_explicit_options_include_repeated_defaults():
    assert explicit_options(["https://example.com", "--browser", "chrome", "-v"]) == {
        "url", "browser", "verbose"}
    assert explicit_options([]) == set()
