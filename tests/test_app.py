"""Smoke tests for the demo ToasterApp using Textual's async pilot."""
from __future__ import annotations

import textwrap

import pytest

from toaster.app import ToasterApp
from toaster.toast import ToastStatus
from toaster.ui.events import ShowToast
from toaster.ui.widgets import ActionLink, Toast


@pytest.fixture
def app(tmp_path, monkeypatch) -> ToasterApp:
    monkeypatch.setenv("HOME", str(tmp_path))
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        textwrap.dedent("""\
            [general]
            log_file = ""

            [toast]
            timeout_ms = 5000
            enter_duration = 0.05
            exit_duration = 0.05
        """)
    )
    return ToasterApp(config_path=str(config_file))


async def _settle(pilot) -> None:
    await pilot.pause(0.2)
    await pilot.wait_for_scheduled_animations()
    await pilot.pause()


@pytest.mark.asyncio
async def test_key_press_mounts_toast(app: ToasterApp) -> None:
    async with app.run_test() as pilot:
        await pilot.press("s")
        await _settle(pilot)
        toasts = list(app.query(Toast))
        assert len(toasts) == 1
        assert toasts[0].config.title == "Saved"
        assert toasts[0].status is ToastStatus.SHOWN
        assert list(app.toasts) == [toasts[0].config.name]


@pytest.mark.asyncio
async def test_dismiss_all_discards_removed_toasts(app: ToasterApp) -> None:
    async with app.run_test() as pilot:
        await pilot.press("i")
        await pilot.press("e")
        await _settle(pilot)
        assert len(app.query(Toast)) == 2

        await pilot.press("x")
        await _settle(pilot)
        await pilot.pause(0.1)
        assert len(app.query(Toast)) == 0
        assert app.toasts == {}


@pytest.mark.asyncio
async def test_show_toast_message(app: ToasterApp) -> None:
    async with app.run_test() as pilot:
        app.post_message(ShowToast({"name": "from-message", "title": "Hi"}))
        await _settle(pilot)
        assert "from-message" in app.toasts


@pytest.mark.asyncio
async def test_duplicate_name_is_ignored(app: ToasterApp) -> None:
    async with app.run_test() as pilot:
        assert app.show_toast(name="same", title="one") is not None
        assert app.show_toast(name="same", title="two") is None
        await pilot.pause()
        assert len(app.query(Toast)) == 1


@pytest.mark.asyncio
async def test_invalid_props_are_rejected(app: ToasterApp) -> None:
    async with app.run_test() as pilot:
        assert app.show_toast(title="bad", type="warning") is None
        await pilot.pause()
        assert len(app.query(Toast)) == 0


@pytest.mark.asyncio
async def test_keep_open_action_leaves_toast_shown(app: ToasterApp) -> None:
    async with app.run_test() as pilot:
        await pilot.press("a")
        await _settle(pilot)
        toast = app.query_one(Toast)
        details = [link for link in toast.query(ActionLink) if link.label == "Details"][0]
        details.action_activate()
        await pilot.pause()
        assert toast.status is ToastStatus.SHOWN


@pytest.mark.asyncio
async def test_configured_keybinding_is_used(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        textwrap.dedent("""\
            [general]
            log_file = ""

            [toast]
            enter_duration = 0.05
            exit_duration = 0.05

            [keybindings]
            show_success = "g"
        """)
    )
    app = ToasterApp(config_path=str(config_file))
    async with app.run_test() as pilot:
        await pilot.press("g")
        await _settle(pilot)
        assert [toast.config.title for toast in app.query(Toast)] == ["Saved"]
