"""
UI Component Smoke Tests.
Tests that views and components can be imported.
Note: Actual Tkinter rendering requires a display, so these tests focus on import/structure.
"""

import os
import sys

import pytest

# Ensure project root is on path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


# ===========================================================================
# Theme Tests
# ===========================================================================


class TestTheme:
    """Tests for gui/theme.py."""

    def test_theme_import(self):
        """Verify both palettes are registered."""
        from gui.theme import THEMES, DarkTheme, Theme

        assert isinstance(THEMES["light"], Theme)
        assert isinstance(THEMES["dark"], DarkTheme)

    def test_unknown_theme_falls_back_to_light(self):
        from gui.theme import get_theme

        assert get_theme("neon").name == "light"
        assert get_theme("dark").name == "dark"


# ===========================================================================
# State Tests
# ===========================================================================


class TestState:
    """Tests for gui/state.py."""

    def test_state_defaults(self):
        """Verify a fresh AppState starts empty with hidden overlays."""
        from gui.state import AppState

        state = AppState()

        assert state.query == ""
        assert state.businesses == []
        assert not state.form.visible
        assert not state.form.submitting
        assert not state.popover.visible

    def test_form_clear(self):
        from gui.state import FormState

        form = FormState(values={"name": "x", "category": "y", "location": "z", "description": "d"})
        form.clear()
        assert set(form.values.values()) == {""}


# ===========================================================================
# Widget Imports (need Tk)
# ===========================================================================


class TestWidgetImports:
    """Tests that all widget modules can be imported without error."""

    @pytest.fixture(autouse=True)
    def require_tk(self):
        pytest.importorskip("tkinter")

    def test_base_view_import(self):
        from gui.views.base import BaseView

        assert hasattr(BaseView, "connect")
        assert hasattr(BaseView, "call")

    def test_directory_view_import(self):
        from gui.views.directory import DirectoryView

        for method in ("show", "card_widget", "sync_form"):
            assert hasattr(DirectoryView, method), f"Missing method: {method}"

    def test_components_import(self):
        from gui.components.business_form import BusinessForm
        from gui.components.detail_popover import DetailPopover
        from gui.components.status_bar import StatusBar

        assert BusinessForm is not None
        assert DetailPopover is not None
        assert StatusBar is not None

    def test_app_has_required_methods(self):
        """Verify DirectoryApp has expected action methods."""
        from gui.app import DirectoryApp

        for method in ("run", "close", "toggle_theme"):
            assert hasattr(DirectoryApp, method), f"Missing method: {method}"


# ===========================================================================
# Utils Tests
# ===========================================================================


class TestUtils:
    """Tests for gui/utils/."""

    def test_run_async_runs_in_worker(self):
        import asyncio
        import threading

        from gui.utils.async_tasks import run_async

        main_thread = threading.get_ident()
        worker = asyncio.run(run_async(threading.get_ident))
        assert worker != main_thread

    def test_pump_runs_spawned_coroutines_on_tick(self):
        import asyncio

        from gui.utils.async_tasks import TkAsyncioPump

        class FakeRoot:
            def __init__(self):
                self.scheduled = []

            def after(self, ms, callback):
                self.scheduled.append(callback)
                return len(self.scheduled)

            def after_cancel(self, after_id):
                self.scheduled[after_id - 1] = None

        async def answer():
            return 42

        root = FakeRoot()
        pump = TkAsyncioPump(root)
        try:
            pump.start()
            task = pump.spawn(answer())
            root.scheduled[-1]()

            assert task.done()
            assert task.result() == 42
        finally:
            pump.stop()
            asyncio.set_event_loop(None)
        assert root.scheduled[-1] is None

    def test_gui_loggers_share_the_bizdir_namespace(self):
        """Verify GUI module loggers nest under `bizdir`."""
        from bizdir.utils.logger import get_logger
        from gui import status

        assert status.logger.name == "bizdir.gui.status"
        assert get_logger("bizdir.cache").name == "bizdir.cache"


# ===========================================================================
# Services Registration Tests
# ===========================================================================


class TestServicesInit:
    """Tests for gui/services/__init__.py exports."""

    def test_clients_build_from_settings(self):
        from bizdir.config import Settings
        from gui.services import get_autocomplete_provider, get_store_client

        settings = Settings(store_url="", store_key="", autocomplete_provider=None)
        client = get_store_client(settings)

        assert not client.is_configured
        assert get_autocomplete_provider(settings) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
