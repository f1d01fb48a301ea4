"""Directory controller.

Owns the AppState and is the only code that mutates it. Widgets talk to it
through named events registered on an EventSource and listen for new display
models, form state and popover state. Nothing in here imports Tk.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Protocol

from pydantic import ValidationError as PydanticValidationError

from bizdir.errors import (
    ConfigurationError,
    DirectoryError,
    FetchError,
    ValidationError,
    WriteError,
)
from bizdir.filtering import filter_businesses
from bizdir.geocoding import AddressSuggestion
from bizdir.models import FORM_FIELDS, Business, BusinessDraft
from bizdir.store_client import DEFAULT_FIELDS, StoreResponse
from bizdir.utils.logger import get_logger
from gui.rendering import DirectoryView, render_businesses
from gui.state import AppState, FormState, PopoverState
from gui.status import CREATED_MESSAGE, LOADING_MESSAGE, SAVING_MESSAGE, StatusIndicator
from gui.utils.async_tasks import run_async

logger = get_logger(__name__)

CONFIG_MESSAGE = (
    "The business store is not configured. Set SUPABASE_URL and SUPABASE_ANON_KEY."
)


class Events:
    """Names of the UI events the controller handles."""

    SEARCH = "search_changed"
    TOGGLE_FORM = "form_toggled"
    CANCEL_FORM = "form_cancelled"
    EDIT_FIELD = "form_field_changed"
    SUBMIT = "form_submitted"
    SUGGEST_LOCATION = "location_suggest_requested"
    SELECT = "business_selected"
    DISMISS_POPOVER = "popover_dismissed"
    RELOAD = "reload_requested"
    TOGGLE_THEME = "theme_toggled"


class EventSource(Protocol):
    def connect(self, event: str, handler: Callable[..., Any]) -> None: ...


Spawner = Callable[[Awaitable[Any]], Any]


@dataclass
class SubmitResult:
    ok: bool
    business: Optional[Business] = None
    error: Optional[DirectoryError] = None
    reloaded: bool = False
    rejected: bool = False


def _log_notice(message: str) -> None:
    logger.warning(message)


def apply_location_suggestion(
    values: Mapping[str, str], suggestion: Optional[AddressSuggestion]
) -> Dict[str, str]:
    """Merge an address suggestion into form values.

    The location always takes the formatted address; the place name only
    fills an empty name.
    """
    merged = {key: str(values.get(key) or "") for key in FORM_FIELDS}
    if suggestion is None:
        return merged
    merged["location"] = suggestion.formatted_address
    if suggestion.place_name and not merged["name"].strip():
        merged["name"] = suggestion.place_name
    return merged


class DirectoryController:
    """Cache, filter, render and form reconciliation for one session."""

    def __init__(
        self,
        store=None,
        *,
        state: Optional[AppState] = None,
        status: Optional[StatusIndicator] = None,
        autocomplete=None,
        notifier: Optional[Callable[[str], None]] = None,
    ):
        self.store = store
        self.state = state or AppState()
        self.status = status or StatusIndicator()
        self.autocomplete = autocomplete
        self.notifier = notifier or _log_notice
        self.view: DirectoryView = render_businesses(self.state.visible)
        self._render_listeners: List[Callable[[DirectoryView], None]] = []
        self._form_listeners: List[Callable[[FormState], None]] = []
        self._popover_listeners: List[Callable[[PopoverState], None]] = []
        self._load_ticket = 0

    # ─────────────────────────────────────────────────────────────────
    # Wiring
    # ─────────────────────────────────────────────────────────────────
    @property
    def store_configured(self) -> bool:
        return self.store is not None and bool(getattr(self.store, "is_configured", True))

    def add_render_listener(self, listener: Callable[[DirectoryView], None]) -> None:
        self._render_listeners.append(listener)

    def add_form_listener(self, listener: Callable[[FormState], None]) -> None:
        self._form_listeners.append(listener)

    def add_popover_listener(self, listener: Callable[[PopoverState], None]) -> None:
        self._popover_listeners.append(listener)

    def register(self, source: EventSource, spawn: Spawner) -> None:
        """Connect controller handlers to a UI event source.

        `spawn` schedules coroutines on the application's event loop.
        """
        source.connect(Events.SEARCH, self.search)
        source.connect(Events.TOGGLE_FORM, lambda: self.toggle_form())
        source.connect(Events.CANCEL_FORM, self.close_form)
        source.connect(Events.EDIT_FIELD, self.update_field)
        source.connect(Events.SUBMIT, lambda values=None: spawn(self.submit(values)))
        source.connect(Events.SUGGEST_LOCATION, lambda values: spawn(self.suggest_for_form(values)))
        source.connect(Events.SELECT, self.open_popover)
        source.connect(Events.DISMISS_POPOVER, self.close_popover)
        source.connect(Events.RELOAD, lambda: spawn(self.load_all()))

    # ─────────────────────────────────────────────────────────────────
    # Startup & loading
    # ─────────────────────────────────────────────────────────────────
    async def initialize(self) -> bool:
        """Render the empty directory and run the first load."""
        try:
            self.apply_filter()
            if not self.store_configured:
                self.status.error(ConfigurationError(CONFIG_MESSAGE).message)
                return False
            return await self.load_all()
        except Exception as exc:
            logger.exception("Directory initialization failed")
            self.status.error(f"Failed to initialize the directory: {exc}")
            return False

    async def load_all(self, success_message: Optional[str] = None) -> bool:
        """Replace the cache with the store's current rows.

        Returns True when the load was applied. A response overtaken by a newer
        load is discarded.
        """
        if not self.store_configured:
            self.status.error(ConfigurationError(CONFIG_MESSAGE).message)
            return False

        self._load_ticket += 1
        ticket = self._load_ticket
        checkpoint = self.state.cache.checkpoint()
        self.status.info(LOADING_MESSAGE, busy=True)

        try:
            response = await run_async(self.store.select, DEFAULT_FIELDS)
        except Exception as exc:
            logger.exception("Store select raised")
            response = StoreResponse(error=str(exc) or exc.__class__.__name__)

        if ticket != self._load_ticket:
            logger.info("Discarding stale load response (%d < %d)", ticket, self._load_ticket)
            return False

        if not response.ok:
            self.state.cache.clear()
            self.apply_filter()
            self.status.error(FetchError(f"Failed to load businesses: {response.error}").message)
            return False

        businesses = [b for b in (self._parse_row(row) for row in response.data or []) if b]
        self.state.cache.replace_all(businesses, created_since=checkpoint)
        logger.info("Loaded %d businesses", len(businesses))
        self.apply_filter()
        self.status.set(success_message)
        return True

    @staticmethod
    def _parse_row(row: Any) -> Optional[Business]:
        if not isinstance(row, Mapping):
            return None
        try:
            return Business.model_validate(dict(row))
        except PydanticValidationError as exc:
            logger.warning("Skipping invalid business row %r: %s", row.get("id"), exc)
            return None

    def record_created(self, business: Business) -> None:
        self.state.cache.record_created(business)

    # ─────────────────────────────────────────────────────────────────
    # Filtering & rendering
    # ─────────────────────────────────────────────────────────────────
    def search(self, query: str) -> DirectoryView:
        return self.apply_filter(query)

    def apply_filter(self, query: Optional[str] = None) -> DirectoryView:
        """Filter the cache with `query` (or the stored query) and render."""
        if query is not None:
            self.state.query = query
        self.state.visible = filter_businesses(self.state.cache.items, self.state.query)
        return self.render()

    def render(self) -> DirectoryView:
        self.close_popover()
        self.view = render_businesses(self.state.visible)
        for listener in list(self._render_listeners):
            listener(self.view)
        return self.view

    # ─────────────────────────────────────────────────────────────────
    # Form
    # ─────────────────────────────────────────────────────────────────
    def open_form(self) -> None:
        self.toggle_form(True)

    def close_form(self) -> None:
        self.toggle_form(False)

    def toggle_form(self, show: Optional[bool] = None) -> None:
        form = self.state.form
        form.visible = (not form.visible) if show is None else bool(show)
        self._emit_form()

    def update_field(self, name: str, value: str) -> None:
        if name in FORM_FIELDS:
            self.state.form.values[name] = value or ""

    async def submit(self, values: Optional[Mapping[str, Any]] = None) -> SubmitResult:
        """Validate, insert, reconcile and re-render.

        On any failure the form stays open with the entered values.
        """
        form = self.state.form
        if form.submitting:
            logger.info("Ignoring submit while a save is in flight")
            return SubmitResult(ok=False, rejected=True)

        if values is not None:
            form.values = {key: str(values.get(key) or "") for key in FORM_FIELDS}

        try:
            draft = BusinessDraft.from_form(form.values)
        except ValidationError as err:
            self.notifier(err.message)
            return SubmitResult(ok=False, error=err)

        if not self.store_configured:
            err = ConfigurationError(CONFIG_MESSAGE)
            self.status.error(err.message)
            return SubmitResult(ok=False, error=err)

        form.submitting = True
        self._emit_form()
        try:
            self.status.info(SAVING_MESSAGE, busy=True)
            try:
                response = await run_async(self.store.insert, draft.to_payload())
            except Exception as exc:
                logger.exception("Store insert raised")
                response = StoreResponse(error=str(exc) or exc.__class__.__name__)

            if not response.ok:
                err = WriteError(f"Failed to save business: {response.error}")
                self.status.error(err.message)
                return SubmitResult(ok=False, error=err)

            created = self._parse_row(response.data)
            if created is not None:
                self.record_created(created)
                self.apply_filter()
                self.status.info(CREATED_MESSAGE)
            else:
                logger.info("Insert returned no usable row; reloading from store")
                await self.load_all(success_message=CREATED_MESSAGE)

            form.visible = False
            form.clear()
            return SubmitResult(ok=True, business=created, reloaded=created is None)
        finally:
            form.submitting = False
            self._emit_form()

    async def suggest_location(self, text: str) -> Optional[AddressSuggestion]:
        """Best-effort address suggestion; None when unavailable or failing."""
        if self.autocomplete is None or not (text or "").strip():
            return None
        try:
            return await run_async(self.autocomplete.suggest, text)
        except Exception as exc:
            logger.warning("Address autocomplete failed: %s", exc)
            return None

    async def suggest_for_form(self, values: Optional[Mapping[str, Any]] = None) -> bool:
        """Fill the form's location (and blank name) from a suggestion."""
        form = self.state.form
        if values is not None:
            form.values = {key: str(values.get(key) or "") for key in FORM_FIELDS}
        suggestion = await self.suggest_location(form.values.get("location", ""))
        if suggestion is None:
            return False
        form.values = apply_location_suggestion(form.values, suggestion)
        self._emit_form()
        return True

    def _emit_form(self) -> None:
        for listener in list(self._form_listeners):
            listener(self.state.form)

    # ─────────────────────────────────────────────────────────────────
    # Detail popover
    # ─────────────────────────────────────────────────────────────────
    def open_popover(self, index: int) -> bool:
        """Anchor the popover to the rendered card at `index`."""
        card = self.view.card_at(index)
        if card is None:
            logger.debug("No rendered card at index %s", index)
            return False
        popover = self.state.popover
        popover.visible = True
        popover.anchor_index = card.index
        popover.business = card.business
        self._emit_popover()
        return True

    def close_popover(self) -> None:
        popover = self.state.popover
        if not popover.visible:
            return
        popover.close()
        self._emit_popover()

    def _emit_popover(self) -> None:
        for listener in list(self._popover_listeners):
            listener(self.state.popover)
