"""Unit tests for UI state management."""

from unittest.mock import patch

from cinexpress.core.errors import HISTORY_CLEAR_ERROR_MESSAGE
from cinexpress.core.history import InMemoryHistoryStore
from cinexpress.core.options import PromptOptions, Structure
from cinexpress.ui.models import MAX_REFERENCE_IMAGES, UIState, UploadedImage
from cinexpress.ui.state import (
    clear_history,
    clear_input,
    dismiss_error,
    initialize_ui_state,
    load_history_item,
    record_result,
    set_reference_images,
    update_options,
)


def _upload(image_id: str) -> UploadedImage:
    return UploadedImage(id=image_id, data="QUFB", mime_type="image/png", name=f"{image_id}.png")


class TestInitializeUIState:
    def test_creates_state(self, generation_client, history_store):
        state = initialize_ui_state(None, client=generation_client, history_store=history_store)

        assert isinstance(state, UIState)
        assert state.is_initialized()
        assert state.client is generation_client

    def test_loads_history(self, generation_client, sample_result):
        store = InMemoryHistoryStore()
        store.add(sample_result)

        state = initialize_ui_state(UIState(), client=generation_client, history_store=store)

        assert len(state.history) == 1

    def test_already_initialized_is_untouched(self, ui_state):
        ui_state.history = ["sentinel"]
        assert initialize_ui_state(ui_state).history == ["sentinel"]

    def test_builds_collaborators_from_config(self, test_config):
        with patch("cinexpress.ui.state.config", test_config):
            state = initialize_ui_state(UIState())

        assert state.client.model_name == test_config.model_name
        assert state.history_store.path == test_config.history_path
        assert state.history == []


class TestReferenceImages:
    def test_set_replaces(self, ui_state):
        ui_state.images = [_upload("a")]
        state = set_reference_images(ui_state, [_upload("b")])
        assert [image.id for image in state.images] == ["b"]

    def test_set_caps_at_slot_count(self, ui_state):
        uploads = [_upload(str(i)) for i in range(5)]
        state = set_reference_images(ui_state, uploads)
        assert [image.id for image in state.images] == ["0", "1", "2"]
        assert len(state.images) == MAX_REFERENCE_IMAGES

    def test_image_inputs(self, ui_state):
        ui_state.images = [_upload("a")]
        assert ui_state.image_inputs()[0].mime_type == "image/png"


class TestInputAndErrors:
    def test_has_input(self, ui_state):
        assert not ui_state.has_input()
        ui_state.input_text = "   "
        assert not ui_state.has_input()
        ui_state.images = [_upload("a")]
        assert ui_state.has_input()

    def test_clear_input(self, ui_state):
        ui_state.input_text = "idea"
        ui_state.images = [_upload("a")]

        state = clear_input(ui_state)

        assert state.input_text == ""
        assert state.images == []

    def test_dismiss_error(self, ui_state):
        ui_state.error = "boom"
        assert dismiss_error(ui_state).error is None

    def test_update_options(self, ui_state):
        options = PromptOptions(structure=Structure.SYNOPSIS)
        assert update_options(ui_state, options).options.structure is Structure.SYNOPSIS


class TestHistoryState:
    def test_record_result(self, ui_state, sample_result):
        ui_state.error = "old"

        state = record_result(ui_state, sample_result)

        assert state.result == sample_result
        assert state.error is None
        assert len(state.history) == 1
        assert state.history[0].optimized_prompt == sample_result.optimized_prompt

    def test_record_without_store(self, sample_result):
        state = record_result(UIState(), sample_result)
        assert state.result == sample_result
        assert state.history == []

    def test_load_history_item(self, ui_state, sample_result):
        state = record_result(ui_state, sample_result)
        state.result = None
        state.input_text = ""

        state = load_history_item(state, state.history[0].id)

        assert state.result == sample_result
        assert state.input_text == sample_result.original_text

    def test_load_unknown_item(self, ui_state):
        assert load_history_item(ui_state, "nope").result is None

    def test_clear_history(self, ui_state, sample_result):
        state = record_result(ui_state, sample_result)
        state = clear_history(state)

        assert state.history == []
        assert state.history_store.load() == []

    def test_clear_history_resets_previous_error(self, ui_state):
        ui_state.error = "old"
        assert clear_history(ui_state).error is None


class TestHistoryWriteFailures:
    def test_result_kept_when_history_cannot_be_written(
        self, generation_client, failing_history_store, sample_result, caplog
    ):
        state = UIState(client=generation_client, history_store=failing_history_store)

        state = record_result(state, sample_result)

        assert state.result == sample_result
        assert state.error is None
        assert state.history == []
        assert "Result not stored in history" in caplog.text

    def test_clear_failure_keeps_history_and_reports(
        self, generation_client, failing_history_store, sample_result
    ):
        state = UIState(client=generation_client, history_store=failing_history_store)
        state.history = [object()]

        state = clear_history(state)

        assert state.error == HISTORY_CLEAR_ERROR_MESSAGE
        assert len(state.history) == 1
