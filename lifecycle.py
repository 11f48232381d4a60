"""Request lifecycle and UI state for the mock app builder.

All state lives in one :class:`AppState`. It is only changed by
:func:`apply_event`, which handles one event to completion and returns the
side effects the presentation layer has to run (scroll to results, reset the
verification widget, ...).

Submission states::

    IDLE/SUCCEEDED/FAILED --submit--> VALIDATING --ok--> SUBMITTING --> SUCCEEDED | FAILED
                                           |
                                           +--invalid--> (previous state, error shown)
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from blueprint import (
    Blueprint,
    Feature,
    RequirementsSummary,
    blueprint_to_dict,
    summarize,
    summary_to_dict,
)
from errors import (
    BuilderError,
    MissingDescriptionError,
    MissingVerificationError,
    ServiceError,
    ValidationError,
)
from field_store import FieldKey, FieldValueStore
from navigation import SelectionState

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class Effect(str, Enum):
    RESULTS_READY = "on_results_ready"
    MODAL_OPENED = "on_modal_opened"
    MODAL_CLOSED = "on_modal_closed"
    RESET_VERIFICATION = "reset_verification"


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DescriptionChanged:
    text: str


@dataclass(frozen=True)
class SubmitRequested:
    description: str
    token: Optional[str]


@dataclass(frozen=True)
class ResponseReceived:
    seq: int
    blueprint: Blueprint


@dataclass(frozen=True)
class RequestFailed:
    seq: int
    error: BuilderError


@dataclass(frozen=True)
class RoleSelected:
    index: int


@dataclass(frozen=True)
class FeatureSelected:
    index: int


@dataclass(frozen=True)
class FieldEdited:
    key: FieldKey
    value: str


@dataclass(frozen=True)
class ModalOpened:
    pass


@dataclass(frozen=True)
class ModalClosed:
    pass


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


@dataclass
class AppState:
    description: str = ""
    phase: Phase = Phase.IDLE
    blueprint: Optional[Blueprint] = None
    summary: Optional[RequirementsSummary] = None
    selection: SelectionState = field(default_factory=SelectionState)
    fields: FieldValueStore = field(default_factory=FieldValueStore)
    token: Optional[str] = None
    error_kind: Optional[str] = None
    error_message: Optional[str] = None
    # Sequence number of the latest accepted submission
    request_seq: int = 0
    modal_open: bool = False

    @property
    def pending(self) -> bool:
        """True while the extraction call is in flight (submit disabled)."""
        return self.phase is Phase.SUBMITTING

    def current_feature(self) -> Optional[Feature]:
        return self.selection.current_feature(self.blueprint)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "phase": self.phase.value,
            "blueprint": blueprint_to_dict(self.blueprint) if self.blueprint else None,
            "summary": summary_to_dict(self.summary),
            "selection": self.selection.to_dict(),
            "fields": self.fields.as_dict(),
            "has_token": self.token is not None,
            "error_kind": self.error_kind,
            "error_message": self.error_message,
            "request_seq": self.request_seq,
            "modal_open": self.modal_open,
        }


def _set_error(state: AppState, error: BuilderError) -> None:
    # Only one error is visible at a time; the newest replaces the previous one
    state.error_kind = error.kind
    state.error_message = error.message


def _clear_error(state: AppState) -> None:
    state.error_kind = None
    state.error_message = None


def validate_submission(description: str, token: Optional[str]) -> None:
    if not description or not description.strip():
        raise MissingDescriptionError()
    if not token:
        raise MissingVerificationError()


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------


def _on_description_changed(state: AppState, event: DescriptionChanged) -> List[Effect]:
    state.description = event.text
    return []


def _on_submit(state: AppState, event: SubmitRequested) -> List[Effect]:
    if state.pending:
        logger.warning("Submission ignored: request #%d is still in flight", state.request_seq)
        return []

    previous = state.phase
    state.phase = Phase.VALIDATING
    state.description = event.description
    try:
        validate_submission(event.description, event.token)
    except ValidationError as exc:
        logger.info("Submission rejected: %s", exc.__class__.__name__)
        state.phase = previous
        _set_error(state, exc)
        return []

    effects = []
    if state.modal_open:
        state.modal_open = False
        effects.append(Effect.MODAL_CLOSED)

    state.blueprint = None
    state.summary = None
    state.selection.reset()
    state.fields.clear()
    _clear_error(state)
    state.token = event.token
    state.request_seq += 1
    state.phase = Phase.SUBMITTING
    logger.info("Submission #%d accepted", state.request_seq)
    return effects


def _is_current(state: AppState, seq: int) -> bool:
    if state.pending and seq == state.request_seq:
        return True
    logger.warning(
        "Discarding stale response for request #%d (latest #%d, phase %s)",
        seq,
        state.request_seq,
        state.phase.value,
    )
    return False


def _leave_submitting(state: AppState) -> List[Effect]:
    # Runs on success and on failure: the token is single use either way
    state.token = None
    return [Effect.RESET_VERIFICATION]


def _on_response(state: AppState, event: ResponseReceived) -> List[Effect]:
    if not _is_current(state, event.seq):
        return []
    state.blueprint = event.blueprint
    state.summary = summarize(event.blueprint)
    state.phase = Phase.SUCCEEDED
    effects = _leave_submitting(state)
    effects.append(Effect.RESULTS_READY)
    return effects


def _on_failure(state: AppState, event: RequestFailed) -> List[Effect]:
    if not _is_current(state, event.seq):
        return []
    _set_error(state, event.error)
    state.phase = Phase.FAILED
    logger.info("Submission #%d failed (%s)", event.seq, event.error.kind)
    return _leave_submitting(state)


def _on_role_selected(state: AppState, event: RoleSelected) -> List[Effect]:
    state.selection.select_role(event.index)
    return []


def _on_feature_selected(state: AppState, event: FeatureSelected) -> List[Effect]:
    state.selection.select_feature(event.index)
    return []


def _on_field_edited(state: AppState, event: FieldEdited) -> List[Effect]:
    state.fields.set(event.key, event.value)
    return []


def _on_modal_opened(state: AppState, event: ModalOpened) -> List[Effect]:
    if state.blueprint is None:
        return []
    state.modal_open = True
    return [Effect.MODAL_OPENED]


def _on_modal_closed(state: AppState, event: ModalClosed) -> List[Effect]:
    if not state.modal_open:
        return []
    state.modal_open = False
    return [Effect.MODAL_CLOSED]


_HANDLERS: Dict[type, Callable[[AppState, Any], List[Effect]]] = {
    DescriptionChanged: _on_description_changed,
    SubmitRequested: _on_submit,
    ResponseReceived: _on_response,
    RequestFailed: _on_failure,
    RoleSelected: _on_role_selected,
    FeatureSelected: _on_feature_selected,
    FieldEdited: _on_field_edited,
    ModalOpened: _on_modal_opened,
    ModalClosed: _on_modal_closed,
}


def apply_event(state: AppState, event: Any) -> List[Effect]:
    """Apply ``event`` to ``state`` in place and return the effects to run."""
    try:
        handler = _HANDLERS[type(event)]
    except KeyError:
        raise TypeError(f"Unsupported event: {event!r}") from None
    return handler(state, event)


# ---------------------------------------------------------------------------
# Outbound call
# ---------------------------------------------------------------------------


def execute_request(state: AppState, client) -> Any:
    """Run the extraction call for the in-flight submission.

    Returns the completion event (ResponseReceived or RequestFailed) tagged
    with the submission's sequence number; it does not touch ``state``.
    """
    seq = state.request_seq
    try:
        blueprint = client.extract(state.description, state.token)
    except BuilderError as exc:
        if exc.detail:
            logger.info("Request #%d failed: %s", seq, exc.detail)
        return RequestFailed(seq, exc)
    except Exception:
        logger.exception("Unexpected error during request #%d", seq)
        return RequestFailed(seq, ServiceError())
    return ResponseReceived(seq, blueprint)
