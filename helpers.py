import logging
from typing import List

import streamlit as st

from errors import ServiceError
from extraction import ExtractionClient
from lifecycle import AppState, Effect, RequestFailed, apply_event, execute_request
from settings import get_settings
from verification import ArithmeticChallenge, Verifier

logger = logging.getLogger(__name__)

# --------------------------
# Session-state utilities
# --------------------------


def init_session_state():
    """Ensure required keys exist in st.session_state."""
    if "app_state" not in st.session_state:
        st.session_state.app_state = AppState()
    if "verifier" not in st.session_state:
        st.session_state.verifier = ArithmeticChallenge(
            ttl_seconds=get_settings().verification_ttl_seconds
        )
    if "effects" not in st.session_state:
        st.session_state.effects = []
    if "dispatched_seq" not in st.session_state:
        # Last request_seq whose outbound call was started by this session
        st.session_state.dispatched_seq = 0


def get_state() -> AppState:
    return st.session_state.app_state


def get_verifier() -> ArithmeticChallenge:
    return st.session_state.verifier


def dispatch(event) -> None:
    """Apply ``event`` to the session's AppState and queue its effects.

    Resetting the verification widget happens right away so the next render
    already shows a fresh challenge; the other effects are rendering concerns
    and are drained by the page.
    """
    verifier: Verifier = get_verifier()
    for effect in apply_event(get_state(), event):
        if effect is Effect.RESET_VERIFICATION:
            verifier.invalidate()
            logger.debug("Verification widget reset")
        else:
            st.session_state.effects.append(effect)


def drain_effects() -> List[Effect]:
    """Return the queued effects and empty the queue (each fires once)."""
    effects = list(st.session_state.effects)
    st.session_state.effects = []
    return effects


# --------------------------
# Extraction
# --------------------------


def run_pending_request(client: ExtractionClient) -> None:
    """Perform the extraction call for a freshly accepted submission.

    The submit button callback only moves the state to SUBMITTING; the call
    itself runs in the following script run so the disabled button and the
    spinner are already on screen while it is pending.
    """
    state = get_state()
    if not state.pending or st.session_state.dispatched_seq == state.request_seq:
        return

    seq = state.request_seq
    st.session_state.dispatched_seq = seq

    event = None
    try:
        with st.spinner("Generating your mock app..."):
            event = execute_request(state, client)
    finally:
        # Leave SUBMITTING even if the run was interrupted mid-call
        if event is None:
            event = RequestFailed(seq, ServiceError(detail="request interrupted"))
        dispatch(event)

    st.rerun()
