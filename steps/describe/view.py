import streamlit as st

from helpers import dispatch, get_state, get_verifier
from lifecycle import DescriptionChanged, Phase, SubmitRequested


def _on_description_change():
    dispatch(DescriptionChanged(st.session_state.get("description_input", "")))


def _on_verify(widget_key: str):
    ok = get_verifier().answer(st.session_state.get(widget_key))
    st.session_state.verification_failed = not ok


def _on_submit():
    dispatch(
        SubmitRequested(
            st.session_state.get("description_input", ""),
            get_verifier().obtain(),
        )
    )


def _render_verification():
    verifier = get_verifier()

    if verifier.verified:
        st.success("✅ Verified. You can generate one mock app with this check.")
        return

    widget_key = f"challenge_answer_{verifier.generation}"
    col_question, col_button = st.columns([3, 1], vertical_alignment="bottom")
    with col_question:
        st.number_input(
            f"🤖 Quick check: {verifier.question}",
            min_value=0,
            max_value=99,
            step=1,
            value=None,
            key=widget_key,
        )
    with col_button:
        st.button(
            "Verify",
            key=f"verify_{verifier.generation}",
            on_click=_on_verify,
            args=(widget_key,),
            width="stretch",
        )

    if st.session_state.get("verification_failed"):
        st.warning("That answer was not right, here is a new question.")


def _render_status():
    state = get_state()

    if state.pending:
        st.info("⏳ Waiting for the extraction service...")
    elif state.error_message:
        st.error(state.error_message)
    elif state.phase is Phase.SUCCEEDED and state.blueprint is not None:
        st.success(f"✅ Generated a mock UI for **{state.blueprint.app_name or 'your app'}**.")
    else:
        st.caption("Describe your app, pass the quick check, then generate a mock UI.")


def render():
    """Render the description form, the verification check and the submit button."""
    state = get_state()

    # Center the form using a 3-column trick
    col1, col2, col3 = st.columns([1, 2, 1])

    with col2:
        st.title("🧩 Mini App Builder")
        st.text_area(
            "Describe your app",
            value=state.description,
            key="description_input",
            height=140,
            placeholder="e.g. A todo app where users manage tasks and admins manage users...",
            on_change=_on_description_change,
            disabled=state.pending,
        )

        _render_verification()

        st.button(
            "🚀 Generate Mock App",
            type="primary",
            width="stretch",
            disabled=state.pending or not get_verifier().verified,
            on_click=_on_submit,
        )

        _render_status()
