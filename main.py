import logging

import streamlit as st

from helpers import drain_effects, init_session_state, run_pending_request
from lifecycle import Effect
from settings import configure_logging, get_extraction_client, get_settings

# Set Streamlit page configuration early for wide layout
st.set_page_config(page_title="Mini App Builder", page_icon="🧩", layout="wide")

logger = logging.getLogger(__name__)


def run_effects(effects):
    """Execute the side effects emitted by state transitions, once each."""
    from steps.mock_app.helpers import scroll_to_results
    from steps.mock_app.view import show_blueprint_dialog

    for effect in effects:
        if effect is Effect.RESULTS_READY:
            scroll_to_results()
        elif effect is Effect.MODAL_OPENED:
            # st.dialog locks background scroll; an outside click dispatches ModalClosed
            show_blueprint_dialog()
        elif effect is Effect.MODAL_CLOSED:
            # Nothing to undo: the dialog is gone once the app reruns without it
            logger.info("Blueprint dialog closed")


# --------------------------
# Streamlit UI
# --------------------------


def main():
    from steps.describe import view as describe
    from steps.mock_app import view as mock_app
    from steps.mock_app.helpers import render_back_to_top
    from steps.requirements import view as requirements

    client = get_extraction_client()
    configure_logging(get_settings().log_level)
    init_session_state()

    describe.render()
    mock_app.render()
    requirements.render()

    run_effects(drain_effects())
    render_back_to_top()

    # Runs after the page is drawn so the disabled button and status are visible
    run_pending_request(client)


if __name__ == "__main__":
    main()
