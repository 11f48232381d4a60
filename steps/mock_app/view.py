import streamlit as st

from blueprint import blueprint_to_dict
from field_store import FieldKey, field_keys
from helpers import dispatch, get_state
from lifecycle import FeatureSelected, FieldEdited, ModalClosed, ModalOpened, RoleSelected

from .helpers import RESULTS_ANCHOR_ID, feature_nav_labels, field_widget_key


def _on_field_change(key: FieldKey, widget_key: str):
    dispatch(FieldEdited(key, st.session_state.get(widget_key, "")))


def _on_mock_action(label: str):
    st.toast(f"'{label}' clicked. This is a mock UI, nothing was saved.")


def on_blueprint_dialog_dismissed():
    """Outside click or Esc closed the dialog without its Close button."""
    dispatch(ModalClosed())


@st.dialog("Blueprint JSON", width="large", on_dismiss=on_blueprint_dialog_dismissed)
def show_blueprint_dialog():
    """Raw blueprint viewer. Closes on the button below or on a click outside."""
    blueprint = get_state().blueprint
    if blueprint is None:
        st.info("No blueprint yet.")
    else:
        st.json(blueprint_to_dict(blueprint))

    if st.button("Close", width="stretch", on_click=dispatch, args=(ModalClosed(),)):
        # A click inside the dialog only reruns the dialog; close it for real
        st.rerun()


def render():
    """Render the mock UI generated from the current blueprint."""
    state = get_state()
    blueprint = state.blueprint
    if blueprint is None:
        return

    st.markdown(f'<div id="{RESULTS_ANCHOR_ID}"></div>', unsafe_allow_html=True)
    st.divider()

    col_title, col_json = st.columns([4, 1], vertical_alignment="center")
    with col_title:
        st.header(blueprint.app_name or "Untitled app")
    with col_json:
        st.button(
            "{ } View JSON",
            width="stretch",
            on_click=dispatch,
            args=(ModalOpened(),),
        )

    if not blueprint.roles:
        st.info("The service did not return any roles for this app.")
        return

    seq = state.request_seq
    selection = state.selection

    # Top menu bar: one button per role
    st.markdown("**Menu**")
    menu_cols = st.columns(len(blueprint.roles))
    for index, (col, role) in enumerate(zip(menu_cols, blueprint.roles)):
        with col:
            st.button(
                role.name or f"Role {index + 1}",
                key=f"role-{seq}-{index}",
                type="primary" if index == selection.role_index else "secondary",
                width="stretch",
                on_click=dispatch,
                args=(RoleSelected(index),),
            )

    role = selection.current_role(blueprint)
    if role is None:
        st.warning("Pick a role from the menu.")
        return

    col_nav, col_form = st.columns([1, 3])

    # Left vertical nav: the role's forms, labelled by entity
    with col_nav:
        st.markdown("**Forms**")
        if not role.features:
            st.caption("No forms for this role.")
        for index, label in enumerate(feature_nav_labels(role)):
            st.button(
                label,
                key=f"feature-{seq}-{selection.role_index}-{index}",
                type="primary" if index == selection.feature_index else "secondary",
                width="stretch",
                on_click=dispatch,
                args=(FeatureSelected(index),),
            )

    with col_form:
        feature = state.current_feature()
        if feature is None:
            st.info("Pick a form on the left.")
            return

        st.subheader(feature.name or feature.entity)

        for key in field_keys(role, feature):
            widget_key = field_widget_key(seq, key)
            st.text_input(
                key.field or "(unnamed field)",
                value=state.fields.get(key),
                key=widget_key,
                on_change=_on_field_change,
                args=(key, widget_key),
            )

        if feature.buttons:
            button_cols = st.columns(len(feature.buttons))
            for index, (col, label) in enumerate(zip(button_cols, feature.buttons)):
                with col:
                    st.button(
                        label or "Button",
                        key=f"action-{seq}-{selection.role_index}-{selection.feature_index}-{index}",
                        width="stretch",
                        on_click=_on_mock_action,
                        args=(label,),
                    )
