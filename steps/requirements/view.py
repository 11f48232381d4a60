import streamlit as st

from helpers import get_state

from .helpers import blueprint_table, summary_counts


def _bullet_list(items) -> str:
    if not items:
        return "_None_"
    return "\n".join(f"- {item}" for item in items)


def render():
    """Render the requirements summary derived from the current blueprint."""
    state = get_state()
    summary = state.summary
    if summary is None or state.blueprint is None:
        return

    st.divider()
    st.header("📋 Requirements Summary")
    st.markdown(f"**App name:** {summary.app_name or '_Untitled_'}")

    metric_cols = st.columns(3)
    for col, (label, count) in zip(metric_cols, summary_counts(summary).items()):
        col.metric(label, count)

    col_roles, col_entities, col_features = st.columns(3)
    with col_roles:
        st.subheader("Roles")
        st.markdown(_bullet_list(summary.roles))
    with col_entities:
        st.subheader("Entities")
        st.markdown(_bullet_list(summary.entities))
    with col_features:
        st.subheader("Features")
        st.markdown(_bullet_list(summary.features))

    with st.expander("🔎 Features by role"):
        st.dataframe(blueprint_table(state.blueprint), width="stretch", hide_index=True)
