"""Helpers for the generated mock UI: widget keys and page-level effects."""

import logging
from typing import List

import streamlit.components.v1 as components

from blueprint import Role
from constants import BACK_TO_TOP_THRESHOLD_PX
from field_store import FieldKey

logger = logging.getLogger(__name__)

RESULTS_ANCHOR_ID = "mock-app-results"


def field_widget_key(request_seq: int, key: FieldKey) -> str:
    """Streamlit widget key for one mock input field.

    The request sequence number is part of the key so that a new submission
    never reuses a widget (and its browser-side value) from an earlier one.
    """
    return f"field-{request_seq}-{key.encode()}"


def feature_nav_labels(role: Role) -> List[str]:
    """Labels for the feature navigation of ``role`` (one per feature, by entity)."""
    return [f.entity or f.name or f"Form {i + 1}" for i, f in enumerate(role.features)]


# ---------------------------------------------------------------------------
# Page effects (run inside a zero-height component iframe)
# ---------------------------------------------------------------------------


_SCROLL_TO_RESULTS_JS = """
<script>
  const anchor = window.parent.document.getElementById("%(anchor)s");
  if (anchor) { anchor.scrollIntoView({behavior: "smooth", block: "start"}); }
</script>
"""

_BACK_TO_TOP_JS = """
<script>
  const doc = window.parent.document;
  if (!doc.getElementById("back-to-top")) {
    const btn = doc.createElement("button");
    btn.id = "back-to-top";
    btn.textContent = "\\u2191 Top";
    btn.style.cssText = "position:fixed;right:24px;bottom:24px;z-index:1000;display:none;" +
      "padding:8px 14px;border:none;border-radius:20px;background:#ff4b4b;color:#fff;cursor:pointer;";
    let scroller = null;
    doc.addEventListener("scroll", (event) => {
      scroller = event.target.scrollTop !== undefined ? event.target : doc.scrollingElement;
      btn.style.display = scroller.scrollTop > %(threshold)d ? "block" : "none";
    }, true);
    btn.addEventListener("click", () => {
      if (scroller) { scroller.scrollTo({top: 0, behavior: "smooth"}); }
    });
    doc.body.appendChild(btn);
  }
</script>
"""


def scroll_to_results():
    """Bring the freshly generated mock UI into view."""
    logger.debug("Scrolling to results")
    components.html(_SCROLL_TO_RESULTS_JS % {"anchor": RESULTS_ANCHOR_ID}, height=0)


def render_back_to_top():
    """Install the floating "back to top" control (shown past the threshold)."""
    components.html(_BACK_TO_TOP_JS % {"threshold": BACK_TO_TOP_THRESHOLD_PX}, height=0)
