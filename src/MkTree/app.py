"""Streamlit UI for MkTree."""

from __future__ import annotations

import streamlit as st

from MkTree.outline_converter import convert_outline
from MkTree.outline_parser import OutlineError

_EXAMPLE_OUTLINE = "project\n# src\n## main.py\n## utils.py\n# README.md"


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def convert_for_display(outline: str, fenced: bool = False) -> dict:
    """Convert *outline* into a result dict for the page.

    Keys: ``tree`` (rendered text or None), ``filename`` and ``error``
    (message of a rejected outline, else None).
    """
    filename = "tree.md" if fenced else "tree.txt"
    try:
        tree = convert_outline(outline, fenced=fenced)
    except OutlineError as exc:
        return {"tree": None, "filename": filename, "error": str(exc)}
    return {"tree": tree, "filename": filename, "error": None}


def main() -> None:
    st.set_page_config(
        page_title="MkTree",
        page_icon="🌳",
        layout="wide",
    )

    # Hide Streamlit's default toolbar (Deploy, Stop, etc.)
    st.markdown(
        "<style>[data-testid='stToolbar'] { display: none; }</style>",
        unsafe_allow_html=True,
    )

    st.title("MkTree")
    st.caption(
        "Turn a '#'-indented outline into an ASCII tree. "
        "The first line is the root; each leading '#' nests a line one level deeper."
    )

    outline = st.text_area(
        "Outline",
        value=_qp("outline"),
        placeholder=_EXAMPLE_OUTLINE,
        height=300,
    )
    fenced = st.checkbox(
        "Markdown code fence",
        value=_qp("fence").lower() in ("1", "true", "yes"),
        help="Wrap the tree in ```text ... ``` so it can be pasted into a README.",
    )

    convert_clicked = st.button(
        "Convert",
        type="primary",
        width="stretch",
    )

    if convert_clicked:
        result = convert_for_display(outline, fenced)
        if result["error"]:
            st.session_state.pop("result", None)
            st.error(f"Invalid outline: {result['error']}")
        elif result["tree"] is None:
            st.session_state.pop("result", None)
            st.warning("The outline is empty.")
        else:
            # Save result to session state so it survives reruns
            st.session_state["result"] = result
            _show_result(result)
    elif "result" in st.session_state:
        # Show previous result after rerun (e.g. download button click)
        _show_result(st.session_state["result"])


def _show_result(result: dict) -> None:
    """Display download button and preview from a stored result."""
    tree = result["tree"]

    st.download_button(
        label="Download",
        data=tree,
        file_name=result["filename"],
        mime="text/markdown" if result["filename"].endswith(".md") else "text/plain",
        width="stretch",
    )

    with st.expander("Preview", expanded=True):
        st.code(tree, language="text")


if __name__ == "__main__":
    main()
