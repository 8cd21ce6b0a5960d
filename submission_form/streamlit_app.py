"""
streamlit_app.py — Streamlit 화면 진입점

실행: streamlit run submission_form/streamlit_app.py
"""

from __future__ import annotations

import streamlit as st

import config
from submission_form.models.session_state import TERMINAL_PHASES
from submission_form.services.completion_store import JsonFileCompletionStore
from submission_form.services.form_wizard import FormWizard
from submission_form.services.registry import default_registry
from submission_form.services.submission import SubmissionClient
from submission_form.views import completed_view, form_view


def _init_session() -> None:
    """브라우저 세션당 한 번 위저드를 만든다. 완료 플래그는 이때 한 번 읽힌다."""
    if "wizard" not in st.session_state:
        st.session_state.wizard = FormWizard(
            default_registry(),
            JsonFileCompletionStore(config.COMPLETION_FILE),
            SubmissionClient(config.SUBMISSION_URL),
        )


def main() -> None:
    st.set_page_config(page_title="SOCC Submissions", page_icon="🧩", layout="centered")
    st.markdown(
        "<h1 style='text-align:center; font-family:monospace; font-size:1.8rem;'>"
        "SOCC - Leetcode Live Arrays edition Submissions</h1>",
        unsafe_allow_html=True,
    )

    _init_session()
    if st.session_state.wizard.phase in TERMINAL_PHASES:
        completed_view.render()
    else:
        form_view.render()


main()
