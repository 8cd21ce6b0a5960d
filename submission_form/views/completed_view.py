"""
views/completed_view.py — 제출 완료 화면

이번 세션에서 막 제출한 경우와, 이미 제출한 클라이언트가 다시 방문한 경우 모두 이 화면을 보여준다.
"""

from __future__ import annotations

import streamlit as st

from submission_form.services.form_wizard import FormWizard

_COMMUNITY_LINKS = [
    ("Join our Telegram Group (SOCC-KLEF)", "https://t.me/socctechclub"),
    ("LinkedIn", "https://linkedin.com/company/socc-klef"),
    ("Instagram", "https://instagram.com/socc_klef"),
]


def render() -> None:
    """완료 화면 렌더링."""
    wizard: FormWizard = st.session_state.wizard

    if wizard.just_submitted:
        st.success("Submission Successful!")

    st.markdown(
        """
        <div style="text-align:center; padding:24px 0;">
            <div style="font-size:3rem;">✅</div>
            <p style="font-size:1.05rem;">
                Your SOCC - Leetcode Live Arrays edition solutions have been submitted successfully.
            </p>
        </div>
        """,
        unsafe_allow_html=True,
    )

    st.markdown("#### Stay Connected with SOCC")
    for label, url in _COMMUNITY_LINKS:
        st.link_button(label, url, use_container_width=True)
