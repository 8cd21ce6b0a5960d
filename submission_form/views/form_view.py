"""
views/form_view.py — 폼 작성 화면

레이아웃:
  - 상단 : 진행률 바
  - 메인 : 현재 질문 카드
  - 하단 : 이전 / (n of N) / 다음(리뷰 단계에서는 제출)

상태 관리:
  - st.session_state.wizard (FormWizard)
  - 위젯 값은 on_change 콜백으로 wizard.edit_answer 에 반영
"""

from __future__ import annotations

import asyncio

import streamlit as st

from submission_form.models.session_state import WizardPhase
from submission_form.services.form_wizard import FormWizard
from submission_form.views.components import question_card as qcard


def _next(wizard: FormWizard) -> None:
    """다음 단계로. 리뷰 단계에서는 제출 요청이 끝날 때까지 기다린다."""
    if wizard.phase == WizardPhase.REVIEWING:
        with st.spinner("Submitting your solutions..."):
            asyncio.run(wizard.advance())
    else:
        asyncio.run(wizard.advance())
    st.rerun()


def render() -> None:
    """폼 작성 화면 렌더링."""
    wizard: FormWizard = st.session_state.wizard
    state = wizard.state

    # ── 진행률 ────────────────────────────────────────────────────────────
    st.progress(wizard.progress)

    # ── 질문 헤더 ─────────────────────────────────────────────────────────
    st.markdown(
        f"<h2 style='font-size:1.4rem; font-weight:700; font-family:monospace;'>"
        f"{wizard.current_question.prompt}</h2>",
        unsafe_allow_html=True,
    )

    # ── 질문 카드 ─────────────────────────────────────────────────────────
    qcard.render(wizard)

    # ── 이전 / 다음 네비게이션 ────────────────────────────────────────────
    st.markdown("<br>", unsafe_allow_html=True)
    nav_left, nav_center, nav_right = st.columns([1, 2, 1])

    with nav_left:
        if st.button("← Back", key="prev_btn", disabled=not wizard.can_retreat,
                     use_container_width=True):
            wizard.retreat()
            st.rerun()

    with nav_center:
        st.markdown(
            f"<p style='text-align:center; font-size:0.85rem; color:#9ca3af; "
            f"padding-top:8px;'>{state.current_index + 1} of {state.step_count}</p>",
            unsafe_allow_html=True,
        )

    with nav_right:
        label = "Submit" if wizard.phase == WizardPhase.REVIEWING else "Next →"
        if st.button(label, key="next_btn", type="primary",
                     disabled=not wizard.can_advance, use_container_width=True):
            _next(wizard)
