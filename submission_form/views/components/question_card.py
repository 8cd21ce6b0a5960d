"""
views/components/question_card.py

현재 단계의 질문(Question)을 유형별 입력 위젯으로 렌더링하는 컴포넌트.
입력이 바뀌면 on_change 콜백으로 FormWizard.edit_answer 에 반영한다.
"""

from __future__ import annotations

import html
from typing import Optional

import streamlit as st

from config import FEEDBACK_ANSWER_ID
from submission_form.models.question_model import CHOICE_TYPES, Difficulty, Question, QuestionType
from submission_form.services.form_wizard import FormWizard

_DIFFICULTY_COLORS = {
    Difficulty.EASY: ("#dcfce7", "#166534"),
    Difficulty.MEDIUM: ("#fef9c3", "#854d0e"),
    Difficulty.HARD: ("#fee2e2", "#991b1b"),
}


def _widget_key(question_id: str) -> str:
    return f"answer_{question_id}"


def _sync(wizard: FormWizard, question_id: str) -> None:
    """위젯 값 → 위저드 답안."""
    value = st.session_state.get(_widget_key(question_id)) or ""
    wizard.edit_answer(question_id, value)


def _label(question: Question) -> str:
    return f"{question.prompt} *" if question.required else question.prompt


def _render_error(error: Optional[str]) -> None:
    if error:
        st.markdown(
            f"<p style='color:#ef4444; font-size:0.85rem; margin-top:-8px;'>⚠ {error}</p>",
            unsafe_allow_html=True,
        )


def _difficulty_badge(difficulty: Optional[Difficulty]) -> str:
    if difficulty is None:
        return ""
    bg, fg = _DIFFICULTY_COLORS[difficulty]
    return (
        f"<span style='background:{bg}; color:{fg}; border-radius:9999px; "
        f"padding:2px 10px; font-size:0.75rem; font-weight:600;'>{difficulty.value}</span>"
    )


def _solution_html(solution: str) -> str:
    """리뷰 요약에 넣을 제출 링크. 사용자 입력이므로 HTML 이스케이프."""
    if not solution:
        return "<i style='color:#9ca3af;'>No solution provided</i>"
    return html.escape(solution)


def _render_review(wizard: FormWizard) -> None:
    """리뷰 단계: 코딩 문제별 제출 링크 요약 + 자유 의견 입력."""
    for number, problem in enumerate(wizard.registry.coding_problems(), start=1):
        shown = _solution_html(wizard.answer_for(problem.id))
        st.markdown(
            f"""
            <div class="question-card">
                <div style="display:flex; justify-content:space-between; margin-bottom:6px;">
                    <b>{number}. {problem.prompt}</b> {_difficulty_badge(problem.difficulty)}
                </div>
                <div style="font-family:monospace; font-size:0.85rem; word-break:break-all;">{shown}</div>
            </div>
            """,
            unsafe_allow_html=True,
        )

    key = _widget_key(FEEDBACK_ANSWER_ID)
    if key not in st.session_state:
        st.session_state[key] = wizard.answer_for(FEEDBACK_ANSWER_ID)
    st.text_area(
        "Any final comments?",
        key=key,
        placeholder="Add any additional comments here...",
        on_change=_sync,
        args=(wizard, FEEDBACK_ANSWER_ID),
        disabled=wizard.submitting,
    )
    st.caption("This field is optional")


def render(wizard: FormWizard) -> None:
    """현재 질문 카드를 렌더링한다."""
    question = wizard.current_question

    if question.type == QuestionType.REVIEW:
        _render_review(wizard)
        return

    key = _widget_key(question.id)
    # 위젯 키가 없을 때만 저장된 답으로 초기화 (재렌더 시 기존 값 유지)
    if key not in st.session_state:
        saved = wizard.current_answer
        st.session_state[key] = (saved or None) if question.type in CHOICE_TYPES else saved

    common = dict(key=key, on_change=_sync, args=(wizard, question.id))

    if question.type == QuestionType.SHORT_TEXT:
        st.text_input(_label(question), placeholder="Type your answer here...", **common)
    elif question.type == QuestionType.LONG_TEXT:
        st.text_area(_label(question), placeholder="Type your answer here...", **common)
    elif question.type == QuestionType.SELECT:
        st.selectbox(
            _label(question), options=question.options, index=None,
            placeholder="Select an option", **common,
        )
    elif question.type == QuestionType.RADIO:
        st.radio(_label(question), options=question.options, index=None, **common)
    elif question.type == QuestionType.CODING_PROBLEM:
        st.markdown(
            f"""
            <div style="display:flex; align-items:center; gap:10px; margin-bottom:8px;">
                {_difficulty_badge(question.difficulty)}
                <a href="{question.problem_url}" target="_blank" rel="noopener noreferrer"
                   style="font-size:0.85rem;">View Problem ↗</a>
            </div>
            """,
            unsafe_allow_html=True,
        )
        if question.description:
            st.markdown(f"<p style='color:#6b7280;'>{question.description}</p>", unsafe_allow_html=True)
        st.text_input(
            "Your solution link *" if question.required else "Your solution link",
            placeholder="https://leetcode.com/problems/...",
            **common,
        )

    _render_error(wizard.current_error)
