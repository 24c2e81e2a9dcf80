"""
Answer validation — Completeness checks and boundary helpers.

check_completeness() never raises: a partial submission is a valid, lower
scoring submission. Structural problems (non-numeric value, missing id) are
raised by load_answers(), which is the parsing boundary for raw payloads.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from ..catalog import QUESTIONS, Question
from ..config import MAX_OPTION_VALUE, MIN_OPTION_VALUE
from ..errors import AnswerFormatError
from .models import Answer, CompletenessReport

logger = logging.getLogger("insider_risk_index.scoring.validator")


def check_completeness(
    answers: Iterable[Answer],
    questions: Sequence[Question] = QUESTIONS,
) -> CompletenessReport:
    """
    Report which catalog questions are unanswered, plus any answers that
    reference unknown questions or carry unexpected values.
    """
    report = CompletenessReport()
    by_id = {q.id: q for q in questions}
    answered: set[str] = set()

    for answer in answers:
        question = by_id.get(answer.question_id)
        if question is None:
            if answer.question_id not in report.unknown_questions:
                report.unknown_questions.append(answer.question_id)
            continue
        answered.add(answer.question_id)

        if not MIN_OPTION_VALUE <= answer.value <= MAX_OPTION_VALUE:
            report.out_of_range.append(answer.question_id)
        elif answer.value not in question.option_values:
            report.off_option.append(answer.question_id)

    report.missing_questions = [q.id for q in questions if q.id not in answered]
    report.is_complete = not report.missing_questions

    if report.missing_questions:
        logger.debug(f"{len(report.missing_questions)} questions unanswered: "
                     f"{report.missing_questions}")
    return report


def clamp_answers(answers: Iterable[Answer]) -> list[Answer]:
    """Return answers with values clamped to [0, 100]."""
    clamped = []
    for a in answers:
        value = max(MIN_OPTION_VALUE, min(MAX_OPTION_VALUE, a.value))
        if value != a.value:
            logger.warning(f"Clamped answer '{a.question_id}' from {a.value} to {value}")
            clamped.append(Answer(a.question_id, value, a.rationale))
        else:
            clamped.append(a)
    return clamped


def load_answers(payload: Any) -> list[Answer]:
    """
    Parse a raw payload into answers.

    Accepts either a list of `{questionId, value, rationale?}` objects, a
    `{questionId: value}` mapping, or an object with an "answers" key holding
    either form.

    Raises:
        AnswerFormatError: if the payload cannot be interpreted.
    """
    if isinstance(payload, dict) and "answers" in payload:
        payload = payload["answers"]

    if isinstance(payload, dict):
        return [
            Answer.from_dict({"questionId": qid, "value": value}, index=i)
            for i, (qid, value) in enumerate(payload.items())
        ]

    if isinstance(payload, list):
        return [Answer.from_dict(item, index=i) for i, item in enumerate(payload)]

    raise AnswerFormatError(
        f"expected a list or mapping of answers, got {type(payload).__name__}"
    )
