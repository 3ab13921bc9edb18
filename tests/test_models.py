"""Tests for feedback label immutability on the ORM model."""

import uuid

import pytest

from feedback_portal.core.sentiment import SentimentLabel
from feedback_portal.db.models import Feedback


def make_feedback(**overrides):
    values = dict(
        student_id=uuid.uuid4(),
        faculty_id=uuid.uuid4(),
        feedback_text="Great course",
        sentiment=SentimentLabel.POSITIVE,
        sentiment_score=3,
    )
    values.update(overrides)
    return Feedback(**values)


def test_label_is_stored_as_display_string():
    assert make_feedback().sentiment == "Positive"


def test_relabelling_is_rejected():
    feedback = make_feedback()

    with pytest.raises(ValueError, match="immutable"):
        feedback.sentiment = SentimentLabel.NEGATIVE


def test_rescoring_is_rejected():
    feedback = make_feedback()

    with pytest.raises(ValueError, match="immutable"):
        feedback.sentiment_score = -2


def test_assigning_the_same_label_is_allowed():
    feedback = make_feedback()
    feedback.sentiment = "Positive"

    assert feedback.sentiment == "Positive"


def test_unknown_label_is_rejected():
    with pytest.raises(ValueError):
        make_feedback(sentiment="Mixed")
