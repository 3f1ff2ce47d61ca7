"""Tests for deadline classification."""

from datetime import date, timedelta

import pytest

from tododash.core.deadline import Urgency, classify_deadline


class TestClassifyDeadline:
    @pytest.mark.parametrize(
        "offset, label, urgency",
        [
            (-2, "2 days ago", Urgency.OVERDUE),
            (-1, "1 days ago", Urgency.OVERDUE),
            (0, "today", Urgency.DUE_TODAY),
            (1, "in 1 days", Urgency.IMMINENT),
            (2, "in 2 days", Urgency.IMMINENT),
            (3, "in 3 days", Urgency.IMMINENT),
            (4, "in 4 days", Urgency.SOON),
            (5, "in 5 days", Urgency.SOON),
            (7, "in 7 days", Urgency.SOON),
            (8, "in 8 days", Urgency.DISTANT),
            (15, "in 15 days", Urgency.DISTANT),
        ],
    )
    def test_boundaries(self, today, offset, label, urgency):
        display = classify_deadline(today + timedelta(days=offset), today)
        assert display.label == label
        assert display.urgency is urgency
        assert display.days == offset

    def test_colors(self):
        assert Urgency.OVERDUE.color == "red"
        assert Urgency.DUE_TODAY.color == "yellow"
        assert Urgency.IMMINENT.color == "blue"
        assert Urgency.SOON.color == "teal"
        assert Urgency.DISTANT.color == "gray"

    def test_defaults_to_today(self):
        assert classify_deadline(date.today()).urgency is Urgency.DUE_TODAY
