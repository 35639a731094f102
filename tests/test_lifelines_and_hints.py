"""Tests for the 50/50 lifeline and the hint rule table."""

import random

import pytest

from brainblast_app.core.question_bank_importer import load_default_question_bank
from brainblast_app.ui.hints import DEFAULT_HINT, HintRule, hint_for
from brainblast_app.ui.lifelines import fifty_fifty, is_fifty_fifty_available

OPTIONS = ["6π", "9π", "12π", "15π"]


class TestFiftyFifty:
    @pytest.mark.parametrize("seed", range(20))
    def test_keeps_correct_and_one_wrong(self, seed):
        filtered = fifty_fifty(OPTIONS, "9π", random.Random(seed))
        assert len(filtered) == 2
        assert "9π" in filtered
        assert all(option in OPTIONS for option in filtered)
        assert len(set(filtered)) == 2

    def test_missing_correct_answer_falls_back_to_last_option(self):
        filtered = fifty_fifty(OPTIONS, "not there", random.Random(1))
        assert "15π" in filtered
        assert len(filtered) == 2

    def test_every_wrong_option_can_survive(self):
        survivors = set()
        rng = random.Random(7)
        for _ in range(200):
            survivors.update(fifty_fifty(OPTIONS, "9π", rng))
        assert survivors == set(OPTIONS)

    def test_availability_needs_a_round_win(self):
        assert not is_fifty_fifty_available(0)
        assert is_fifty_fifty_available(1)


class TestHints:
    def test_specific_hint_beats_category_hint(self):
        assert hint_for("What is the area of a circle with radius 3?").startswith(
            "Use the formula for the area of a circle"
        )
        assert hint_for("What is the area of a square with side 2?") == (
            "Remember the formula for the area - for circles it's πr²."
        )

    def test_matching_is_case_insensitive(self):
        assert hint_for("What Is The DERIVATIVE of x³?").startswith("Use the power rule")

    def test_every_fragment_of_a_rule_must_match(self):
        assert hint_for("Find the slope through (1,1) and (3,5).") == (
            "Use the formula: slope = (y₂-y₁)/(x₂-x₁)."
        )

    def test_default_hint(self):
        assert hint_for("Name the largest ocean on Earth.") == DEFAULT_HINT

    def test_custom_rule_table(self):
        rules = (HintRule(("capital",), "Think of Paris."),)
        assert hint_for("Name the Capital of France.", rules) == "Think of Paris."

    def test_default_bank_questions_all_have_specific_hints(self):
        for question in load_default_question_bank():
            assert hint_for(question.text) != DEFAULT_HINT
