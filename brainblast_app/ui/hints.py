"""Static hints for the player views, chosen by matching the question text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HintRule:
    """Matches when every fragment occurs in the lower-cased question text."""

    fragments: tuple[str, ...]
    hint: str

    def matches(self, question_text: str) -> bool:
        return all(fragment in question_text for fragment in self.fragments)


DEFAULT_HINT = "Look for keywords in the question and try to apply the relevant formula or rule."

# Question-specific rules first, then general categories. First match wins.
HINT_RULES: tuple[HintRule, ...] = (
    HintRule(("2x + 5 = 13",), "Subtract 5 from both sides, then divide by 2 to isolate x."),
    HintRule(
        ("area of a circle with radius 3",),
        "Use the formula for the area of a circle: A = πr². With radius 3, compute π × 3².",
    ),
    HintRule(
        ("f(x) = 3x² - 2x + 1", "f(2)"),
        "Substitute x = 2 into the function: 3(2)² - 2(2) + 1 = 3(4) - 4 + 1.",
    ),
    HintRule(("slope", "(2,4)", "(4,8)"), "Calculate slope using (y₂-y₁)/(x₂-x₁) = (8-4)/(4-2)."),
    HintRule(("log₂(x) = 3",), "When log₂(x) = 3, it means 2³ = x, so x = 8."),
    HintRule(
        ("derivative of x³",),
        "Use the power rule: d/dx(xⁿ) = n·xⁿ⁻¹. For x³, the derivative is 3x².",
    ),
    HintRule(
        ("sum of the first 10 positive integers",),
        "Use the formula n(n+1)/2 with n=10, or add: 1+2+3+4+5+6+7+8+9+10.",
    ),
    HintRule(("sin(θ) = 0.5",), "For sin(θ) = 0.5, θ is 30° or π/6 radians in the first quadrant."),
    HintRule(
        ("probability of rolling a 6",),
        "On a fair die with 6 sides, the probability of any single number is 1/6.",
    ),
    HintRule(("value of π", "2 decimal places"), "π is approximately 3.14 when rounded to 2 decimal places."),
    HintRule(("value of x",), "Try substituting the values and solving the equation."),
    HintRule(("what is x",), "Try substituting the values and solving the equation."),
    HintRule(("area",), "Remember the formula for the area - for circles it's πr²."),
    HintRule(("f(x)",), "Substitute the given value into the function and calculate step by step."),
    HintRule(("function",), "Substitute the given value into the function and calculate step by step."),
    HintRule(("slope",), "Use the formula: slope = (y₂-y₁)/(x₂-x₁)."),
    HintRule(("derivative",), "Remember, the derivative of xⁿ is n·xⁿ⁻¹."),
    HintRule(("log",), "If log₂(x) = y, then 2ʸ = x."),
    HintRule(("sum",), "Consider using the formula: sum of first n integers = n(n+1)/2."),
    HintRule(("sin",), "Recall the values of common angles in the unit circle."),
    HintRule(("cos",), "Recall the values of common angles in the unit circle."),
    HintRule(("tan",), "Recall the values of common angles in the unit circle."),
    HintRule(("probability",), "Probability = favorable outcomes / total possible outcomes."),
    HintRule(("pi",), "Pi is approximately 3.14159..."),
    HintRule(("π",), "Pi is approximately 3.14159..."),
)


def hint_for(question_text: str, rules: tuple[HintRule, ...] = HINT_RULES) -> str:
    """Return the first matching hint for the question, or the default hint."""
    lowered = question_text.lower()
    for rule in rules:
        if rule.matches(lowered):
            return rule.hint
    return DEFAULT_HINT
