import pytest

from analyzers.css_analyzer import CssEvaluator, evaluate_css, important_count

MODERN_CSS = (
    ":root{--accent:#06c}"
    ".row{display:flex}"
    ".grid{display: grid}"
    "@media (max-width: 600px){.row{color:var(--accent)}}"
)


class TestCssEvaluator:
    def test_modern_stylesheet_without_findings_scores_full(self, no_findings):
        report = evaluate_css(MODERN_CSS, no_findings)
        assert report.score == 100
        assert report.feedback == []

    def test_empty_content(self, no_findings):
        report = evaluate_css("", no_findings)
        assert report.score == 75
        assert report.feedback == [
            "No use of Flexbox found for modern layouts (-5 points)",
            "No use of CSS Grid found for advanced layouts (-5 points)",
            "No media queries found for responsive design (-5 points)",
            "No CSS variables used for maintainable code (-10 points)",
        ]

    def test_six_important_counts_twice(self, no_findings):
        css = MODERN_CSS + "a{color:red!important}" * 6
        report = evaluate_css(css, no_findings)
        assert report.score == 85
        assert report.feedback == [
            "Frequent use of !important (>5 times) (-10 points)",
            "Using !important overrides natural specificity (-5 points)",
        ]

    @pytest.mark.parametrize("count, expected", [
        (0, 100),
        (1, 90),
        (5, 90),
        (6, 85),
        (10, 85),
        (11, 80),
    ])
    def test_important_tiers(self, no_findings, count, expected):
        css = MODERN_CSS + "a{color:red !important}" * count
        assert important_count(css) == count
        assert evaluate_css(css, no_findings).score == expected

    def test_size_tiers(self, no_findings):
        padding = "/*" + "x" * 6000 + "*/"
        assert evaluate_css(MODERN_CSS + padding, no_findings).feedback == [
            "CSS file is large (>5KB); consider splitting into modules (-5 points)",
        ]
        padding = "/*" + "x" * 11000 + "*/"
        assert evaluate_css(MODERN_CSS + padding, no_findings).feedback == [
            "CSS file is very large (>10KB); consider modularizing (-10 points)",
        ]

    def test_id_selector_overuse(self, no_findings):
        ten = MODERN_CSS + "".join(f"#id{i}{{}}" for i in range(10))
        eleven = MODERN_CSS + "".join(f"#id{i}{{}}" for i in range(11))
        assert evaluate_css(ten, no_findings).score == 100
        assert evaluate_css(eleven, no_findings).feedback == [
            "Too many ID selectors; prefer class selectors for reusability (-5 points)",
        ]

    def test_lint_findings_come_first_with_samples(self, lint_findings):
        report = evaluate_css(MODERN_CSS, lint_findings(errors=2, warnings=4))
        assert report.feedback == [
            "2 CSS errors found (-6 points)",
            "ERROR: error number 1 at line 1",
            "ERROR: error number 2 at line 2",
            "4 CSS warnings found (-6 points)",
            "WARNING: warning number 1 at line 1",
            "WARNING: warning number 2 at line 2",
            "WARNING: warning number 3 at line 3",
        ]
        assert report.score == 88

    def test_lint_deductions_are_capped(self, lint_findings):
        report = evaluate_css(MODERN_CSS, lint_findings(errors=10, warnings=10))
        assert report.feedback[0] == "10 CSS errors found (-20 points)"
        assert report.feedback[4] == "10 CSS warnings found (-10 points)"
        assert len(report.feedback) == 8
        assert report.score == 70

    def test_fractional_deduction_rounds_half_up(self, lint_findings):
        report = evaluate_css(MODERN_CSS, lint_findings(warnings=1))
        assert report.feedback[0] == "1 CSS warnings found (-1.5 points)"
        assert report.score == 99

    def test_linter_sees_the_raw_content(self, no_findings):
        CssEvaluator(no_findings).evaluate(MODERN_CSS)
        assert no_findings.calls == [MODERN_CSS]

    def test_score_never_negative(self, lint_findings):
        css = "#a{}" * 20 + "a{b:c!important}" * 20 + "/*" + "x" * 11000 + "*/"
        report = evaluate_css(css, lint_findings(errors=50, warnings=50))
        assert 0 <= report.score <= 100
