# =============================================================================
# Heuristic Scoring Strategy Tests
# =============================================================================
"""
Unit tests for the heuristic title and description scoring.
"""

import pytest

from src.services.scraper.strategies import HeuristicStrategy, ParsedJobData
from src.services.scraper.strategies.heuristics import (
    Candidate,
    best_candidate,
    score_description,
    score_title,
)


def words(count: int, word: str = "lorem") -> str:
    """Build neutral text with the given number of words."""
    return " ".join([word] * count)


@pytest.fixture
def strategy() -> HeuristicStrategy:
    """Create the strategy under test."""
    return HeuristicStrategy()


class TestScoreTitle:
    """Tests for the score_title function."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Senior Backend Engineer", 40),
            ("Product Designer", 30),
            ("About our company", 10),
            ("Home", 0),
            ("Lead", 10),
        ],
    )
    def test_scores(self, text: str, expected: int) -> None:
        """Test length, job keyword and seniority signals."""
        assert score_title(text) == expected

    def test_length_bounds_are_exclusive(self) -> None:
        """Test that titles of exactly 5 or 100 chars get no length points."""
        assert score_title("x" * 5) == 0
        assert score_title("x" * 6) == 10
        assert score_title("x" * 99) == 10
        assert score_title("x" * 100) == 0


class TestScoreDescription:
    """Tests for the score_description function."""

    def test_word_count_bonuses(self) -> None:
        """Test the bonuses for 100, 300 and 500 words."""
        assert score_description(words(100)) == 0
        assert score_description(words(101)) == 20
        assert score_description(words(301)) == 40
        assert score_description(words(501)) == 50

    def test_short_penalty(self) -> None:
        """Test that fragments under 50 words are penalized."""
        assert score_description(words(30)) == -50
        assert score_description(words(50)) == 0

    def test_long_penalty(self) -> None:
        """Test that whole-page wrappers over 3000 words are penalized."""
        assert score_description(words(3001)) == 30

    def test_job_language_signals(self, description_text) -> None:
        """Test the keyword bonuses for job-posting language."""
        assert score_description(description_text(100)) == 20 + 30 + 20 + 15

    def test_boilerplate_signals(self) -> None:
        """Test the penalties for footer and navigation text."""
        assert score_description(words(120) + " copyright") == -10
        assert score_description(words(120) + " apply now") == 10

    def test_signal_counts_once(self) -> None:
        """Test that a signal repeated in the text counts once."""
        text = words(120) + " skills skills skills"

        assert score_description(text) == 50


class TestBestCandidate:
    """Tests for the best_candidate function."""

    def test_highest_score_wins(self) -> None:
        """Test that the highest scoring candidate is chosen."""
        candidates = [Candidate("a", 10), Candidate("b", 30), Candidate("c", 20)]

        assert best_candidate(candidates) == Candidate("b", 30)

    def test_first_wins_ties(self) -> None:
        """Test that ties go to the earliest candidate."""
        candidates = [Candidate("a", 30), Candidate("b", 30)]

        assert best_candidate(candidates).text == "a"

    @pytest.mark.parametrize(
        "candidates",
        [[], [Candidate("a", 0)], [Candidate("a", -50), Candidate("b", 0)]],
    )
    def test_no_positive_candidate(self, candidates) -> None:
        """Test that nothing is chosen without a positive score."""
        assert best_candidate(candidates) is None


class TestHeuristicStrategy:
    """Tests for the HeuristicStrategy class."""

    def test_picks_title_and_description(self, strategy, soup_of, description_text) -> None:
        """Test that a job-like heading and article are chosen."""
        description = description_text(400)
        body = (
            "<h1>Careers at Acme</h1>"
            "<h2>Senior Backend Engineer</h2>"
            "<section><p>Apply now</p></section>"
            f"<article><p>{description}</p></article>"
        )

        record = strategy.apply(ParsedJobData(), soup_of(body=body))

        assert record.role == "Senior Backend Engineer"
        assert record.job_description == description
        assert record.filled_by == {"role": "heuristics", "job_description": "heuristics"}

    def test_title_tie_goes_to_first(self, strategy, soup_of) -> None:
        """Test that equally scored headings resolve to the first."""
        body = "<h1>Data Analyst</h1><h2>Product Designer</h2>"

        record = strategy.apply(ParsedJobData(), soup_of(body=body))

        assert record.role == "Data Analyst"

    def test_strips_navigation_from_description(self, strategy, soup_of, description_text) -> None:
        """Test that navigation and sidebars are removed before scoring."""
        description = description_text(200)
        body = (
            "<main>"
            "<nav>Home Jobs Teams</nav>"
            f"<p>{description}</p>"
            '<div class="sidebar">Similar jobs</div>'
            "</main>"
        )

        record = strategy.apply(ParsedJobData(), soup_of(body=body))

        assert record.job_description == description

    def test_nothing_positive(self, strategy, soup_of) -> None:
        """Test that low-scoring elements leave the fields empty."""
        body = "<h1>Home</h1><section>Apply now</section>"

        record = strategy.apply(ParsedJobData(), soup_of(body=body))

        assert record == ParsedJobData()

    def test_keeps_existing_fields(self, strategy, soup_of, description_text) -> None:
        """Test that an existing role and long description are kept."""
        existing = ParsedJobData(role="Staff Engineer", job_description=description_text(20))
        body = f"<h1>Senior Backend Engineer</h1><article>{description_text(400)}</article>"

        record = strategy.apply(existing, soup_of(body=body))

        assert record == existing

    def test_replaces_short_description(self, strategy, soup_of, description_text) -> None:
        """Test that a description under 100 chars is replaced."""
        existing = ParsedJobData(role="Staff Engineer", job_description="Short.")
        body = f"<article>{description_text(400)}</article>"

        record = strategy.apply(existing, soup_of(body=body))

        assert record.role == "Staff Engineer"
        assert record.job_description == description_text(400)

    def test_should_run(self, strategy, description_text) -> None:
        """Test that the strategy runs when the role or description is missing."""
        long_description = description_text(20)

        assert strategy.should_run(ParsedJobData()) is True
        assert strategy.should_run(ParsedJobData(job_description=long_description)) is True
        assert strategy.should_run(ParsedJobData(role="Engineer")) is True
        assert strategy.should_run(
            ParsedJobData(role="Engineer", job_description=long_description)
        ) is False
