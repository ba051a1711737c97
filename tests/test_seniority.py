# =============================================================================
# Seniority Classifier Tests
# =============================================================================
"""
Unit tests for detect_seniority.
"""

import pytest

from src.services.scraper.seniority import detect_seniority


class TestDetectSeniority:
    """Tests for the detect_seniority function."""

    @pytest.mark.parametrize(
        "role, expected",
        [
            ("Senior Backend Engineer", "senior"),
            ("Software Engineering Intern", "intern"),
            ("Software Engineer II (3+ years)", "mid"),
            ("Junior Developer", "junior"),
            ("Software Engineer", "junior"),
        ],
    )
    def test_reference_titles(self, role: str, expected: str) -> None:
        """Test the reference classification examples."""
        assert detect_seniority(role) == expected

    @pytest.mark.parametrize(
        "role, expected",
        [
            ("Summer Internship 2025", "intern"),
            ("Sr. Data Engineer", "senior"),
            ("Tech Lead, Payments", "senior"),
            ("Principal Architect", "senior"),
            ("Staff Software Engineer", "senior"),
            ("Intermediate Product Designer", "mid"),
            ("Mid-Level QA Analyst", "mid"),
            ("Backend Developer 5 years", "mid"),
            ("Jr. Frontend Developer", "junior"),
            ("Entry Level Analyst", "junior"),
        ],
    )
    def test_keywords(self, role: str, expected: str) -> None:
        """Test each keyword group."""
        assert detect_seniority(role) == expected

    def test_priority_order(self) -> None:
        """Test that earlier groups win when several keywords match."""
        assert detect_seniority("Senior Intern Program Lead") == "intern"
        assert detect_seniority("Senior Engineer (5+ years)") == "senior"
        assert detect_seniority("Junior Engineer, 2 years") == "mid"

    def test_case_insensitive(self) -> None:
        """Test that matching ignores case."""
        assert detect_seniority("SENIOR ENGINEER") == "senior"

    @pytest.mark.parametrize("role", ["", "Barista", "???"])
    def test_default_is_junior(self, role: str) -> None:
        """Test that unmatched titles default to junior."""
        assert detect_seniority(role) == "junior"
