"""Tests for company-name normalization and difficulty resolution."""

import pytest

from models.schemas.jd_extracted import ExtractedJD
from models.schemas.resume_extracted import ExtractedResume
from services.scoring.company_database import COMPANY_DATABASE, DIFFERENTIATION_STRATEGIES, TIER_META
from services.scoring.company_difficulty import (
    COMPANY_DIFFICULTY_VERSION,
    INTERN_STRATEGY,
    MAX_ADJUSTMENT_FACTOR,
    METRICS_STRATEGY,
    ML_STRATEGY,
    compute_company_difficulty,
    generate_differentiation_strategies,
    normalize_company_name,
)


class TestNormalizeCompanyName:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Google Inc.", "google"),
            ("  GOOGLE  ", "google"),
            ("Facebook", "meta"),
            ("Acme Holdings, Inc.", "acme"),
            ("Costco", "costco"),
            ("Cohere", "cohere"),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_company_name(raw) == expected

    def test_suffix_only_stripped_after_separator(self):
        # "co" and "labs" inside a word are part of the name
        assert normalize_company_name("Disco") == "disco"
        assert normalize_company_name("Bitlabs") == "bitlabs"


class TestDatabaseLookup:
    def test_google_worked_example(self):
        ctx = compute_company_difficulty("Google Inc.")
        assert ctx.tier == "FAANG_PLUS"
        assert ctx.acceptance_rate_estimate == "1-2%"
        assert ctx.adjustment_factor == 1.45
        assert ctx.difficulty_score == 145
        assert ctx.company_name == "Google Inc."
        assert ctx.version == COMPANY_DIFFICULTY_VERSION

    def test_alias(self):
        ctx = compute_company_difficulty("Facebook")
        assert ctx.tier == COMPANY_DATABASE["meta"].tier
        assert ctx.adjustment_factor == COMPANY_DATABASE["meta"].difficulty_multiplier

    def test_intern_factor_is_capped(self):
        ctx = compute_company_difficulty("Google", experience_level="intern")
        assert ctx.is_intern
        assert ctx.adjustment_factor == MAX_ADJUSTMENT_FACTOR
        assert ctx.difficulty_score == 150

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            COMPANY_DATABASE["newco"] = COMPANY_DATABASE["google"]

    def test_factors_within_bounds(self):
        for entry in COMPANY_DATABASE.values():
            assert 1.0 <= entry.difficulty_multiplier <= MAX_ADJUSTMENT_FACTOR


class TestInference:
    def test_jd_text_signal(self):
        ctx = compute_company_difficulty("Tiny Startup", jd_text="We are a Series B company building dev tools")
        assert ctx.tier == "GROWTH"
        assert ctx.adjustment_factor == 1.1
        assert ctx.acceptance_rate_estimate == TIER_META["GROWTH"].acceptance_rate

    def test_inferred_intern_multiplier(self):
        ctx = compute_company_difficulty(
            "Tiny Startup", experience_level="intern", jd_text="Series B, backed by top investors"
        )
        assert ctx.adjustment_factor == 1.21

    def test_extracted_jd_signal(self):
        jd = ExtractedJD(company_context_keywords=["hedge fund", "quantitative research"])
        ctx = compute_company_difficulty(None, jd=jd)
        assert ctx.tier == "TOP_FINANCE"
        assert ctx.company_name == "Unknown"

    def test_ipo_needs_word_boundary(self):
        ctx = compute_company_difficulty("Tiny Startup", jd_text="We value equipoise and calm")
        assert ctx.tier == "STANDARD"

    def test_first_pattern_wins(self):
        ctx = compute_company_difficulty("Tiny Startup", jd_text="Fortune 500 company, Series A spinout")
        assert ctx.tier == "BIG_TECH"
        assert ctx.adjustment_factor == 1.15


class TestStandardDefault:
    def test_unknown_company(self):
        ctx = compute_company_difficulty("Acme Widgets")
        assert ctx.tier == "STANDARD"
        assert ctx.adjustment_factor == 1.0
        assert ctx.difficulty_score == 100
        assert ctx.differentiation_strategies == []

    def test_no_company_at_all(self):
        ctx = compute_company_difficulty(None)
        assert ctx.tier == "STANDARD"
        assert ctx.company_name == "Unknown"


class TestDifferentiationStrategies:
    def test_tier_template_first_four(self):
        strategies = generate_differentiation_strategies(
            "FAANG_PLUS", None, resume=ExtractedResume(metrics=["a", "b", "c"])
        )
        assert strategies == list(DIFFERENTIATION_STRATEGIES["FAANG_PLUS"][:4])

    def test_additions_capped_at_six(self):
        jd = ExtractedJD(must_have=["Machine learning", "Distributed systems"])
        strategies = generate_differentiation_strategies("FAANG_PLUS", "intern", jd, ExtractedResume())
        assert len(strategies) == 6
        assert strategies[4] == INTERN_STRATEGY
        assert strategies[5] == ML_STRATEGY
        assert METRICS_STRATEGY not in strategies

    def test_ml_needs_word_boundary(self):
        jd = ExtractedJD(keywords=["HTML", "email templates"])
        strategies = generate_differentiation_strategies("BIG_TECH", None, jd)
        assert ML_STRATEGY not in strategies
