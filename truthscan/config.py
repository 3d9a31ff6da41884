"""
Central application configuration.

Every tunable value lives here as a typed, documented field.
Any field can be overridden at runtime via an environment variable of the
same name (case-insensitive), e.g.:

    FACT_CHECK_THRESHOLD=60 uvicorn truthscan.main:app   # stricter escalation
    export GEMINI_MODEL=gemini-2.5-pro                    # staging override

A `.env` file at the project root is loaded automatically.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,   # FACT_CHECK_THRESHOLD == fact_check_threshold
        extra="ignore",         # silently drop unknown env vars
    )

    # ------------------------------------------------------------------ #
    # Verdict thresholds (authenticity score, 0-100)                      #
    # ------------------------------------------------------------------ #
    authentic_threshold: int = Field(
        70, description="Score >= this → isAuthentic"
    )
    warning_threshold: int = Field(
        50, description="Score >= this (and below authentic) → isWarning"
    )
    fact_check_threshold: int = Field(
        70, description="Score < this → fact-check is triggered"
    )

    # ------------------------------------------------------------------ #
    # Text heuristics                                                     #
    # ------------------------------------------------------------------ #
    text_score_baseline: int = Field(75, description="Starting text score")
    text_sensational_penalty: int = Field(20, description="Deduction for sensational keywords")
    text_caps_run_length: int = Field(10, description="Min consecutive capitals counted as a shouting run")
    text_caps_max_runs: int = Field(2, description="More shouting runs than this → penalty")
    text_caps_penalty: int = Field(15, description="Deduction for repeated shouting runs")
    text_exclamation_max: int = Field(5, description="More '!' than this → penalty")
    text_exclamation_penalty: int = Field(10, description="Deduction for excessive exclamation")
    text_emotional_max_length: int = Field(200, description="Emotional words only penalized below this length")
    text_emotional_penalty: int = Field(15, description="Deduction for short emotional content")
    text_statistics_bonus: int = Field(10, description="Bonus for numeric / statistical citations")
    text_attribution_bonus: int = Field(15, description="Bonus for explicit source attribution")
    text_short_word_count: int = Field(50, description="< this many words → brevity penalty")
    text_short_penalty: int = Field(10, description="Deduction for brief content")
    text_long_word_count: int = Field(100, description="> this many words → length bonus")
    text_long_bonus: int = Field(5, description="Bonus for detailed content")
    text_jitter: float = Field(5.0, description="Symmetric jitter amplitude for text scores")
    text_score_min: int = Field(25, description="Lower clamp for text scores")
    text_score_max: int = Field(95, description="Upper clamp for text scores")

    # ------------------------------------------------------------------ #
    # Media heuristics (placeholder score, no forensic analysis)          #
    # ------------------------------------------------------------------ #
    media_score_baseline: int = Field(70, description="Starting media score")
    media_image_jitter: float = Field(10.0, description="Jitter amplitude for image/*")
    media_video_jitter: float = Field(15.0, description="Jitter amplitude for video/*")
    media_audio_jitter: float = Field(10.0, description="Jitter amplitude for audio/*")
    media_score_min: int = Field(30, description="Lower clamp for media scores")
    media_score_max: int = Field(95, description="Upper clamp for media scores")

    # ------------------------------------------------------------------ #
    # Gemini Client                                                       #
    # ------------------------------------------------------------------ #
    gemini_model: str = Field(
        "gemini-2.5-flash", description="Model used for language, content and fact-check calls"
    )
    gemini_http_timeout_ms: int = Field(
        15_000, description="HTTP client total timeout (ms)"
    )
    gemini_max_retries: int = Field(
        2, description="Max retry attempts on transient errors"
    )
    gemini_retry_initial_delay: float = Field(
        1.0, description="First retry delay (seconds)"
    )
    gemini_retry_max_delay: float = Field(
        5.0, description="Max retry back-off delay (seconds)"
    )
    gemini_retry_exp_base: float = Field(
        2.0, description="Exponential back-off multiplier"
    )
    gemini_temperature: float = Field(
        0.2, description="Sampling temperature for Gemini model"
    )
    language_sample_chars: int = Field(
        1_000, description="Characters sent to the language-detection prompt"
    )

    # ------------------------------------------------------------------ #
    # Rate Limiting                                                       #
    # ------------------------------------------------------------------ #
    rate_limit_request_window_sec: int = Field(
        60, description="Window for per-client request rate (seconds)"
    )
    rate_limit_max_requests: int = Field(
        20, description="Max analyses allowed within the rate-limit window"
    )
    rate_limit_memory_limit: int = Field(
        1000, description="Max keys before in-memory rate-limit map is pruned"
    )

    # ------------------------------------------------------------------ #
    # Report store                                                        #
    # ------------------------------------------------------------------ #
    report_ttl_sec: int = Field(
        7 * 86_400, description="7 d — stored analysis report lifetime (report:{short_id})"
    )
    local_report_max_size: int = Field(
        500, description="Max entries in the in-memory report store"
    )
    short_id_length: int = Field(
        8, description="Characters in a report short ID (62^8 ≈ 218 T combos)"
    )


# Shared instance; read settings through it.
settings = Settings()
