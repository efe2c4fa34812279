#!/usr/bin/env python3
"""
Configuration management for the smart store backend.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_DB_PATH = os.path.join(os.path.dirname(__file__), "..", "data", "smart_store.db")


class Config:
    """Configuration class for the application."""

    # Database Configuration
    DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{os.path.abspath(DEFAULT_DB_PATH)}")
    SEED_DATABASE = os.getenv("SEED_DATABASE", "true").lower() in ("1", "true", "yes")

    # Assistant LLM Configuration (OpenAI-compatible chat completions)
    LLM_API_KEY = os.getenv("LLM_API_KEY") or os.getenv("GROQ_API_KEY") or os.getenv("OPENAI_API_KEY")
    LLM_API_URL = os.getenv("LLM_API_URL", "https://api.groq.com/openai/v1/chat/completions")
    LLM_MODEL = os.getenv("LLM_MODEL", "llama-3.1-8b-instant")
    LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", 30))
    USE_LLM = os.getenv("USE_LLM", "true").lower() in ("1", "true", "yes")

    # HTTP Configuration
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    # Reporting Configuration
    LOW_STOCK_THRESHOLD = 10
    SALES_STATS_LOW_STOCK_THRESHOLD = 20
    REGULAR_CUSTOMER_MIN_VISITS = 2
    TOP_PRODUCTS_LIMIT = 10
    SALES_STATS_TOP_LIMIT = 5
    DAILY_SALES_DAYS = 7

    # Assistant fallback Configuration
    MAX_DISCOUNT_LINES = 10
    MAX_SUGGESTIONS = 6
    CURRENCY_SYMBOL = "₹"

    @classmethod
    def has_llm(cls) -> bool:
        """True when the remote assistant should be attempted at all."""
        return cls.USE_LLM and bool(cls.LLM_API_KEY) and cls.LLM_API_KEY not in ("test", "dev")

    @classmethod
    def validate(cls):
        """Validate that the configuration is usable."""
        problems = []

        if not cls.DATABASE_URL:
            problems.append("DATABASE_URL")
        if cls.LLM_TIMEOUT <= 0:
            problems.append("LLM_TIMEOUT must be positive")
        for name in ("LOW_STOCK_THRESHOLD", "REGULAR_CUSTOMER_MIN_VISITS", "TOP_PRODUCTS_LIMIT",
                     "SALES_STATS_TOP_LIMIT", "DAILY_SALES_DAYS"):
            if getattr(cls, name) < 1:
                problems.append(f"{name} must be at least 1")

        if problems:
            raise ValueError(f"Invalid configuration: {', '.join(problems)}")

        return True
