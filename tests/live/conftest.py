"""Skip guards for live tests.

Every live test that requires external credentials is guarded by a pytest.mark.skipif
that checks for the required environment variable. Tests silently skip when
credentials are absent; they never fail due to missing config.

Required environment variables:
  DEEPGRAM_API_KEY         Real Deepgram API key
  GOOGLE_API_KEY           Google API key with Speech-to-Text and Gemini enabled
  OPENAI_API_KEY           OpenAI API key

Set them in your shell before running:
  export DEEPGRAM_API_KEY=your_key_here
  pytest tests/live -v -m live
"""

from __future__ import annotations

import os
import pytest


def _skip_unless(env_var: str, reason: str | None = None):
    """Return a pytest.mark.skipif that skips when env_var is not set."""
    msg = reason or f"Set {env_var} to run this test"
    return pytest.mark.skipif(not os.environ.get(env_var), reason=msg)


# Convenience marks; import these in live test files
skip_no_deepgram = _skip_unless("DEEPGRAM_API_KEY", "Set DEEPGRAM_API_KEY to run live Deepgram tests")
skip_no_google   = _skip_unless("GOOGLE_API_KEY",   "Set GOOGLE_API_KEY to run live Google Speech-to-Text / Gemini tests")
skip_no_openai   = _skip_unless("OPENAI_API_KEY",   "Set OPENAI_API_KEY to run live OpenAI tests")


def _require(env_var: str) -> str:
    key = os.environ.get(env_var, "")
    if not key:
        pytest.skip(f"{env_var} not set")
    return key


@pytest.fixture(scope="session")
def deepgram_api_key() -> str:
    return _require("DEEPGRAM_API_KEY")


@pytest.fixture(scope="session")
def google_api_key() -> str:
    return _require("GOOGLE_API_KEY")


@pytest.fixture(scope="session")
def openai_api_key() -> str:
    return _require("OPENAI_API_KEY")
