from .base import BaseSummarizer
from .gemini import GeminiSummarizer
from .openai_summarizer import OpenAISummarizer
from .parsing import parse_summary_response
from .prompt import build_summary_prompt

__all__ = [
    "BaseSummarizer",
    "GeminiSummarizer",
    "OpenAISummarizer",
    "build_summary_prompt",
    "parse_summary_response",
]
