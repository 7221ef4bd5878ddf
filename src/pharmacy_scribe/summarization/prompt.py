"""Prompt sent to the language model, including the exact JSON schema expected back."""

from __future__ import annotations


SYSTEM_PROMPT = (
    "You are a pharmacy AI assistant that creates structured summaries of "
    "pharmacy consultations. Always respond with valid JSON."
)

_SUMMARY_PROMPT = """You are a pharmacy AI assistant. Analyze the following pharmacy consultation transcript and create a structured summary. Focus on pharmacy-specific information and organize it into the following sections:

TRANSCRIPT:
{transcript}

Please provide a JSON response with the following structure:
{{
  "keyTopics": ["topic1", "topic2", "topic3"],
  "medications": [
    {{
      "name": "medication name",
      "dosage": "dosage if mentioned",
      "frequency": "frequency if mentioned",
      "notes": "any additional notes"
    }}
  ],
  "actionItems": ["action1", "action2", "action3"],
  "patientConcerns": ["concern1", "concern2", "concern3"],
  "pharmacistRecommendations": ["recommendation1", "recommendation2", "recommendation3"]
}}

Guidelines:
- Extract medication names, dosages, and frequencies
- Identify patient concerns and questions
- Capture pharmacist recommendations and advice
- Note any side effects, allergies, or drug interactions mentioned
- Include refill requests or follow-up actions
- Focus on clinically relevant information
- Keep each item concise but informative

Return only valid JSON without any additional text."""


def build_summary_prompt(transcript: str) -> str:
    return _SUMMARY_PROMPT.format(transcript=transcript)
