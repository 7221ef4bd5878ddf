from .audio import mimetype_for, validate_audio_file
from .base import BaseTranscriber
from .deepgram import DeepgramTranscriber
from .google import GoogleSpeechTranscriber
from .models import TimedWord, TranscriptionResult

__all__ = [
    "BaseTranscriber",
    "DeepgramTranscriber",
    "GoogleSpeechTranscriber",
    "TimedWord",
    "TranscriptionResult",
    "mimetype_for",
    "validate_audio_file",
]
