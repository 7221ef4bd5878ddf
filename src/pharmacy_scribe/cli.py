from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from .analysis import build_fallback_summary, extract_entities, segment
from .analysis.models import StructuredSummary
from .config import ScribeSettings, build_summarizer, build_transcriber
from .errors import InvalidInputError, PharmacyScribeError
from .export import EXPORT_FORMATS, export_summary, generate_file_name
from .transcription.models import TranscriptionResult

logger = logging.getLogger("pharmacy_scribe")


def _read_text(path: str) -> str:
    p = Path(path)
    if not p.is_file():
        raise InvalidInputError(f"File not found: {path}")
    return p.read_text(encoding="utf-8", errors="ignore")


def _input_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.text_file is not None:
        return _read_text(args.text_file)
    return sys.stdin.read()


def _dump(obj: Any, out: Optional[str]) -> None:
    s = json.dumps(obj, ensure_ascii=False, indent=2)
    if out:
        Path(out).parent.mkdir(parents=True, exist_ok=True)
        Path(out).write_text(s, encoding="utf-8")
    else:
        sys.stdout.write(s + "\n")


def _settings(args: argparse.Namespace) -> ScribeSettings:
    settings = ScribeSettings.from_env()
    overrides = {
        key: getattr(args, key)
        for key in ("provider", "summarizer", "language", "model")
        if getattr(args, key, None)
    }
    return settings.model_copy(update=overrides) if overrides else settings


def cmd_transcribe(args: argparse.Namespace) -> None:
    transcriber = build_transcriber(_settings(args))
    result = transcriber.transcribe_file(args.audio)
    _dump(result.model_dump(mode="json"), args.out)


def cmd_segment(args: argparse.Namespace) -> None:
    _dump([s.model_dump(mode="json") for s in segment(_input_text(args))], args.out)


def cmd_entities(args: argparse.Namespace) -> None:
    _dump([c.model_dump() for c in extract_entities(_input_text(args))], args.out)


def cmd_summarize(args: argparse.Namespace) -> None:
    summarizer = build_summarizer(_settings(args))
    summary = summarizer.summarize(_input_text(args))
    _dump(summary.model_dump(by_alias=True), args.out)


def cmd_fallback(args: argparse.Namespace) -> None:
    _dump(build_fallback_summary(_input_text(args)).model_dump(by_alias=True), args.out)


def cmd_export(args: argparse.Namespace) -> None:
    try:
        payload = json.loads(_read_text(args.summary))
    except json.JSONDecodeError as exc:
        raise InvalidInputError(f"Summary file is not valid JSON: {args.summary}") from exc
    try:
        summary = StructuredSummary.model_validate(payload).with_placeholders()
    except ValidationError as exc:
        raise InvalidInputError(
            f"Summary file does not match the summary schema ({exc.error_count()} errors): {args.summary}"
        ) from exc
    transcription = TranscriptionResult(duration=args.duration) if args.duration is not None else None
    data = export_summary(summary, args.format, transcription)

    out = Path(args.out) if args.out else Path(generate_file_name("pharmacy-summary", args.format))
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(data)
    sys.stdout.write(str(out) + "\n")


def _add_text_args(sp: argparse.ArgumentParser) -> None:
    g = sp.add_mutually_exclusive_group()
    g.add_argument("--text", help="Transcript text")
    g.add_argument("--text-file", help="Path to a UTF-8 .txt file (defaults to stdin)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pharmacy-scribe",
        description="Pharmacy consultation transcription, summaries and export",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log vendor calls")
    sub = parser.add_subparsers(dest="cmd")
    sub.required = True

    # ---- transcribe ----
    sp = sub.add_parser("transcribe", help="Transcribe an audio file and segment speakers")
    sp.add_argument("audio", help="Path to audio file (wav/mp3/m4a/webm/ogg)")
    sp.add_argument("--provider", choices=["deepgram", "google"])
    sp.add_argument("--language", help="Language tag, e.g. en-US")
    sp.add_argument("--out", help="Output JSON path (defaults to stdout)")
    sp.set_defaults(func=cmd_transcribe)

    # ---- segment ----
    sp = sub.add_parser("segment", help="Attribute transcript sentences to Pharmacist/Patient")
    _add_text_args(sp)
    sp.add_argument("--out", help="Output JSON path (defaults to stdout)")
    sp.set_defaults(func=cmd_segment)

    # ---- entities ----
    sp = sub.add_parser("entities", help="Extract medications, dosages, side effects, allergies")
    _add_text_args(sp)
    sp.add_argument("--out", help="Output JSON path (defaults to stdout)")
    sp.set_defaults(func=cmd_entities)

    # ---- summarize ----
    sp = sub.add_parser("summarize", help="Structured summary from a language model")
    _add_text_args(sp)
    sp.add_argument("--summarizer", choices=["openai", "gemini"])
    sp.add_argument("--model", help="Model name override")
    sp.add_argument("--out", help="Output JSON path (defaults to stdout)")
    sp.set_defaults(func=cmd_summarize)

    # ---- fallback ----
    sp = sub.add_parser("fallback", help="Keyword-only summary, no vendor call")
    _add_text_args(sp)
    sp.add_argument("--out", help="Output JSON path (defaults to stdout)")
    sp.set_defaults(func=cmd_fallback)

    # ---- export ----
    sp = sub.add_parser("export", help="Render a summary JSON file as pdf, docx or txt")
    sp.add_argument("summary", help="Path to a summary JSON file")
    sp.add_argument("--format", choices=EXPORT_FORMATS, default="pdf")
    sp.add_argument("--duration", type=float, help="Recording length in seconds")
    sp.add_argument("--out", help="Output file (defaults to pharmacy-summary-<date>.<ext>)")
    sp.set_defaults(func=cmd_export)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except PharmacyScribeError as exc:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        sys.stderr.write(f"error: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
