"""
Requirement Analyzer — Main Entry Point

Analyze a requirements file (or stdin) and print the design document:
    python -m req_analyzer requirements.txt
    echo "secure banking portal" | python -m req_analyzer --json

Run as an API server:
    python -m req_analyzer --serve
    # or: uvicorn req_analyzer.api:app --reload --port 8000

Or import and run programmatically:
    from req_analyzer.main import run
    analysis = run("We need a customer portal with MFA.")
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from req_analyzer.config import get_settings
from req_analyzer.models.schemas import RequirementAnalysis
from req_analyzer.services.analysis_service import AnalysisService
from req_analyzer.services.export_service import render_design_document
from req_analyzer.utils.logger import setup_logging


def run(text: str) -> RequirementAnalysis:
    """Analyze *text* through the service boundary and return the record."""
    logger = logging.getLogger(__name__)
    logger.info(f"Analyzing {len(text)} characters of requirements")
    return AnalysisService().analyze_sync(text)


def read_input(source: str) -> str:
    if not source or source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def serve(host: str | None = None, port: int | None = None) -> None:
    """Start the FastAPI server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)
    host = host or settings.api_host
    port = port or settings.api_port
    logger.info(f"Starting API server on {host}:{port}")
    uvicorn.run("req_analyzer.api:app", host=host, port=port, reload=settings.debug)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="req_analyzer",
        description="Turn free-text business requirements into a technical design document",
    )
    parser.add_argument("file", nargs="?", default="-", help="Requirements text file (default: stdin)")
    parser.add_argument("--json", action="store_true", help="Print the analysis record as JSON")
    parser.add_argument("--serve", action="store_true", help="Start the HTTP API instead")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stdout")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.serve:
        serve()
        return 0

    setup_logging(get_settings().log_level if args.verbose else "WARNING", stream=sys.stderr)
    analysis = run(read_input(args.file))

    if args.json:
        print(json.dumps(analysis.model_dump(mode="json", by_alias=True), indent=2))
    else:
        print(render_design_document(analysis))
    return 0


if __name__ == "__main__":
    sys.exit(main())
