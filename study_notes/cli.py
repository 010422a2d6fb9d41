from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import load_settings
from .utils.logging import setup_logging


logger = logging.getLogger("study_notes.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="study-notes", description="Generate study notes from PDFs with a local LLM")
    parser.add_argument("--config", type=str, default=None, help="Path to a YAML config file")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the summarization gateway")
    serve.add_argument("--host", type=str, default=None)
    serve.add_argument("--port", type=int, default=None)

    gen = sub.add_parser("generate", help="Generate notes for one PDF through the gateway")
    gen.add_argument("pdf", type=Path)
    gen.add_argument("--gateway-url", type=str, default=None)
    gen.add_argument("--out", type=Path, default=None, help="Write the HTML notes here instead of stdout")
    return parser


def _serve(args: argparse.Namespace, settings) -> int:
    import uvicorn

    uvicorn.run(
        "study_notes.api.app:app",
        host=args.host or settings.server.host,
        port=args.port or settings.server.port,
    )
    return 0


def _generate(args: argparse.Namespace, settings) -> int:
    from .client import NotesSession, SessionState

    gateway_url = args.gateway_url or settings.client.gateway_url
    with NotesSession(gateway_url) as session:
        session.select_file(args.pdf)
        state = session.submit()
        if state is not SessionState.SUCCEEDED:
            print(f"Error: {session.error}", file=sys.stderr)
            return 1

        if args.out is not None:
            args.out.parent.mkdir(parents=True, exist_ok=True)
            args.out.write_text(session.rendered, encoding="utf-8")
            logger.info("Notes written to %s", args.out)
        else:
            print(session.rendered)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.config:
        # The gateway loads its own settings at import time.
        os.environ["STUDY_NOTES_CONFIG"] = args.config

    settings = load_settings(args.config)
    setup_logging(Path(settings.logging.log_dir) if settings.logging.log_dir else None, settings.logging.level)

    if args.command == "serve":
        return _serve(args, settings)
    return _generate(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
