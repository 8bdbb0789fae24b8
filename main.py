import argparse
import asyncio
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Sequence

from config import settings
from services import (
    DirectoryIdentifierSource,
    IdentifierSourceUnavailable,
    SitemapBuilder,
    SitemapClassifier,
    load_urls,
)
from services.server import run_server

logger = logging.getLogger("roadmap_sitemap")


# ensure logs are recorded both to stderr and to a rotating file
def configure_logging() -> None:
    log_dir = settings.LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "roadmap-sitemap.log"

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        handlers=[
            logging.StreamHandler(),
            RotatingFileHandler(
                log_file,
                maxBytes=5 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            ),
        ],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sitemap classification and metrics server for roadmap.sh"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="Run the HTTP server exposing /metrics")
    serve.add_argument("--host", default=None, help="Interface to bind (default: HOST)")
    serve.add_argument("--port", type=int, default=None, help="Port to listen on (default: PORT)")

    sitemap = commands.add_parser("sitemap", help="Build a sitemap from a list of site URLs")
    sitemap.add_argument("urls_file", type=Path, help="Text file with one URL per line, or a sitemap XML")
    sitemap.add_argument("-o", "--output", type=Path, default=None, help="Write the sitemap here instead of stdout")
    sitemap.add_argument("--site-url", default=None, help="Site root (default: SITE_URL)")
    return parser


async def build_sitemap(urls_file: Path, output: Path | None, site_url: str | None) -> int:
    classifier = SitemapClassifier(DirectoryIdentifierSource(), site_url=site_url)
    builder = SitemapBuilder(classifier)

    try:
        entries = await builder.build(load_urls(urls_file))
    except IdentifierSourceUnavailable:
        logger.exception("Sitemap build aborted")
        return 1

    document = builder.render(entries)
    if output is None:
        sys.stdout.buffer.write(document)
        sys.stdout.buffer.write(b"\n")
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(document)
        logger.info("Sitemap with %s entries written to %s", len(entries), output)
    return 0


async def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "sitemap":
        return await build_sitemap(args.urls_file, args.output, args.site_url)

    await run_server(args.host, args.port)
    return 0


def run() -> None:
    configure_logging()
    try:
        exit_code = asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        return
    except Exception:
        logger.exception("Fatal error")
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    run()
