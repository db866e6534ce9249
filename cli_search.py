"""Interactive terminal client for the log search service."""
from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Iterable, List

from logsearch.client import SearchServiceClient
from logsearch.config import settings
from logsearch.logging_setup import configure_logging
from logsearch.session import SearchSessionController
from logsearch.state import Phase
from logsearch.view import SearchView, ViewBlock, format_view


def print_view(view: SearchView) -> None:
    # Nothing to show before a query has been typed.
    if view.block is ViewBlock.NONE and not view.query:
        return
    print(format_view(view))
    print()


async def search_once(controller: SearchSessionController, query: str) -> Phase:
    controller.set_query(query)
    controller.submit_search()
    await controller.wait_idle()
    return controller.state.phase


async def run_queries(url: str, queries: Iterable[str]) -> List[Phase]:
    phases: List[Phase] = []
    async with SearchServiceClient(url) as client:
        controller = SearchSessionController(client)
        controller.subscribe(print_view)
        for query in queries:
            phases.append(await search_once(controller, query))
    return phases


def interactive_shell(url: str, read_line=input) -> None:
    # Prompts are read outside the event loop so Ctrl-C lands in input().
    print("Interactive log search. Type 'exit' to quit.")
    loop = asyncio.new_event_loop()
    client = SearchServiceClient(url)
    controller = SearchSessionController(client)
    controller.subscribe(print_view)
    try:
        while True:
            try:
                query = read_line("> ")
            except (EOFError, KeyboardInterrupt):
                print()
                return
            if query.strip().lower() in {"exit", "quit"}:
                return
            loop.run_until_complete(search_once(controller, query))
    finally:
        loop.run_until_complete(client.aclose())
        loop.close()


def read_batch(file_path: Path) -> List[str]:
    with file_path.open("r", encoding="utf-8") as fh:
        return [line.rstrip("\n") for line in fh if line.strip()]


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="CLI client for the log search service")
    parser.add_argument("query", nargs="?", help="Query string. If omitted, starts REPL mode.")
    parser.add_argument("--batch", type=Path, help="File with queries to execute line by line")
    parser.add_argument("--url", default=settings.search_url, help="Search endpoint URL")
    parser.add_argument("--log-level", default="WARNING", help="Logging level for the client")
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(args.log_level)

    try:
        if args.batch:
            asyncio.run(run_queries(args.url, read_batch(args.batch)))
            return 0
        if args.query is not None:
            phases = asyncio.run(run_queries(args.url, [args.query]))
            return 1 if phases[-1] is Phase.FAILED else 0
        interactive_shell(args.url)
    except KeyboardInterrupt:
        print()
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
