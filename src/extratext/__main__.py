"""CLI entry point for extratext.

Usage:
    python -m extratext serve
    python -m extratext title <document_id_or_url>
    python -m extratext read <document_id_or_url>
    python -m extratext replace <document_id_or_url> <text>
    python -m extratext append <document_id_or_url> <text>
    python -m extratext format <document_id_or_url> <text> [--bold] [--color HEX] ...
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Awaitable, Callable

from pydantic import ValidationError

from extratext.client import DocsTextClient, parse_document_id
from extratext.config import Settings, get_settings
from extratext.credentials import ServiceAccountAuth
from extratext.exceptions import ExtraTextError
from extratext.logging import setup_logging
from extratext.server import run_server
from extratext.styles import StyleRequest
from extratext.transport import GoogleDocsTransport

Operation = Callable[
    [DocsTextClient, str, argparse.Namespace], Awaitable[str]
]


async def _run_operation(args: argparse.Namespace, settings: Settings) -> int:
    """Authenticate, run one document operation and print its result."""
    try:
        auth = ServiceAccountAuth(settings.service_account_path)
    except ExtraTextError as e:
        print(f"Authentication failed: {e}", file=sys.stderr)
        return 1

    transport = GoogleDocsTransport(
        access_token=auth.get_access_token_async, timeout=settings.request_timeout
    )
    client = DocsTextClient(transport)
    document_id = parse_document_id(args.document)

    try:
        result = await args.operation(client, document_id, args)
    except ExtraTextError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        await transport.close()

    print(result)
    return 0


async def op_title(
    client: DocsTextClient, document_id: str, args: argparse.Namespace,  # noqa: ARG001
) -> str:
    return await client.get_title(document_id)


async def op_read(
    client: DocsTextClient, document_id: str, args: argparse.Namespace,  # noqa: ARG001
) -> str:
    return await client.read_document(document_id)


async def op_replace(
    client: DocsTextClient, document_id: str, args: argparse.Namespace
) -> str:
    return await client.update_document_content(document_id, args.text)


async def op_append(
    client: DocsTextClient, document_id: str, args: argparse.Namespace
) -> str:
    return await client.append_to_document(document_id, args.text)


async def op_format(
    client: DocsTextClient, document_id: str, args: argparse.Namespace
) -> str:
    style = StyleRequest(
        bold=args.bold,
        italic=args.italic,
        underline=args.underline,
        font_size=args.font_size,
        font_family=args.font_family,
        foreground_color=args.color,
    )
    return await client.format_text(document_id, args.text, style)


def cmd_serve(args: argparse.Namespace) -> int:  # noqa: ARG001
    """Run the MCP server over stdio."""
    try:
        run_server(get_settings())
    except (ExtraTextError, ValidationError) as e:
        print(f"Could not start server: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_operation(args: argparse.Namespace) -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    result: int = asyncio.run(_run_operation(args, settings))
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extratext",
        description="Read and edit Google Docs text from the command line or over MCP",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the MCP server over stdio")
    serve_parser.set_defaults(func=cmd_serve)

    def add_document_command(
        name: str, help_text: str, operation: Operation, with_text: str | None = None
    ) -> argparse.ArgumentParser:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("document", help="Document ID or full Google Docs URL")
        if with_text:
            sub.add_argument("text", help=with_text)
        sub.set_defaults(func=cmd_operation, operation=operation)
        return sub

    add_document_command("title", "Print the document title", op_title)
    add_document_command("read", "Print the document text", op_read)
    add_document_command(
        "replace", "Replace the whole document text", op_replace, "New document text"
    )
    add_document_command(
        "append", "Append text at the end of the document", op_append, "Text to append"
    )
    format_parser = add_document_command(
        "format",
        "Format the first occurrence of some text",
        op_format,
        "Exact text to format",
    )
    format_parser.add_argument(
        "--bold", action=argparse.BooleanOptionalAction, default=None
    )
    format_parser.add_argument(
        "--italic", action=argparse.BooleanOptionalAction, default=None
    )
    format_parser.add_argument(
        "--underline", action=argparse.BooleanOptionalAction, default=None
    )
    format_parser.add_argument("--font-size", type=float, help="Font size in points")
    format_parser.add_argument("--font-family", help="Font family, e.g. Arial")
    format_parser.add_argument("--color", help="Text color as HEX, e.g. '#FF0000'")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
