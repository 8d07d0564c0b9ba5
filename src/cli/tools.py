"""Tool inspection and one-shot invocation commands for the CF Pulse CLI."""

import asyncio
import json
from typing import Any, Dict, Optional

import typer
from rich.table import Table

from cf import PlatformClient
from cfpulse.catalog import build_registry
from cfpulse.dispatcher import InvocationDispatcher
from cli import common
from cli.common import DetachedClient, console, logger
from models import ToolResult


def list_tools():
    """List the tools this server advertises."""
    registry = build_registry(DetachedClient())

    table = Table(title="CF Pulse Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description", style="white")
    table.add_column("Required arguments", style="yellow")

    for definition in registry.list_all():
        required = ", ".join(definition.argument_schema.get("required", []))
        table.add_row(definition.name, definition.description, required or "-")

    console.print(table)


async def _invoke(client: PlatformClient, tool: str, arguments: Dict[str, Any]) -> ToolResult:
    try:
        dispatcher = InvocationDispatcher(build_registry(client))
        return await dispatcher.invoke(tool, arguments)
    finally:
        await common.close_client(client)


def call_tool(
    tool: str = typer.Argument(..., help="Name of the tool, e.g. applicationsList"),
    args: Optional[str] = typer.Option(
        None, "--args", "-a", help='Tool arguments as a JSON object, e.g. \'{"name": "demo"}\''
    ),
):
    """Invoke a single tool and print the result envelope as JSON."""
    arguments: Any = {}
    if args:
        try:
            arguments = json.loads(args)
        except json.JSONDecodeError as e:
            logger.error(f"--args is not valid JSON: {e}")
            raise typer.Exit(2)
        if not isinstance(arguments, dict):
            logger.error("--args must be a JSON object")
            raise typer.Exit(2)

    try:
        client = common.build_client()
    except ValueError as e:
        logger.error(f"Invalid Cloud Foundry settings: {e}")
        raise typer.Exit(2)

    result = asyncio.run(_invoke(client, tool, arguments))
    typer.echo(json.dumps(result.to_dict(), indent=2))
    if result.is_error:
        raise typer.Exit(1)
