"""CF Pulse CLI - serve, inspect and invoke the Cloud Foundry MCP tools."""

import typer
from dotenv import load_dotenv

from cfpulse.logging_config import setup_logging
from cli.server import serve
from cli.tools import call_tool, list_tools

# Load environment variables
load_dotenv()

# Create the main app
app = typer.Typer(
    name="cfpulse",
    help="CF Pulse - Cloud Foundry operations as MCP tools",
    add_completion=False,
)


@app.callback()
def configure():
    """Configure logging before any command runs."""
    setup_logging()


app.command("serve", help="Start the MCP server")(serve)
app.command("tools", help="List the advertised tools")(list_tools)
app.command("call", help="Invoke a single tool and print the result")(call_tool)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
