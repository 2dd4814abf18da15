"""
MCP Server — Exposes the Prompt Analyzer and the model catalog
as discoverable tools for agents and editors.

Tools:
- analyze_prompt: Score a prompt and list improvement tips
- search_prompts: Search the curated prompt library
- compare_models: Compare two models side by side
"""

import asyncio
import json
import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from prompt_analyzer import PromptAnalyzer
from prompt_analyzer.config import LOG_FORMAT, LOG_LEVEL
from catalog import service
from catalog.exceptions import CatalogError

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# Create MCP server
server = Server("prompt-analyzer")

# Shared instances
analyzer = PromptAnalyzer()


def _json_content(payload) -> list[TextContent]:
    return [
        TextContent(
            type="text",
            text=json.dumps(payload, indent=2, ensure_ascii=False, default=str),
        )
    ]


@server.list_tools()
async def list_tools() -> list[Tool]:
    """Advertise available tools to MCP clients."""
    return [
        Tool(
            name="analyze_prompt",
            description=(
                "Score a prompt from 0 to 15 using quick heuristics: length, "
                "whether it assigns a role, gives context, constrains the "
                "output format, and names an audience. Returns the score and "
                "tips for whatever is missing."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "prompt": {
                        "type": "string",
                        "description": "The prompt to analyze",
                    },
                },
                "required": ["prompt"],
            },
        ),
        Tool(
            name="search_prompts",
            description=(
                "Search the curated prompt library by title or tag. "
                "An empty query returns every prompt."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Case-insensitive title or tag fragment",
                        "default": "",
                    },
                },
            },
        ),
        Tool(
            name="compare_models",
            description=(
                "Compare two models on family, license, speed, cost and "
                "strengths. Model ids: gpt-4o, gpt-4.1-mini, llama-3.1-70b, "
                "mistral-large."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "a": {"type": "string", "description": "First model id"},
                    "b": {"type": "string", "description": "Second model id"},
                },
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls from MCP clients."""
    arguments = arguments or {}

    if name == "analyze_prompt":
        # Empty prompts are valid input and score 0
        result = analyzer.describe(arguments.get("prompt", ""))
        return _json_content(result.model_dump(mode="json"))

    elif name == "search_prompts":
        prompts = service.search_prompts(arguments.get("query", ""))
        return _json_content([p.model_dump(mode="json") for p in prompts])

    elif name == "compare_models":
        try:
            comparison = service.compare_models(arguments.get("a"), arguments.get("b"))
        except CatalogError as e:
            logger.error("compare_models failed: %s", e, exc_info=True)
            return [TextContent(type="text", text=f"Error: {str(e)}")]
        return _json_content(comparison.model_dump(mode="json"))

    return [TextContent(type="text", text=f"Error: unknown tool {name}")]


async def main():
    """Run the MCP server over stdio."""
    logger.info("MCP Server starting (stdio mode)")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


if __name__ == "__main__":
    asyncio.run(main())
