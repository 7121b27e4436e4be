"""MCP stdio server exposing one chat-completion endpoint as a tool."""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

import chat_completion
from settings import Settings

SERVER_NAME = "any-chat-completions-mcp"
SERVER_VERSION = "0.1.0"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(SERVER_NAME)

RequestHandler = Callable[[Any], Awaitable[types.ServerResult]]


# ---------------------------------------------------------------------------
# Tool descriptor
# ---------------------------------------------------------------------------
def tool_descriptor(settings: Settings) -> types.Tool:
    """Return the single chat tool advertised to clients."""
    name = settings.AI_CHAT_NAME
    return types.Tool(
        name=settings.tool_name,
        description=f"Ask {name} a question",
        inputSchema={
            "type": "object",
            "properties": {
                "content": {
                    "type": "string",
                    "description": f"The question to ask {name}",
                }
            },
            "required": ["content"],
        },
    )


def _text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------
async def list_resources(req: types.ListResourcesRequest) -> types.ServerResult:
    return types.ServerResult(types.ListResourcesResult(resources=[]))


async def read_resource(req: types.ReadResourceRequest) -> types.ServerResult:
    raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message="Resource not found"))


async def list_prompts(req: types.ListPromptsRequest) -> types.ServerResult:
    return types.ServerResult(types.ListPromptsResult(prompts=[]))


async def get_prompt(req: types.GetPromptRequest) -> types.ServerResult:
    raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message="Unknown prompt"))


async def call_tool(
    settings: Settings,
    name: str,
    arguments: Optional[Dict[str, Any]],
    http_client: Optional[httpx.AsyncClient] = None,
) -> types.CallToolResult:
    """Run the chat tool and wrap the outcome in a result envelope.

    Never raises: unknown tools, missing input and API failures all come
    back as results with ``isError`` set.
    """
    try:
        if name != settings.tool_name:
            return _text_result(f"Unknown tool: {name}", is_error=True)
        if not arguments or not arguments.get("content"):
            raise ValueError("Content is required")

        logger.info("Forwarding question to %s (%s)", settings.AI_CHAT_NAME, settings.AI_CHAT_MODEL)
        reply = await chat_completion.ask(settings, str(arguments["content"]), http_client)
        return _text_result(reply)
    except Exception as e:
        logger.exception("Tool %s failed: %s", name, e)
        return _text_result(f"Error: {e}", is_error=True)


def request_handlers(settings: Settings) -> Dict[type, RequestHandler]:
    """Map each supported MCP request type to its handler."""
    tool = tool_descriptor(settings)

    async def _list_tools(req: types.ListToolsRequest) -> types.ServerResult:
        return types.ServerResult(types.ListToolsResult(tools=[tool]))

    async def _call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await call_tool(settings, req.params.name, req.params.arguments)
        return types.ServerResult(result)

    return {
        types.ListResourcesRequest: list_resources,
        types.ReadResourceRequest: read_resource,
        types.ListToolsRequest: _list_tools,
        types.CallToolRequest: _call_tool,
        types.ListPromptsRequest: list_prompts,
        types.GetPromptRequest: get_prompt,
    }


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def build_server(settings: Settings) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION)
    server.request_handlers.update(request_handlers(settings))
    return server


async def serve(settings: Settings) -> None:
    """Run the server over stdin/stdout until the client disconnects."""
    server = build_server(settings)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    settings = Settings()
    logger.info("Starting %s for tool %s", SERVER_NAME, settings.tool_name)
    try:
        asyncio.run(serve(settings))
    except Exception as e:
        logger.exception("Server error: %s", e)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
