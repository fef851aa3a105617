"""MCP server exposing hashtool commands to MCP clients."""

from mcp.server.fastmcp import FastMCP

from hashtool.commands import ToolError, hash_data, verify_data

mcp = FastMCP("hashtool")


@mcp.tool(name="hash")
def hash_tool(data: str, algo: str = "") -> dict:
    """Hash data and return the lowercase hex digest.

    Args:
        data: Text to hash (must be non-empty)
        algo: "md5" or "sha256" (defaults to sha256)
    """
    try:
        return hash_data(data, algo).model_dump(mode="json")
    except ToolError as e:
        raise ValueError(str(e)) from e


@mcp.tool(name="verify")
def verify_tool(data: str, expected: str, algo: str = "") -> dict:
    """Check data against an expected hex digest. Returns match true/false."""
    try:
        return verify_data(data, expected, algo).model_dump(mode="json")
    except ToolError as e:
        raise ValueError(str(e)) from e


if __name__ == "__main__":
    mcp.run()
