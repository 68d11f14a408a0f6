import importlib

# catalogue order follows this tuple, then each module's TOOLS list
TOOL_MODULES = ("meetings", "users", "reports")


def load_tools():
    """
    Collect the tool catalogue from the modules named in TOOL_MODULES.
    Each tool module must expose:
      - TOOLS (list[ZoomTool]), in the order they are advertised
    Returns an ordered dict: name -> ZoomTool.
    """
    package_name = __name__.rsplit(".", 1)[0]  # "zoom_mcp.tools"

    tools = {}
    for name in TOOL_MODULES:
        m = importlib.import_module(f"{package_name}.{name}")
        for tool in getattr(m, "TOOLS", []):
            if tool.name in tools:
                raise ValueError(f"Duplicate tool name: {tool.name} (in {name})")
            tools[tool.name] = tool

    return tools
