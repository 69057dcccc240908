"""Register the server with the Cursor editor's MCP configuration."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

CURSOR_CONFIG_PATH = Path.home() / ".cursor" / "mcp.json"

SERVER_KEY = "light-mcp"
SERVER_ENTRY = {"command": "lightdocs", "args": ["serve"]}


def read_config(config_path: Path) -> dict[str, Any]:
    """Read the MCP config, starting fresh if it is missing or invalid."""
    if not config_path.exists():
        return {"mcpServers": {}}

    try:
        config = json.loads(config_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning(f"Invalid {config_path.name}, creating new one")
        return {"mcpServers": {}}

    if not isinstance(config, dict):
        logger.warning(f"Invalid {config_path.name}, creating new one")
        return {"mcpServers": {}}
    return config


def write_config(config_path: Path, config: dict[str, Any]) -> None:
    config_path.write_text(json.dumps(config, indent=2), encoding="utf-8")


def install(config_path: Optional[Path] = None) -> Path:
    """Add or update the server entry.

    Args:
        config_path: Config file to edit (defaults to ~/.cursor/mcp.json)

    Returns:
        The path that was written
    """
    config_path = Path(config_path or CURSOR_CONFIG_PATH)
    logger.info("Installing Light MCP for ZK Compression documentation...")

    if not config_path.parent.exists():
        config_path.parent.mkdir(parents=True)
        logger.info(f"Created {config_path.parent}")

    config = read_config(config_path)
    servers = config.get("mcpServers")
    if not isinstance(servers, dict):
        servers = {}
    servers[SERVER_KEY] = dict(SERVER_ENTRY)
    config["mcpServers"] = servers
    write_config(config_path, config)

    logger.info("Light MCP installed successfully.")
    logger.info(f"Configuration saved to: {config_path}")
    logger.info("Please restart Cursor to load the MCP server.")
    return config_path


def uninstall(config_path: Optional[Path] = None) -> bool:
    """Remove the server entry.

    Returns:
        True if an entry was removed
    """
    config_path = Path(config_path or CURSOR_CONFIG_PATH)
    logger.info("Uninstalling Light MCP...")

    if not config_path.exists():
        logger.info("No Cursor MCP configuration found.")
        return False

    config = read_config(config_path)
    servers = config.get("mcpServers")
    if not isinstance(servers, dict) or SERVER_KEY not in servers:
        logger.info("Light MCP was not found in configuration.")
        return False

    del servers[SERVER_KEY]
    write_config(config_path, config)
    logger.info("Light MCP removed from Cursor configuration.")
    logger.info("Please restart Cursor to apply changes.")
    return True
