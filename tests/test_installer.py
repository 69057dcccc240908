import json

from lightdocs import installer


def test_install_creates_config(tmp_path):
    config_path = tmp_path / ".cursor" / "mcp.json"
    installer.install(config_path)

    config = json.loads(config_path.read_text())
    assert config["mcpServers"]["light-mcp"] == {"command": "lightdocs", "args": ["serve"]}


def test_install_keeps_other_servers(tmp_path):
    config_path = tmp_path / "mcp.json"
    config_path.write_text(json.dumps({"mcpServers": {"other": {"command": "x"}}, "theme": "dark"}))

    installer.install(config_path)

    config = json.loads(config_path.read_text())
    assert config["mcpServers"]["other"] == {"command": "x"}
    assert "light-mcp" in config["mcpServers"]
    assert config["theme"] == "dark"


def test_install_replaces_invalid_json(tmp_path):
    config_path = tmp_path / "mcp.json"
    config_path.write_text("{broken")

    installer.install(config_path)

    config = json.loads(config_path.read_text())
    assert list(config["mcpServers"]) == ["light-mcp"]


def test_uninstall_removes_entry(tmp_path):
    config_path = tmp_path / "mcp.json"
    installer.install(config_path)

    assert installer.uninstall(config_path) is True
    assert json.loads(config_path.read_text())["mcpServers"] == {}


def test_uninstall_without_config_or_entry(tmp_path):
    config_path = tmp_path / "mcp.json"
    assert installer.uninstall(config_path) is False

    config_path.write_text(json.dumps({"mcpServers": {}}))
    assert installer.uninstall(config_path) is False
