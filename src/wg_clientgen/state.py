# src/wg_clientgen/state.py
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, List

from .models import ClientConfig, Config, ServerConfig


SERVER_FIELDS = ("host", "port", "dns", "subnet", "public_key")


class ConfigError(ValueError):
    """Invalid or unreadable configuration file."""


def _require_str(data: dict, key: str, where: str) -> str:
    if key not in data:
        raise ConfigError(f"Missing field '{key}' in {where}")
    value = data[key]
    if not isinstance(value, str):
        raise ConfigError(f"Field '{key}' in {where} must be a string")
    return value


def config_to_dict(config: Config) -> dict:
    clients = []
    for c in config.clients:
        entry = {"name": c.name}
        if c.private_key is not None:
            entry["private_key"] = c.private_key
        entry["address"] = c.address
        clients.append(entry)

    return {
        "server": {
            "host": config.server.host,
            "port": config.server.port,
            "dns": config.server.dns,
            "subnet": config.server.subnet,
            "public_key": config.server.public_key,
        },
        "client": clients,
    }


def dict_to_config(data: Any) -> Config:
    if not isinstance(data, dict):
        raise ConfigError("Top-level JSON value must be an object")

    server_data = data.get("server")
    if not isinstance(server_data, dict):
        raise ConfigError("Missing or invalid 'server' section")
    server = ServerConfig(
        **{key: _require_str(server_data, key, "server") for key in SERVER_FIELDS}
    )

    clients_data = data.get("client")
    if not isinstance(clients_data, list):
        raise ConfigError("Missing or invalid 'client' list")

    clients: List[ClientConfig] = []
    seen = set()
    for i, c in enumerate(clients_data):
        where = f"client[{i}]"
        if not isinstance(c, dict):
            raise ConfigError(f"{where} must be an object")

        private_key = c.get("private_key")
        if private_key is not None and not isinstance(private_key, str):
            raise ConfigError(f"Field 'private_key' in {where} must be a string")

        client = ClientConfig(
            name=_require_str(c, "name", where),
            address=_require_str(c, "address", where),
            private_key=private_key,
        )
        # deux clients du même nom écraseraient les mêmes fichiers
        if client.name in seen:
            raise ConfigError(f"Duplicate client name '{client.name}' in {where}")
        seen.add(client.name)
        clients.append(client)

    return Config(server=server, clients=tuple(clients))


def load_config(path: Path) -> Config:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e
    except ValueError as e:
        raise ConfigError(f"Failed to parse config file {path}: {e}") from e
    return dict_to_config(data)


def save_config(config: Config, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config_to_dict(config)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    # contient les clés privées : 600
    path.chmod(0o600)
