import json

import pytest


@pytest.fixture
def server_dict():
    return {
        "host": "vpn.example.com",
        "port": "51820",
        "dns": "1.1.1.1",
        "subnet": "10.0.0.{address}/24",
        "public_key": "SERVERPUBKEY",
    }


@pytest.fixture
def write_config(tmp_path):
    def _write(data, name="config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
