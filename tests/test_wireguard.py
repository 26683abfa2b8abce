import pytest

from wg_clientgen.models import ClientConfig, ServerConfig
from wg_clientgen.wireguard import (
    MissingPrivateKeyError,
    render_client_conf,
    resolve_address,
)


SERVER = ServerConfig(
    host="vpn.example.com",
    port="51820",
    dns="1.1.1.1",
    subnet="10.0.0.{address}/24",
    public_key="SERVERPUBKEY",
)


def test_render_exact_profile():
    client = ClientConfig(name="alice", address="5", private_key="ALICEKEY")

    conf = render_client_conf(client, SERVER)

    assert conf == (
        "[Interface]\n"
        "PrivateKey = ALICEKEY\n"
        "Address = 10.0.0.5/24\n"
        "DNS = 1.1.1.1\n"
        "\n"
        "[Peer]\n"
        "PublicKey = SERVERPUBKEY\n"
        "Endpoint = vpn.example.com:51820\n"
        "AllowedIPs = 0.0.0.0/0\n"
        "PersistentKeepalive = 25\n"
    )


def test_render_is_deterministic():
    client = ClientConfig(name="bob", address="7", private_key="BOBKEY")
    assert render_client_conf(client, SERVER) == render_client_conf(client, SERVER)


def test_render_without_key_raises():
    client = ClientConfig(name="carol", address="9")

    with pytest.raises(MissingPrivateKeyError) as excinfo:
        render_client_conf(client, SERVER)

    assert excinfo.value.client_name == "carol"
    assert "carol" in str(excinfo.value)


def test_resolve_address_single_substitution():
    assert resolve_address("10.{address}.0.{address}/24", "3") == "10.3.0.{address}/24"


def test_resolve_address_keeps_template_without_placeholder():
    assert resolve_address("10.0.0.0/24", "3") == "10.0.0.0/24"
