# src/wg_clientgen/wireguard.py
from __future__ import annotations

from .models import ClientConfig, ServerConfig


ADDRESS_PLACEHOLDER = "{address}"


class MissingPrivateKeyError(ValueError):
    """A client reached rendering without a private key."""

    def __init__(self, client_name: str):
        super().__init__(f"Private key not provided for client '{client_name}'")
        self.client_name = client_name


def resolve_address(subnet: str, address: str) -> str:
    # une seule substitution, texte littéral
    return subnet.replace(ADDRESS_PLACEHOLDER, address, 1)


# ---------- Rendu des configs ----------

def render_client_conf(client: ClientConfig, server: ServerConfig) -> str:
    if not client.private_key:
        raise MissingPrivateKeyError(client.name)

    lines = [
        "[Interface]",
        f"PrivateKey = {client.private_key}",
        f"Address = {resolve_address(server.subnet, client.address)}",
        f"DNS = {server.dns}",
        "",
        "[Peer]",
        f"PublicKey = {server.public_key}",
        f"Endpoint = {server.host}:{server.port}",
        "AllowedIPs = 0.0.0.0/0",
        # ligne fixe du format client
        "PersistentKeepalive = 25",
    ]

    return "\n".join(lines) + "\n"
