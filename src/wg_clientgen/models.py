# src/wg_clientgen/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class ServerConfig:
    host: str          # ex "vpn.example.com" ou IP publique
    port: str          # gardé tel quel, ex "51820"
    dns: str           # ex "1.1.1.1" ou "1.1.1.1, 8.8.8.8"
    subnet: str        # gabarit, ex "10.0.0.{address}/24"
    public_key: str


@dataclass(frozen=True)
class ClientConfig:
    name: str                           # sert aussi de nom de fichier
    address: str                        # fragment injecté dans server.subnet
    private_key: Optional[str] = None   # généré si absent


@dataclass(frozen=True)
class Config:
    server: ServerConfig
    clients: Tuple[ClientConfig, ...] = field(default_factory=tuple)
