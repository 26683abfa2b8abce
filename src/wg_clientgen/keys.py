# src/wg_clientgen/keys.py
from __future__ import annotations
import base64
import secrets
from dataclasses import replace
from typing import List, Tuple

from .models import Config


KEY_SIZE = 32


class KeyGenerationError(RuntimeError):
    """The entropy source could not produce key material."""


def generate_private_key() -> str:
    """
    Retourne 32 octets aléatoires encodés en base64 standard (avec padding).
    """
    try:
        raw = secrets.token_bytes(KEY_SIZE)
    except (OSError, NotImplementedError) as e:
        raise KeyGenerationError(f"Unable to read random bytes: {e}") from e
    return base64.b64encode(raw).decode("ascii")


def fill_missing_keys(config: Config) -> Tuple[Config, List[str]]:
    """
    Retourne une nouvelle Config où chaque client sans clé en reçoit une,
    ainsi que la liste des clients concernés. Les clés existantes ne sont
    jamais remplacées.
    """
    clients = []
    generated = []
    for c in config.clients:
        if c.private_key:
            clients.append(c)
            continue
        clients.append(replace(c, private_key=generate_private_key()))
        generated.append(c.name)

    return replace(config, clients=tuple(clients)), generated
