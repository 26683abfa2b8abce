# src/wg_clientgen/export.py
from __future__ import annotations
from pathlib import Path

import qrcode

from .models import Config
from .state import save_config


DEFAULT_OUTPUT_DIR = Path("wg-clients")
MANIFEST_NAME = "updated_config.json"


def prepare_output_dir(output_dir: Path) -> Path:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def write_client_conf(output_dir: Path, name: str, conf: str) -> Path:
    """
    Écrit <output_dir>/<name>.conf (600, la config contient la clé privée).
    """
    path = Path(output_dir) / f"{name}.conf"
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(conf)
    path.chmod(0o600)
    return path


def write_client_qr(output_dir: Path, name: str, conf: str) -> Path:
    """
    Encode le texte exact de la config dans un QR code PNG.
    Lève qrcode.exceptions.DataOverflowError si la config est trop longue.
    """
    path = Path(output_dir) / f"{name}_qr.png"
    img = qrcode.make(conf)
    img.save(str(path))
    return path


def write_manifest(config: Config, output_dir: Path) -> Path:
    path = Path(output_dir) / MANIFEST_NAME
    save_config(config, path)
    return path
