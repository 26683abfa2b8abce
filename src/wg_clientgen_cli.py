import argparse
import sys
from pathlib import Path

from qrcode.exceptions import DataOverflowError

from wg_clientgen.export import (
    DEFAULT_OUTPUT_DIR,
    prepare_output_dir,
    write_client_conf,
    write_client_qr,
    write_manifest,
)
from wg_clientgen.keys import KeyGenerationError, fill_missing_keys
from wg_clientgen.state import ConfigError, load_config
from wg_clientgen.wireguard import MissingPrivateKeyError, render_client_conf


EXIT_OK = 0
EXIT_FATAL = 1
EXIT_WARNINGS = 3


def error(msg):
    print(f"[ERREUR] {msg}", file=sys.stderr)


# ---------------------------------------------------
# Génération complète : clés, configs, QR codes, manifeste
# ---------------------------------------------------

def run(config_path, output_dir=DEFAULT_OUTPUT_DIR):
    try:
        config = load_config(Path(config_path))
    except (FileNotFoundError, ConfigError) as e:
        error(e)
        return EXIT_FATAL

    try:
        config, generated = fill_missing_keys(config)
    except KeyGenerationError as e:
        error(e)
        return EXIT_FATAL
    for name in generated:
        print(f"[+] Clé privée générée pour {name}")

    # tout est rendu avant d'écrire quoi que ce soit
    try:
        profiles = [(c.name, render_client_conf(c, config.server)) for c in config.clients]
    except MissingPrivateKeyError as e:
        error(e)
        return EXIT_FATAL

    try:
        output_dir = prepare_output_dir(output_dir)
    except OSError as e:
        error(f"Impossible de créer le dossier {output_dir} : {e}")
        return EXIT_FATAL

    failures = 0
    for name, conf in profiles:
        try:
            path = write_client_conf(output_dir, name, conf)
            print(f"[OK] Config générée pour {name} : {path}")
        except (OSError, ValueError) as e:
            error(f"Échec d'écriture de la config de {name} : {e}")
            failures += 1

        try:
            path = write_client_qr(output_dir, name, conf)
            print(f"[OK] QR code généré pour {name} : {path}")
        except (OSError, ValueError, DataOverflowError) as e:
            error(f"Échec de génération du QR code de {name} : {e}")
            failures += 1

    try:
        path = write_manifest(config, output_dir)
        print(f"[OK] Config mise à jour : {path}")
    except OSError as e:
        error(f"Échec d'écriture de la config mise à jour : {e}")
        failures += 1

    if failures:
        print(f"[!] Terminé avec {failures} erreur(s).")
        return EXIT_WARNINGS
    return EXIT_OK


# ---------------------------------------------------
# CLI / Parser
# ---------------------------------------------------

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="wg-clientgen",
        description="Génère les configs clients WireGuard et leurs QR codes.",
    )
    parser.add_argument("config", help="chemin du fichier JSON (server + client)")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"dossier de sortie (défaut : {DEFAULT_OUTPUT_DIR})",
    )

    # argparse sort avec le code 2 si le fichier n'est pas donné
    args = parser.parse_args(argv)
    return run(args.config, args.output_dir)


if __name__ == "__main__":
    sys.exit(main())
