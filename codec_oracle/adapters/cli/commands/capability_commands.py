"""
Commandes CLI de capacites de decodage (query, check, profile).
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.table import Table

from codec_oracle.adapters.cli.helpers import (
    build_container,
    console,
    exit_on_error,
    parse_constant,
)
from codec_oracle.core.value_objects import CodecRole

RegistryOption = Annotated[
    Optional[Path],
    typer.Option(
        "--registry",
        "-r",
        help="Fichier JSON des codecs (defaut: registry_file de la config)",
    ),
]


def query(
    mime: Annotated[str, typer.Argument(help="Type MIME (ex: video/hevc)")],
    profile: Annotated[str, typer.Argument(help="Profil (entier ou nom, ex: HEVCProfileMain10)")],
    level: Annotated[str, typer.Argument(help="Niveau (entier ou nom, ex: HEVCMainTierLevel5)")],
    encoder: Annotated[
        bool,
        typer.Option("--encoder", help="Interroger les encodeurs au lieu des decodeurs"),
    ] = False,
    registry: RegistryOption = None,
) -> None:
    """
    Verifie le support d'un tuple (mime, profil, niveau).

    Code de sortie 0 si supporte, 1 sinon, 2 en cas d'erreur.

    Exemples:
      codec-oracle query video/hevc HEVCProfileMain10 HEVCMainTierLevel5
      codec-oracle query video/avc 0x10 0x800 --encoder
    """
    with exit_on_error():
        profile_code = parse_constant(profile)
        level_code = parse_constant(level)
        container = build_container(registry)
        if encoder:
            oracle = container.capability_oracle()
            supported = oracle.query(mime, CodecRole.ENCODER, profile_code, level_code)
        else:
            support = container.decoder_support()
            supported = support.check_decoder(mime, profile_code, level_code)

    role = "encodeur" if encoder else "decodeur"
    if supported:
        console.print(f"[green]supporte[/green] ({role} {mime}, profil {profile_code}, niveau {level_code})")
    else:
        console.print(f"[red]non supporte[/red] ({role} {mime}, profil {profile_code}, niveau {level_code})")
        raise typer.Exit(code=1)


def check(registry: RegistryOption = None) -> None:
    """Affiche les predicats de decodage usuels (HEVC, HEVC 10 bits, AVC High10)."""
    with exit_on_error():
        support = build_container(registry).decoder_support()
        results = [
            ("HEVC", support.supports_hevc()),
            ("HEVC Main10 (Main tier 5)", support.supports_hevc_main10()),
            ("AVC High10 (niveau 4)", support.supports_avc_high10()),
        ]

    table = Table(title="Capacites de decodage")
    table.add_column("Predicat", style="cyan")
    table.add_column("Support")
    for label, supported in results:
        table.add_row(label, "[green]oui[/green]" if supported else "[red]non[/red]")
    console.print(table)


def profile(registry: RegistryOption = None) -> None:
    """Affiche le profil d'appareil envoye au serveur media (JSON)."""
    with exit_on_error():
        builder = build_container(registry).device_profile_builder()
        device_profile = builder.device_profile()

    console.print_json(data=device_profile.to_dict())
