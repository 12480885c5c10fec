"""
Utilitaires partages pour les commandes CLI de CodecOracle.

Ce module fournit :
- console / err_console : instances Rich Console partagees
- build_container : container DI, avec registre surcharge si demande
- parse_constant : conversion d'un argument profil/niveau en entier
- exit_on_error : conversion des erreurs du domaine en code de sortie
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from dependency_injector import providers
from rich.console import Console

from codec_oracle.adapters.registry import JsonCodecRegistry
from codec_oracle.container import Container
from codec_oracle.core.errors import CodecOracleError
from codec_oracle.core.value_objects.codec_constants import resolve_constant

console = Console()
err_console = Console(stderr=True)

# Code de sortie pour les erreurs de registre ou d'arguments
EXIT_ERROR = 2


def build_container(registry_file: Optional[Path] = None) -> Container:
    """
    Cree un container, avec un fichier de registre explicite si fourni.

    Args:
        registry_file: Fichier JSON remplacant celui de la configuration
    """
    container = Container()
    if registry_file is not None:
        container.codec_registry.override(
            providers.Singleton(JsonCodecRegistry, path=registry_file)
        )
    return container


def parse_constant(value: str) -> int:
    """Convertit "AVCLevel4", "2048" ou "0x800" en entier."""
    return resolve_constant(value)


@contextmanager
def exit_on_error() -> Iterator[None]:
    """
    Affiche les erreurs CodecOracle sur stderr et sort avec le code 2.

    Usage:
        with exit_on_error():
            oracle = container.capability_oracle()
    """
    try:
        yield
    except CodecOracleError as e:
        err_console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(code=EXIT_ERROR) from e
