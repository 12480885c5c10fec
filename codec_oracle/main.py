"""
Point d'entrée CLI de CodecOracle.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import check, profile, query
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="codec-oracle",
    help="Capacites de decodage video de l'appareil",
)
container = Container()


@app.callback()
def main_callback(
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """CodecOracle - Lecture directe ou transcodage."""
    if quiet:
        logger.disable("codec_oracle")


app.command()(query)
app.command()(check)
app.command()(profile)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Registre de codecs : {config.registry_file}")
    typer.echo(f"Niveau H.264 maximal : {config.h264_max_level}")
    typer.echo(f"Canaux audio maximum : {config.max_audio_channels}")
    typer.echo(f"Downmix audio : {config.downmix_audio}")
    typer.echo(f"AC3 prefere : {config.ac3_primary}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CodecOracle v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.debug("Démarrage de CodecOracle", version=__version__)

    app()


if __name__ == "__main__":
    main()
