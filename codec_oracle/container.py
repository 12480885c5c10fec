"""
Container d'injection de dependances via dependency-injector.

Assemble registre, oracle et services pour la CLI. L'oracle n'est jamais
un singleton global : chaque appel de capability_oracle() capture un
instantane du registre.
"""

from dependency_injector import containers, providers

from .adapters.registry import JsonCodecRegistry
from .config import Settings
from .services.capability_oracle import CapabilityOracle
from .services.decoder_support import DecoderSupport
from .services.device_profile import DeviceProfileBuilder


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        oracle = container.capability_oracle()
        support = container.decoder_support()

    Pour un autre inventaire :
        container.codec_registry.override(providers.Object(registry))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Registre - charge une seule fois depuis le fichier configure
    codec_registry = providers.Singleton(
        JsonCodecRegistry,
        path=config.provided.registry_file,
    )

    # Oracle - Factory : instantane de la vue REGULAR a chaque construction
    capability_oracle = providers.Factory(
        CapabilityOracle.from_registry,
        registry=codec_registry,
    )

    decoder_support = providers.Factory(
        DecoderSupport,
        oracle=capability_oracle,
    )

    device_profile_builder = providers.Factory(
        DeviceProfileBuilder,
        decoder_support=decoder_support,
        h264_max_level=config.provided.h264_max_level,
        max_audio_channels=config.provided.max_audio_channels,
        downmix_audio=config.provided.downmix_audio,
        ac3_primary=config.provided.ac3_primary,
    )
