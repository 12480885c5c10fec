"""
Fixtures pytest partagees pour les tests CodecOracle.

Ce module contient les fixtures communes utilisees dans les tests:
- Descripteurs de codecs types (HEVC, AVC, H.263)
- Fichiers de registre JSON temporaires
- Capture des logs loguru
"""

import json
from pathlib import Path
from typing import Callable, Iterator

import pytest
from loguru import logger

from codec_oracle.core.value_objects import CodecDescriptor, CodecRole, ProfileLevel
from codec_oracle.core.value_objects.codec_constants import (
    AVCLevel4,
    AVCProfileHigh10,
    H263Level45,
    H263ProfileBaseline,
    HEVCMainTierLevel5,
    HEVCProfileMain10,
    MIMETYPE_VIDEO_AVC,
    MIMETYPE_VIDEO_H263,
    MIMETYPE_VIDEO_HEVC,
)
from tests.fixtures.registry_data import ANDROID_TV_4K_REGISTRY


@pytest.fixture
def hevc_main10_decoder() -> CodecDescriptor:
    """Decodeur HEVC Main10 jusqu'au Main tier 5."""
    return CodecDescriptor(
        name="c2.vendor.hevc.decoder",
        mime=MIMETYPE_VIDEO_HEVC,
        role=CodecRole.DECODER,
        profile_levels=(ProfileLevel(HEVCProfileMain10, HEVCMainTierLevel5),),
    )


@pytest.fixture
def avc_high10_encoder() -> CodecDescriptor:
    """Encodeur AVC High10 niveau 4."""
    return CodecDescriptor(
        name="c2.vendor.avc.encoder",
        mime=MIMETYPE_VIDEO_AVC,
        role=CodecRole.ENCODER,
        profile_levels=(ProfileLevel(AVCProfileHigh10, AVCLevel4),),
    )


@pytest.fixture
def h263_level45_decoder() -> CodecDescriptor:
    """Decodeur H.263 Baseline annoncant uniquement Level45."""
    return CodecDescriptor(
        name="c2.android.h263.decoder",
        mime=MIMETYPE_VIDEO_H263,
        role=CodecRole.DECODER,
        profile_levels=(ProfileLevel(H263ProfileBaseline, H263Level45),),
    )


@pytest.fixture
def write_registry(tmp_path: Path) -> Callable[[dict], Path]:
    """Ecrit un document de registre dans un fichier JSON temporaire."""

    def _write(data: dict, name: str = "codecs.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def registry_file(write_registry: Callable[[dict], Path]) -> Path:
    """Fichier de registre d'une box Android TV 4K."""
    return write_registry(ANDROID_TV_4K_REGISTRY)


@pytest.fixture
def log_messages() -> Iterator[list]:
    """Capture les messages loguru (niveau DEBUG et plus)."""
    messages: list = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
