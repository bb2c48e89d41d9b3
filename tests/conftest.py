from datetime import datetime, timezone

import pytest


CANDIDATES_CSV = (
    "Nome completo,E-mail principal,Cidade,Onde nos encontrou\r\n"
    "Ana Silva,ana@example.com,poa,fb\r\n"
    "Bruno Souza,bruno@example.com,Canoas,LinkedIn\r\n"
)


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path / "media"
    return settings.MEDIA_ROOT


@pytest.fixture
def import_time():
    return datetime(2024, 12, 4, 10, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def candidates_csv():
    return CANDIDATES_CSV
