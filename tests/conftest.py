# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar el almacén de claves y recargar módulos.
# --------------------------------------------------------------

import importlib
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def _isolate_storage(tmp_path, monkeypatch) -> Iterator[None]:
    """Aísla STORAGE_PATH y recarga phonevault.config para cada prueba.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    data_dir = tmp_path / "_data"
    monkeypatch.setenv("STORAGE_PATH", str(data_dir))
    monkeypatch.delenv("KEY_SLOT", raising=False)

    import phonevault.config as config_module

    importlib.reload(config_module)

    yield


@pytest.fixture
def zero_key() -> str:
    """Clave de 64 ceros usada en los escenarios de referencia."""
    return "00" * 32
