from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from laptop_api.core.config import Settings
from laptop_api.main import create_app


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'laptops.db'}",
        LOG_LEVEL="DEBUG",
        _env_file=None,
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    # Entering the context runs startup, which creates the laptops table
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def t14() -> Dict[str, str]:
    return {
        "name": "T14",
        "description": "business laptop",
        "price": "999",
        "processor": "i7",
        "ram": "16GB",
        "storage": "512GB",
        "display": "14in",
        "os": "Linux",
        "graphics": "integrated",
    }


@pytest.fixture
def xps() -> Dict[str, str]:
    return {
        "name": "XPS 13",
        "description": "ultrabook",
        "price": "$1,299.00",
        "processor": "i5",
        "ram": "8GB",
        "storage": "256GB",
        "display": "13.4in",
        "os": "Windows 11",
        "graphics": "Iris Xe",
    }
