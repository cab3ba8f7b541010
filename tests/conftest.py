"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Disable rate limiting and startup seeding in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SEED_ON_STARTUP"] = "false"

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Settings with no simulated latency and no seeding."""
    return Settings(
        create_latency_seconds=0,
        update_latency_seconds=0,
        delete_latency_seconds=0,
        seed_on_startup=False,
        rate_limit_enabled=False,
    )


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Create a fresh application with its own empty directory."""
    from main import create_app

    return create_app(test_settings)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def profile_payload() -> dict:
    """A valid profile form body."""
    return {
        "name": "Ana Souza",
        "description": "Landscape architect and weekend cyclist",
        "image": "https://i.pravatar.cc/200?u=ana",
        "address": {
            "street": "12 Beacon St",
            "city": "Boston",
            "state": "Massachusetts",
            "country": "United States",
            "zip_code": "02108",
            "coordinates": {"lat": 42.3584, "lng": -71.0598},
        },
        "contact": {"email": "ana@example.com", "phone": "(617) 555-0100"},
        "interests": ["cycling", "gardening"],
    }
