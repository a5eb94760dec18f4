"""Test configuration and fixtures for cl_image_url.

This module provides:
- Function-scoped fixtures (URL builders, resize builders)
- API fixtures (FastAPI app with the resize router mounted)
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from cl_image_url import ImageUrlBuilder, ResizeBuilder, create_router

TEST_IMAGE_PATH = "/images/photo.jpg"
TEST_BASE_URL = "https://images.example.com"


# ============================================================================
# Function-Scoped Fixtures (Run Per Test)
# ============================================================================


@pytest.fixture
def url_builder() -> ImageUrlBuilder:
    """Provide a fresh builder with an empty parameter store."""
    return ImageUrlBuilder(TEST_IMAGE_PATH)


@pytest.fixture
def resize_builder(url_builder: ImageUrlBuilder) -> ResizeBuilder:
    """Provide a resize builder bound to the `url_builder` fixture."""
    return ResizeBuilder(url_builder)


# ============================================================================
# API Fixtures
# ============================================================================


@pytest.fixture
def api_client() -> TestClient:
    """Provide a test client for an app serving the resize router."""
    app = FastAPI()
    app.include_router(create_router(base_url=TEST_BASE_URL))
    return TestClient(app)
