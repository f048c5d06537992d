"""
Global pytest configuration and fixtures for the DocuSign client tests.

This file contains shared fixtures that are available to all test modules
without explicit import. The API is never contacted: every client is wired
to a MockDocuSign through ``httpx.MockTransport``.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Generator

import pytest  # type: ignore
from faker import Faker  # type: ignore

# Add the project root to Python path
project_root: Path = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from docusign_rest.client.docusign.context import ServiceContext  # noqa: E402
from docusign_rest.client.docusign.credentials import OAuthCredential  # noqa: E402
from docusign_rest.client.docusign.docusign import DocuSignClient  # noqa: E402
from docusign_rest.client.http.http_client import HTTPClient  # noqa: E402
from docusign_rest.config.constants.service import DocuSignHosts  # noqa: E402
from docusign_rest.external.docusign.docusign import DocuSignDataSource  # noqa: E402
from tests.fixtures.mock_docusign import MockDocuSign  # noqa: E402

# Initialize Faker for generating test data
fake: Faker = Faker()


# ============================================================================
# Session-level fixtures
# ============================================================================


@pytest.fixture(scope="session")
def faker_instance() -> Faker:
    """
    Provide a Faker instance for generating test data.

    Returns:
        Configured Faker instance
    """
    return fake


# ============================================================================
# Function-level fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """
    Reset environment state before each test.
    This ensures tests don't interfere with each other.
    """
    original_env: Dict[str, str] = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def account_id(faker_instance: Faker) -> str:
    return str(faker_instance.random_number(digits=7, fix_len=True))


@pytest.fixture
def mock_docusign() -> MockDocuSign:
    """Fake DocuSign API recording the requests it receives"""
    return MockDocuSign()


@pytest.fixture
def service_context(mock_docusign: MockDocuSign) -> ServiceContext:
    """Demo environment context whose transport is the fake API"""
    return ServiceContext(
        http_client=HTTPClient(transport=mock_docusign.transport()),
        base_url=DocuSignHosts.DEMO.value,
    )


@pytest.fixture
def oauth_credential(faker_instance: Faker, account_id: str) -> OAuthCredential:
    return OAuthCredential(
        access_token=faker_instance.sha1(),
        token_type="bearer",
        account_id=account_id,
    )


@pytest.fixture
def docusign_client(oauth_credential: OAuthCredential, service_context: ServiceContext) -> DocuSignClient:
    return DocuSignClient(oauth_credential, service_context)


@pytest.fixture
def data_source(docusign_client: DocuSignClient) -> DocuSignDataSource:
    return DocuSignDataSource(docusign_client)


# ============================================================================
# Test lifecycle hooks
# ============================================================================


def pytest_collection_modifyitems(config, items):
    """
    Mark tests after collection.

    Tests talking to the fake API through the client are marked ``client``,
    the remaining ones ``unit``.
    """
    for item in items:
        if "data_source" in item.fixturenames or "docusign_client" in item.fixturenames:
            item.add_marker(pytest.mark.client)
        else:
            item.add_marker(pytest.mark.unit)


def pytest_configure(config):
    config.addinivalue_line("markers", "client: exercises the client against the fake API")
    config.addinivalue_line("markers", "unit: pure unit test")
