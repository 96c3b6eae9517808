"""Pytest configuration and fixtures."""

import pytest

from pix_keys.models import AccountType, KeyCategory, PixKey
from pix_keys.service import PixKeyService
from pix_keys.store import InMemoryPixKeyStore
from pix_keys.validation import default_registry


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def valid_cpf() -> str:
    """Masked CPF with correct check digits."""
    return "529.982.247-25"


@pytest.fixture
def valid_cnpj() -> str:
    """Masked CNPJ with correct check digits."""
    return "12.345.678/0001-95"


@pytest.fixture
def sample_agency() -> str:
    return "1250"


@pytest.fixture
def sample_account() -> str:
    return "00001234"


@pytest.fixture
def store() -> InMemoryPixKeyStore:
    """Create a fresh store for each test."""
    return InMemoryPixKeyStore()


@pytest.fixture
def service(store: InMemoryPixKeyStore) -> PixKeyService:
    """Service wired with the default validators and the in-memory store."""
    return PixKeyService(default_registry(), store)


@pytest.fixture
def sample_key(sample_agency: str, sample_account: str) -> PixKey:
    """Active email key."""
    return PixKey.create(
        KeyCategory.EMAIL,
        "ana@example.com",
        AccountType.CHECKING,
        sample_agency,
        sample_account,
        "Ana",
        "Silva",
    )
