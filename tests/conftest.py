"""Pytest configuration and fixtures for superclouds-client tests."""

import datetime
from pathlib import Path
from typing import Tuple

import pytest
import pytest_asyncio
import respx
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from superclouds_client.transport import SupercloudsConfig

BASE_URL = "https://api.test/v1"
TOKEN = "test-token"
KEY_PASSWORD = "key-secret"

ENV_VARS = (
    "SUPER_CERT",
    "SUPER_KEY",
    "SUPER_TOKEN",
    "SUPER_URL",
    "SUPER_TIMEOUT",
    "SUPER_INSECURE_SKIP_VERIFY",
    "SUPER_CA_BUNDLE",
    "SUPER_KEY_PASSWORD",
)


# ============================================================================
# Certificate Material
# ============================================================================


def write_key_pair(directory: Path, password: bytes = None) -> Tuple[str, str]:
    """Write a throwaway self-signed certificate and its private key as PEM."""
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "superclouds-test-client")])
    now = datetime.datetime.now(datetime.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=1))
        .sign(key, hashes.SHA256())
    )

    if password:
        key_format = serialization.PrivateFormat.PKCS8
        encryption = serialization.BestAvailableEncryption(password)
    else:
        key_format = serialization.PrivateFormat.TraditionalOpenSSL
        encryption = serialization.NoEncryption()

    cert_path = directory / "client.crt"
    key_path = directory / "client.key"
    cert_path.write_bytes(cert.public_bytes(serialization.Encoding.PEM))
    key_path.write_bytes(key.private_bytes(serialization.Encoding.PEM, key_format, encryption))
    return str(cert_path), str(key_path)


@pytest.fixture(scope="session")
def key_pair(tmp_path_factory) -> Tuple[str, str]:
    """Unencrypted certificate/key paths."""
    return write_key_pair(tmp_path_factory.mktemp("pki"))


@pytest.fixture(scope="session")
def encrypted_key_pair(tmp_path_factory) -> Tuple[str, str]:
    """Certificate/key paths with the key encrypted by KEY_PASSWORD."""
    return write_key_pair(tmp_path_factory.mktemp("pki-encrypted"), KEY_PASSWORD.encode())


# ============================================================================
# Environment Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove SUPER_* variables inherited from the developer's shell."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def super_env(monkeypatch, key_pair):
    """Set the three required variables to a valid key pair and token."""
    cert_path, key_path = key_pair
    monkeypatch.setenv("SUPER_CERT", cert_path)
    monkeypatch.setenv("SUPER_KEY", key_path)
    monkeypatch.setenv("SUPER_TOKEN", TOKEN)
    return monkeypatch


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def config(key_pair):
    """Configuration pointing at the mocked API."""
    cert_path, key_path = key_pair
    cfg = SupercloudsConfig.from_params(cert_path, key_path, TOKEN, base_url=BASE_URL)
    yield cfg
    await cfg.aclose()


@pytest.fixture
def api_mock():
    """Mock every request sent to BASE_URL."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as mock:
        yield mock
