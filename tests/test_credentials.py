"""Tests for the JSON-file credential store."""

import hashlib
import json

import pytest

from credentials import CredentialStore, CredentialStoreError, hash_password


@pytest.fixture
def store(tmp_path):
    s = CredentialStore(tmp_path / "data" / "credentials.dat")
    s.init()
    return s


def test_hash_password_is_sha256_hex():
    digest = hash_password("demo123")
    assert digest == hashlib.sha256(b"demo123").hexdigest()
    assert len(digest) == 64
    assert all(c in "0123456789abcdef" for c in digest)


def test_init_seeds_demo_account(store):
    data = json.loads(store.path.read_text(encoding="utf-8"))
    assert data == {"demo": hashlib.sha256(b"demo123").hexdigest()}


def test_init_does_not_overwrite_existing_file(store):
    custom = {"alice": hash_password("wonderland")}
    store.path.write_text(json.dumps(custom), encoding="utf-8")

    assert store.init() is False
    assert json.loads(store.path.read_text(encoding="utf-8")) == custom


def test_init_reports_creation(tmp_path):
    s = CredentialStore(tmp_path / "nested" / "credentials.dat")
    assert s.init() is True
    assert s.init() is False


def test_verify_seeded_account(store):
    assert store.verify("demo", "demo123") is True


@pytest.mark.parametrize(
    "username,password",
    [
        ("demo", "wrong"),
        ("demo", ""),
        ("demo", "DEMO123"),
        ("demo", "demo123 "),
        ("nobody", "demo123"),
        ("", ""),
        ("Demo", "demo123"),
    ],
)
def test_verify_rejects_mismatch(store, username, password):
    assert store.verify(username, password) is False


def test_verify_non_ascii_credentials(store):
    store.path.write_text(json.dumps({"照片": hash_password("密码✓")}), encoding="utf-8")
    assert store.verify("照片", "密码✓") is True
    assert store.verify("照片", "密码") is False


def test_verify_non_string_digest_fails_closed(store):
    store.path.write_text(json.dumps({"demo": None, "bob": 123}), encoding="utf-8")
    assert store.verify("demo", "demo123") is False
    assert store.verify("bob", "123") is False


def test_verify_non_ascii_stored_value_does_not_crash(store):
    store.path.write_text(json.dumps({"demo": "ü" * 64}), encoding="utf-8")
    assert store.verify("demo", "demo123") is False


def test_malformed_json_raises(store):
    store.path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CredentialStoreError):
        store.verify("demo", "demo123")


def test_non_object_json_raises(store):
    store.path.write_text(json.dumps(["demo"]), encoding="utf-8")
    with pytest.raises(CredentialStoreError):
        store.load()


def test_missing_file_raises(tmp_path):
    s = CredentialStore(tmp_path / "absent.dat")
    with pytest.raises(CredentialStoreError):
        s.verify("demo", "demo123")
