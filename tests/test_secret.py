"""
Tests for Wipeable Secrets
==========================
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from passforge.secret import SecretValue


def test_reveal():
    secret = SecretValue("Banana4you")
    assert secret.reveal() == "Banana4you"
    assert len(secret) == 10
    assert not secret.wiped


def test_wipe_zeroes_buffer():
    secret = SecretValue("sensitive")
    secret.wipe()
    assert bytes(secret) == b'\0' * len("sensitive")
    assert secret.wiped


def test_reveal_after_wipe():
    secret = SecretValue("sensitive")
    secret.wipe()
    with pytest.raises(ValueError):
        secret.reveal()


def test_context_manager_wipes():
    with SecretValue("sensitive") as secret:
        assert secret.reveal() == "sensitive"
    assert secret.wiped
    assert bytes(secret) == b'\0' * 9


def test_repr_hides_value():
    secret = SecretValue("sensitive")
    assert "sensitive" not in repr(secret)
    assert "9 chars" in repr(secret)


def test_deleter_wipes_buffer():
    secret = SecretValue("sensitive")
    buffer = secret._data
    del secret
    assert buffer == bytearray(len("sensitive"))
