"""Random key generation tests."""
import base64

import pytest

from wanderer_conf.keys import CLOAK_KEY, MANAGED_KEYS, SECRET_KEY_BASE, decoded_length, generate_key


@pytest.mark.parametrize("byte_length", [48, 32])
def test_generated_key_decodes_to_requested_length(byte_length):
    value = generate_key(byte_length)
    assert len(base64.b64decode(value, validate=True)) == byte_length


def test_generated_keys_differ():
    assert generate_key(32) != generate_key(32)


def test_generate_key_rejects_non_positive_length():
    with pytest.raises(ValueError):
        generate_key(0)


def test_managed_key_lengths():
    """The two managed keys keep the lengths the deployment expects."""
    assert SECRET_KEY_BASE.byte_length == 48
    assert CLOAK_KEY.byte_length == 32
    assert [key.command for key in MANAGED_KEYS] == ["base_key", "cloak_key"]


def test_decoded_length():
    assert decoded_length(base64.b64encode(b"x" * 48).decode()) == 48
    assert decoded_length("changeme") == 6
    assert decoded_length("not base64!") is None
