import pytest

from typeconv.aes import AES

KEY_16 = bytes(range(16))
KEY_32 = bytes(range(32))


@pytest.mark.parametrize("key", [KEY_16, bytes(range(24)), KEY_32])
def test_round_trip(key):
    cipher = AES(key)
    assert cipher.decrypt(cipher.encrypt("hello world")) == "hello world"


def test_round_trip_unicode():
    cipher = AES(KEY_32)
    text = "I love 小泽玛利亚"
    assert cipher.decrypt(cipher.encrypt(text)) == text


def test_round_trip_empty():
    cipher = AES(KEY_16)
    assert cipher.decrypt(cipher.encrypt("")) == ""


def test_output_length_is_nonce_plus_data_plus_tag():
    cipher = AES(KEY_16)
    sealed = cipher.encrypt("abcdef")
    assert len(sealed) == 12 + len("abcdef") + 16


def test_nonce_is_random():
    cipher = AES(KEY_16)
    first = cipher.encrypt("same")
    second = cipher.encrypt("same")
    assert first[:12] != second[:12]
    assert cipher.decrypt(first) == cipher.decrypt(second) == "same"


def test_bytes_plaintext_accepted():
    cipher = AES(KEY_16)
    assert cipher.decrypt(cipher.encrypt(b"raw")) == "raw"


@pytest.mark.parametrize("key", [b"", bytes(15), bytes(17)])
def test_invalid_key_size_raises(key):
    with pytest.raises(ValueError):
        AES(key).encrypt("x")
    with pytest.raises(ValueError):
        AES(key).decrypt(bytes(40))


def test_tampered_ciphertext_raises():
    cipher = AES(KEY_16)
    sealed = bytearray(cipher.encrypt("hello"))
    sealed[-1] ^= 1
    with pytest.raises(ValueError):
        cipher.decrypt(bytes(sealed))


def test_wrong_key_raises():
    sealed = AES(KEY_16).encrypt("hello")
    with pytest.raises(ValueError):
        AES(bytes(16)).decrypt(sealed)


def test_too_short_raises():
    with pytest.raises(ValueError):
        AES(KEY_16).decrypt(b"short")