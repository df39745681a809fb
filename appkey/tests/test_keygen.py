import random
from collections import Counter

import pytest

from appkey import keygen


def test_default_key_shape():
    key = keygen.generate_api_key()
    assert len(key) == 32
    assert set(key) <= set(keygen.ALPHABET)
    assert keygen.is_valid_api_key(key)


def test_seeded_rng_is_deterministic():
    a = keygen.generate_api_key(rng=random.Random(7))
    b = keygen.generate_api_key(rng=random.Random(7))
    assert a == b


def test_fraction_maps_to_first_base36_digit():
    class _Fixed:
        def __init__(self, values):
            self.values = iter(values)

        def random(self):
            return next(self.values)

    # 0.0 -> "0", 10.5/36 -> "a", just under 1 -> "z"
    key = keygen.generate_api_key(3, rng=_Fixed([0.0, 10.5 / 36, 0.9999999]))
    assert key == "0az"


def test_characters_cover_alphabet():
    rng = random.Random(1234)
    counts = Counter("".join(keygen.generate_api_key(rng=rng) for _ in range(500)))
    assert set(counts) == set(keygen.ALPHABET)
    # 16000 draws over 36 symbols: every symbol lands near 444
    assert min(counts.values()) > 300
    assert max(counts.values()) < 600


def test_length_must_be_positive():
    with pytest.raises(ValueError):
        keygen.generate_api_key(0)


@pytest.mark.parametrize(
    "value",
    [None, 123, "", "short", "A" * 32, "0" * 31 + "-", "0" * 33],
)
def test_is_valid_api_key_rejects(value):
    assert keygen.is_valid_api_key(value) is False
