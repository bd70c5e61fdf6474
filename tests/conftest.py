import pytest

from hillcracker.classical import register_all

register_all()

KEY = "3,3,2,5"

# TH HE IN ER AN are the five most frequent digrams, at even offsets, with a clear gap to the rest
PLAINTEXT = "TH" * 5 + "HE" * 4 + "IN" * 4 + "ER" * 3 + "AN" * 3 + "WELLDONE"


@pytest.fixture
def hill():
    from hillcracker.core.registry import get_plugin

    return get_plugin("hill")


@pytest.fixture
def ciphertext(hill):
    return hill.encrypt(PLAINTEXT, KEY)
