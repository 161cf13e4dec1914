import numpy as np
import pytest

from chromahub.conversions import companding


PAIRS = [
    (companding.srgb_decode, companding.srgb_encode),
    (companding.adobe_decode, companding.adobe_encode),
    (companding.romm_decode, companding.romm_encode),
]


@pytest.mark.parametrize("decode, encode", PAIRS)
def test_encode_inverts_decode(decode, encode):
    values = np.linspace(-0.1, 1.1, 241)
    assert np.allclose(encode(decode(values)), values, atol=1e-12)


@pytest.mark.parametrize("decode, encode", PAIRS)
def test_scalars_stay_scalars(decode, encode):
    assert isinstance(decode(0.5), float)
    assert isinstance(encode(0.5), float)
    assert decode(0.0) == 0.0
    assert decode(1.0) == pytest.approx(1.0)


def test_srgb_known_values():
    assert companding.srgb_decode(0.04045) == pytest.approx(0.04045 / 12.92)
    assert companding.srgb_decode(0.5) == pytest.approx(0.21404114, abs=1e-8)
    assert companding.srgb_encode(0.0031308) == pytest.approx(0.0031308 * 12.92)


def test_negative_values_stay_real():
    for decode, encode in PAIRS:
        assert np.isfinite(decode(-0.5))
        assert np.isfinite(encode(-0.5))
        assert decode(-0.5) < 0
