import pytest

from exceptions import InvalidImageError
from plant import MOCK_PLANTS, identify


def test_identify_returns_mock_profile(png_bytes):
    assert identify(png_bytes, 'ru') == MOCK_PLANTS['ru']


def test_identify_falls_back_to_default_language(png_bytes):
    assert identify(png_bytes, 'de')['name'] == 'Ficus Elastica (Kauçuk Ağacı)'


def test_profile_is_a_copy(png_bytes):
    profile = identify(png_bytes, 'en')
    profile['similarPlants'].append('Cactus')
    assert 'Cactus' not in MOCK_PLANTS['en']['similarPlants']


@pytest.mark.parametrize('data', [b'', b'plain text, not pixels'])
def test_non_images_rejected(data):
    with pytest.raises(InvalidImageError):
        identify(data, 'en')
