# plant.py
# Mock plant recognition: any valid image is "identified" as the same plant.
# There is no model behind this.

from io import BytesIO

from PIL import Image, UnidentifiedImageError

from exceptions import InvalidImageError
from locales import normalize_language

ALLOWED_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.webp', '.gif'}

SIMILAR_PLANTS = ['Ficus Lyrata', 'Ficus Benjamina', 'Monstera Deliciosa']

MOCK_PLANTS = {
    'az': {
        'name': 'Ficus Elastica (Kauçuk Ağacı)',
        'family': 'Moraceae',
        'waterNeeds': 'Orta - həftədə 1-2 dəfə',
        'sunlight': 'Parlaq, dolayı işıq',
        'toxicity': 'Ev heyvanları üçün zəhərli',
        'ecologicalBenefits': 'Havanı təmizləyir, formaldehid və digər toksinləri absorbə edir. CO2 udur və oksigen istehsal edir.',
        'similarPlants': SIMILAR_PLANTS,
    },
    'en': {
        'name': 'Ficus Elastica (Rubber Plant)',
        'family': 'Moraceae',
        'waterNeeds': 'Medium - 1-2 times per week',
        'sunlight': 'Bright, indirect light',
        'toxicity': 'Toxic to pets',
        'ecologicalBenefits': 'Cleans the air, absorbs formaldehyde and other toxins. Absorbs CO2 and produces oxygen.',
        'similarPlants': SIMILAR_PLANTS,
    },
    'ru': {
        'name': 'Ficus Elastica (Каучуковое дерево)',
        'family': 'Moraceae',
        'waterNeeds': 'Средний - 1-2 раза в неделю',
        'sunlight': 'Яркий, рассеянный свет',
        'toxicity': 'Токсичен для домашних животных',
        'ecologicalBenefits': 'Очищает воздух, поглощает формальдегид и другие токсины. Поглощает CO2 и производит кислород.',
        'similarPlants': SIMILAR_PLANTS,
    },
}


def check_image(image_bytes):
    if not image_bytes:
        raise InvalidImageError("empty upload")
    try:
        with Image.open(BytesIO(image_bytes)) as img:
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise InvalidImageError(str(e)) from e


def identify(image_bytes, language):
    check_image(image_bytes)
    profile = MOCK_PLANTS[normalize_language(language)]
    return dict(profile, similarPlants=list(profile['similarPlants']))
