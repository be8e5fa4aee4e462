# locales.py
# Static display strings for each supported language

LANGUAGES = ("az", "en", "ru")
DEFAULT_LANGUAGE = "az"

TRANSLATIONS = {
    'az': {
        'password_mismatch': 'Şifrələr uyğun gəlmir',
        'password_too_short': 'Şifrə ən azı {min_length} simvol olmalıdır',
        'missing_fields': 'Bütün xanaları doldurun',
        'server_error': 'Server xətası',
        'registration_failed': 'Qeydiyyat uğursuz oldu',
        'registration_success': 'Uğurla qeydiyyatdan keçdi!',
        'points_earned': '🎉 Təbriklər! +{points} xal qazandınız!',
        'tasks_completed': '{count} tapşırıq tamamlandı',
        'points_added': 'Bal profilinizə əlavə edildi',
        'chat_welcome': '🌿 Salam! Mən bitki köməkçinizəm. Bitkinizin şəklini yükləyin və ya qulluq haqqında sual verin.',
        'plant_identified': '✅ Bitkini tanıdım!\n\n🌿 Ad: {name}\n🧬 Ailə: {family}\n💧 Su: {waterNeeds}\n☀️ İşıq: {sunlight}\n⚠️ {toxicity}\n\nƏtraflı məlumat səhifədə göstərilir!',
        'invalid_image': 'Zəhmət olmasa şəkil faylı yükləyin',
    },
    'en': {
        'password_mismatch': 'Passwords do not match',
        'password_too_short': 'Password must be at least {min_length} characters',
        'missing_fields': 'Please fill in all fields',
        'server_error': 'Server error',
        'registration_failed': 'Registration failed',
        'registration_success': 'Successfully registered!',
        'points_earned': '🎉 Congratulations! You earned +{points} points!',
        'tasks_completed': '{count} tasks completed',
        'points_added': 'Points were added to your profile',
        'chat_welcome': '🌿 Hi! I am your plant assistant. Upload a photo of your plant or ask a care question.',
        'plant_identified': '✅ Plant identified!\n\n🌿 Name: {name}\n🧬 Family: {family}\n💧 Water: {waterNeeds}\n☀️ Light: {sunlight}\n⚠️ {toxicity}\n\nDetailed information is shown on the page!',
        'invalid_image': 'Please upload an image file',
    },
    'ru': {
        'password_mismatch': 'Пароли не совпадают',
        'password_too_short': 'Пароль должен содержать не менее {min_length} символов',
        'missing_fields': 'Заполните все поля',
        'server_error': 'Ошибка сервера',
        'registration_failed': 'Регистрация не удалась',
        'registration_success': 'Успешно зарегистрирован!',
        'points_earned': '🎉 Поздравляем! Вы заработали +{points} баллов!',
        'tasks_completed': 'Выполнено заданий: {count}',
        'points_added': 'Баллы добавлены в ваш профиль',
        'chat_welcome': '🌿 Привет! Я ваш помощник по растениям. Загрузите фото растения или задайте вопрос об уходе.',
        'plant_identified': '✅ Растение идентифицировано!\n\n🌿 Название: {name}\n🧬 Семейство: {family}\n💧 Вода: {waterNeeds}\n☀️ Свет: {sunlight}\n⚠️ {toxicity}\n\nПодробная информация показана на странице!',
        'invalid_image': 'Пожалуйста, загрузите изображение',
    },
}


def normalize_language(lang):
    return lang if lang in LANGUAGES else DEFAULT_LANGUAGE


def translate(lang, key, **params):
    # unknown languages fall back to Azerbaijani, unknown keys raise KeyError
    text = TRANSLATIONS[normalize_language(lang)][key]
    return text.format(**params) if params else text
