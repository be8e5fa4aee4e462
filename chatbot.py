# chatbot.py
# Plant-care chat assistant. Replies are canned: the message is matched against
# an ordered keyword table and the first topic that hits wins. No ML involved.

import logging

import config
from locales import normalize_language, translate
from plant import identify
from timers import TaskScope

logger = logging.getLogger(__name__)

# order matters: e.g. "how often to water" is a water question, not a tips one
CHAT_RULES = [
    ('water', ('su', 'sulama', 'nə qədər', 'water', 'watering', 'вод', 'полив')),
    ('light', ('işıq', 'günəş', 'kölgə', 'light', 'sun', 'shade', 'свет', 'солн', 'тень')),
    ('soil', ('torpaq', 'substrat', 'drenaj', 'soil', 'substrate', 'drainage', 'почв', 'субстрат', 'дренаж')),
    ('fertilizer', ('gübrə', 'qidalandır', 'yem', 'fertiliz', 'feed', 'удобр', 'подкорм')),
    ('disease', ('xəstə', 'sarı', 'zərərverici', 'bit', 'disease', 'yellow', 'pest', 'bug',
                 'болезн', 'желт', 'вредит')),
    ('transplant', ('köçür', 'transplant', 'пересад')),
    ('propagation', ('çoxalt', 'kəsik', 'toxum', 'propagat', 'cutting', 'seed', 'размнож', 'черенк', 'семен')),
    ('beginner', ('başlanğıc', 'yeni', 'sadə', 'beginner', 'new', 'easy', 'начин', 'нов', 'прост')),
    ('tips', ('məsləhət', 'yardım', 'necə', 'tip', 'help', 'how', 'совет', 'помощ', 'как')),
    ('toxicity', ('zəhər', 'təhlükə', 'heyvan', 'uşaq', 'toxic', 'poison', 'pet', 'child',
                  'токсич', 'яд', 'животн', 'ребен')),
    ('humidity', ('rütubət', 'quru', 'nəm', 'humidity', 'moist', 'влажн', 'сух')),
    ('temperature', ('temperatur', 'isti', 'soyuq', 'temperature', 'hot', 'cold', 'температур', 'тепл', 'холод')),
]

CHAT_RESPONSES = {
    'az': {
        'water': '💧 Bitkilərin su ehtiyacı növdən asılıdır:\n\n• Kaktuslar: ayda 1-2 dəfə\n• Tropik bitkilər: həftədə 2-3 dəfə\n• Otsu bitkilər: həftədə 1-2 dəfə\n\nTorpaq quruduqda sulayın və drenajı yoxlayın.',
        'light': '☀️ Bitkilərin işıq ehtiyacı:\n\n• Parlaq işıq: kaktuslar, sukulentlər\n• Orta işıq: ficus, monstera\n• Az işıq: zamioculcas, pothos\n\nBitkinizi düzgün yerə qoyun və onu tədricən yeni işığa adətləndirin.',
        'soil': '🌱 Torpaq və drenaj:\n\n• Yaxşı drenaj vacibdir\n• Hər bitkinin öz torpaq qarışığı var\n• Sukulentlər üçün: qumlu torpaq\n• Tropik bitkilər üçün: torf + perlit\n\nİldə 1-2 dəfə torpaq dəyişdirin.',
        'fertilizer': '🌿 Gübrələmə məsləhətləri:\n\n• Yaz-yay: ayda 2 dəfə\n• Payız-qış: ayda 1 dəfə və ya heç\n• Maye gübrələr daha effektivdir\n• Həmişə istehsalçının təlimatına əməl edin\n\nArtıq gübrə bitkiyə zərər verər!',
        'disease': '🔍 Xəstəlik və problemlər:\n\n• Sarı yarpaqlar: çox su və ya az işıq\n• Qəhvəyi uçlar: az rütubət\n• Ağ ləkələr: kif və ya zərərvericilər\n• Düşən yarpaqlar: stress və ya adaptasiya\n\nProblemi erkən müəyyənləşdirin və müalicə edin.',
        'transplant': '🪴 Köçürmə qaydaları:\n\n• İlk əlamət: kök qabdan çıxır\n• Ən yaxşı vaxt: yaz\n• Yeni qab 2-3 sm böyük olmalı\n• Köhnə torpağı yumşaq silin\n• 1-2 gün sonra sulayın\n\nBitki adaptasiya dövründə stresslənə bilər.',
        'propagation': '🌱 Bitki çoxaltma üsulları:\n\n• Kəsiklər: monstera, pothos\n• Yarpaq: sukulentlər, zamioculcas\n• Toxum: baharatlıq bitkilər\n• Bölmə: papatyalar, sansevierya\n\nKök atması üçün 2-4 həftə lazımdır.',
        'beginner': '🌿 Başlanğıc üçün bitkilər:\n\n• Pothos: çox davamlı\n• Sansevierya: az qulluq\n• Zamioculcas: unudulduqda belə yaşayır\n• Monstera: böyük və gözəl\n\nBu bitkilər yeni başlayanlar üçün idealdır!',
        'tips': '✨ Əsas qulluq məsləhətləri:\n\n• Hər bitkini fərdi olaraq öyrənin\n• Mütəmadi yoxlayın\n• Artıq qulluqdan çəkinin\n• Səbr edin - artım vaxt tələb edir\n• Şəkil yükləyərək bitkini tanıya bilərsiniz!\n\nSualınız varsa, soruşun! 🌱',
        'toxicity': '⚠️ Zəhərlilik və təhlükəsizlik:\n\n• Bəzi bitkilər ev heyvanları üçün zəhərlidir\n• Kiçik uşaqlardan uzaq saxlayın\n• Zəhərli bitkilər: ficus, monstera, dieffenbachia\n• Təhlükəsiz: spider plant, parlor palm\n\nBitki almazdan əvvəl araşdırın!',
        'humidity': '💦 Rütubət idarəetməsi:\n\n• Tropik bitkilər yüksək rütubət istəyir (60-80%)\n• Püskürtmə şüşəsi istifadə edin\n• Bitkiləri qrupda yerləşdirin\n• Rütubətləndirici istifadə edin\n• Su qabları qoyun\n\nQuru hava yarpaqların qəhvəyiləşməsinə səbəb olur.',
        'temperature': '🌡️ Temperatur tələbləri:\n\n• Əksər ev bitkiləri: 18-24°C\n• Tropik bitkilər: 20-26°C\n• Kaktuslar: 15-25°C\n• Soyuq cərəyandan uzaq saxlayın\n• Kondisionerdən uzaq yerləşdirin\n\nTemperatur dəyişiklikləri stres yaradır.',
        'default': '🌿 Sualınız bitkiçiliklə bağlı olmalıdır. Mən sizə aşağıdakı mövzularda kömək edə bilərəm:\n\n• Sulama və qulluq\n• İşıq və yerləşdirmə\n• Torpaq və gübrələmə\n• Xəstəlik və problemlər\n• Köçürmə və çoxaltma\n• Bitki tanıma (şəkil yükləyin)\n\nDaha spesifik sual verin! 🌱',
    },
    'en': {
        'water': '💧 Plant water requirements vary by species:\n\n• Cacti: 1-2 times per month\n• Tropical plants: 2-3 times per week\n• Herbaceous plants: 1-2 times per week\n\nWater when soil is dry and check drainage.',
        'light': '☀️ Plant light requirements:\n\n• Bright light: cacti, succulents\n• Medium light: ficus, monstera\n• Low light: zamioculcas, pothos\n\nPlace your plant in the right spot and gradually acclimate it to new light.',
        'soil': '🌱 Soil and drainage:\n\n• Good drainage is essential\n• Each plant has its own soil mix\n• For succulents: sandy soil\n• For tropical plants: peat + perlite\n\nChange soil 1-2 times per year.',
        'fertilizer': '🌿 Fertilization tips:\n\n• Spring-summer: twice a month\n• Fall-winter: once a month or not at all\n• Liquid fertilizers are more effective\n• Always follow manufacturer instructions\n\nExcess fertilizer damages plants!',
        'disease': '🔍 Diseases and problems:\n\n• Yellow leaves: too much water or low light\n• Brown tips: low humidity\n• White spots: fungus or pests\n• Falling leaves: stress or adaptation\n\nIdentify and treat problems early.',
        'transplant': '🪴 Transplanting guidelines:\n\n• First sign: roots coming out of pot\n• Best time: spring\n• New pot should be 2-3 cm larger\n• Gently remove old soil\n• Water 1-2 days later\n\nPlant may be stressed during adaptation.',
        'propagation': '🌱 Plant propagation methods:\n\n• Cuttings: monstera, pothos\n• Leaf: succulents, zamioculcas\n• Seeds: herbs\n• Division: daisies, sansevierya\n\nRooting takes 2-4 weeks.',
        'beginner': '🌿 Plants for beginners:\n\n• Pothos: very hardy\n• Sansevierya: low maintenance\n• Zamioculcas: survives even when forgotten\n• Monstera: large and beautiful\n\nThese plants are ideal for newcomers!',
        'tips': '✨ Basic care tips:\n\n• Learn each plant individually\n• Check regularly\n• Avoid over-care\n• Be patient - growth takes time\n• Upload a photo to identify plants!\n\nAsk if you have questions! 🌱',
        'toxicity': '⚠️ Toxicity and safety:\n\n• Some plants are toxic to pets\n• Keep away from small children\n• Toxic plants: ficus, monstera, dieffenbachia\n• Safe: spider plant, parlor palm\n\nResearch before buying plants!',
        'humidity': '💦 Humidity management:\n\n• Tropical plants need high humidity (60-80%)\n• Use a spray bottle\n• Group plants together\n• Use a humidifier\n• Place water trays\n\nDry air causes leaf browning.',
        'temperature': '🌡️ Temperature requirements:\n\n• Most houseplants: 18-24°C\n• Tropical plants: 20-26°C\n• Cacti: 15-25°C\n• Keep away from cold drafts\n• Keep away from air conditioning\n\nTemperature changes cause stress.',
        'default': '🌿 Your question should be about plants. I can help you with:\n\n• Watering and care\n• Light and placement\n• Soil and fertilization\n• Diseases and problems\n• Transplanting and propagation\n• Plant identification (upload photo)\n\nAsk a more specific question! 🌱',
    },
    'ru': {
        'water': '💧 Потребности растений в воде различаются в зависимости от вида:\n\n• Кактусы: 1-2 раза в месяц\n• Тропические растения: 2-3 раза в неделю\n• Травянистые растения: 1-2 раза в неделю\n\nПоливайте, когда почва сухая, и проверяйте дренаж.',
        'light': '☀️ Световые требования растений:\n\n• Яркий свет: кактусы, суккуленты\n• Средний свет: фикус, монстера\n• Низкая освещенность: замиокулькас, потос\n\nРазместите растение в правильном месте и постепенно приучите его к новому освещению.',
        'soil': '🌱 Почва и дренаж:\n\n• Хороший дренаж необходим\n• У каждого растения своя почвенная смесь\n• Для суккулентов: песчаная почва\n• Для тропических растений: торф + перлит\n\nМеняйте почву 1-2 раза в год.',
        'fertilizer': '🌿 Советы по удобрению:\n\n• Весна-лето: два раза в месяц\n• Осень-зима: один раз в месяц или вообще\n• Жидкие удобрения более эффективны\n• Всегда следуйте инструкциям производителя\n\nИзбыток удобрений вредит растениям!',
        'disease': '🔍 Болезни и проблемы:\n\n• Желтые листья: слишком много воды или мало света\n• Коричневые кончики: низкая влажность\n• Белые пятна: грибок или вредители\n• Опадающие листья: стресс или адаптация\n\nВыявляйте и лечите проблемы рано.',
        'transplant': '🪴 Правила пересадки:\n\n• Первый признак: корни выходят из горшка\n• Лучшее время: весна\n• Новый горшок должен быть на 2-3 см больше\n• Аккуратно удалите старую почву\n• Полейте через 1-2 дня\n\nРастение может испытывать стресс во время адаптации.',
        'propagation': '🌱 Методы размножения растений:\n\n• Черенки: монстера, потос\n• Лист: суккуленты, замиокулькас\n• Семена: травы\n• Деление: ромашки, сансевиерия\n\nУкоренение занимает 2-4 недели.',
        'beginner': '🌿 Растения для начинающих:\n\n• Потос: очень выносливый\n• Сансевиерия: низкий уход\n• Замиокулькас: выживает даже когда забыт\n• Монстера: большой и красивый\n\nЭти растения идеальны для новичков!',
        'tips': '✨ Основные советы по уходу:\n\n• Изучайте каждое растение индивидуально\n• Регулярно проверяйте\n• Избегайте чрезмерного ухода\n• Будьте терпеливы - рост требует времени\n• Загрузите фото для идентификации растений!\n\nЗадавайте вопросы, если есть! 🌱',
        'toxicity': '⚠️ Токсичность и безопасность:\n\n• Некоторые растения токсичны для домашних животных\n• Держите подальше от маленьких детей\n• Токсичные растения: фикус, монстера, диффенбахия\n• Безопасные: паучье растение, комнатная пальма\n\nИсследуйте перед покупкой растений!',
        'humidity': '💦 Управление влажностью:\n\n• Тропические растения нуждаются в высокой влажности (60-80%)\n• Используйте распылитель\n• Группируйте растения вместе\n• Используйте увлажнитель\n• Размещайте подносы с водой\n\nСухой воздух вызывает потемнение листьев.',
        'temperature': '🌡️ Температурные требования:\n\n• Большинство комнатных растений: 18-24°C\n• Тропические растения: 20-26°C\n• Кактусы: 15-25°C\n• Держите подальше от холодных сквозняков\n• Держите подальше от кондиционера\n\nИзменения температуры вызывают стресс.',
        'default': '🌿 Ваш вопрос должен быть о растениях. Я могу помочь вам с:\n\n• Полив и уход\n• Свет и размещение\n• Почва и удобрение\n• Болезни и проблемы\n• Пересадка и размножение\n• Идентификация растений (загрузить фото)\n\nЗадайте более конкретный вопрос! 🌱',
    },
}


def match_topic(message):
    lowered = message.lower()
    for topic, keywords in CHAT_RULES:
        if any(keyword in lowered for keyword in keywords):
            return topic
    return 'default'


def reply(message, language):
    return CHAT_RESPONSES[normalize_language(language)][match_topic(message)]


class ChatWidget:
    """Chat panel state. Bot replies arrive after a simulated delay and are
    dropped if the widget is reset or closed first.

    Must be driven from inside a running asyncio loop.
    """

    def __init__(self, language='az', thinking_delay=config.CHAT_THINKING_DELAY,
                 analysis_delay=config.PLANT_ANALYSIS_DELAY):
        self.language = normalize_language(language)
        self.thinking_delay = thinking_delay
        self.analysis_delay = analysis_delay
        self.scope = TaskScope()
        self.plant_info = None
        self.messages = [self._welcome()]

    def _welcome(self):
        return {'text': translate(self.language, 'chat_welcome'), 'sender': 'bot'}

    def _bot_says(self, text):
        self.messages.append({'text': text, 'sender': 'bot'})

    def send(self, text):
        text = (text or '').strip()
        if not text:
            return None
        self.messages.append({'text': text, 'sender': 'user'})
        return self.scope.defer(self.thinking_delay, self._bot_says, reply(text, self.language))

    def upload_photo(self, image_bytes, preview=None):
        # validates now so a bad upload fails synchronously
        profile = identify(image_bytes, self.language)
        self.messages.append({'text': '', 'sender': 'user', 'image': preview})
        return self.scope.defer(self.analysis_delay, self._show_plant, profile)

    def _show_plant(self, profile):
        self.plant_info = profile
        self._bot_says(translate(self.language, 'plant_identified', **{
            key: profile[key] for key in ('name', 'family', 'waterNeeds', 'sunlight', 'toxicity')
        }))

    def reset(self):
        self.scope.cancel_pending()
        self.plant_info = None
        self.messages = [self._welcome()]

    def close(self):
        self.scope.close()
        logger.debug("Chat widget closed")
