"""Static content shown by the app: quiz questions, tips and advice text."""

from fingram.schemas import QuizQuestion, Tip

_QUESTIONS = [
    # Beginner
    {
        "id": 1,
        "question": "Какой процент дохода рекомендуется откладывать на сбережения?",
        "options": ["5%", "10-20%", "30%", "50%"],
        "correct": 1,
        "explanation": "Финансовые эксперты рекомендуют откладывать 10-20% от дохода на сбережения и инвестиции.",
        "difficulty": "beginner",
    },
    {
        "id": 2,
        "question": "Что такое экстренный фонд?",
        "options": [
            "Деньги на развлечения",
            "Накопления на отпуск",
            "Резерв на 3-6 месяцев расходов",
            "Инвестиционный портфель",
        ],
        "correct": 2,
        "explanation": "Экстренный фонд должен покрывать ваши расходы на 3-6 месяцев в случае потери дохода.",
        "difficulty": "beginner",
    },
    {
        "id": 3,
        "question": "Какое правило помогает контролировать импульсивные покупки?",
        "options": [
            "Правило 24 часов",
            "Покупать сразу",
            "Брать кредит",
            "Откладывать на год",
        ],
        "correct": 0,
        "explanation": "Правило 24 часов: подождите день перед крупной покупкой, чтобы убедиться в её необходимости.",
        "difficulty": "beginner",
    },
    {
        "id": 4,
        "question": "Что означает правило 50/30/20?",
        "options": [
            "50% развлечения, 30% еда, 20% жильё",
            "50% необходимые расходы, 30% желания, 20% сбережения",
            "50% сбережения, 30% развлечения, 20% еда",
            "50% инвестиции, 30% налоги, 20% расходы",
        ],
        "correct": 1,
        "explanation": "Правило 50/30/20 помогает сбалансированно распределить доходы между основными категориями расходов.",
        "difficulty": "beginner",
    },
    # Intermediate
    {
        "id": 5,
        "question": "Что такое диверсификация инвестиций?",
        "options": [
            "Вложение всех денег в одну акцию",
            "Распределение инвестиций между разными активами",
            "Покупка только государственных облигаций",
            "Инвестирование только в недвижимость",
        ],
        "correct": 1,
        "explanation": "Диверсификация снижает риски путём распределения инвестиций между различными типами активов.",
        "difficulty": "intermediate",
    },
    {
        "id": 6,
        "question": "Какова основная цель ребалансировки портфеля?",
        "options": [
            "Увеличить доходность любой ценой",
            "Поддерживать желаемое соотношение активов",
            "Продать все убыточные активы",
            "Купить только растущие акции",
        ],
        "correct": 1,
        "explanation": "Ребалансировка помогает поддерживать целевое распределение активов в соответствии с инвестиционной стратегией.",
        "difficulty": "intermediate",
    },
    {
        "id": 7,
        "question": "Что показывает коэффициент Шарпа?",
        "options": [
            "Только доходность инвестиции",
            "Отношение доходности к принятому риску",
            "Количество сделок в году",
            "Размер комиссии брокера",
        ],
        "correct": 1,
        "explanation": "Коэффициент Шарпа измеряет эффективность инвестиций с учётом принятого риска.",
        "difficulty": "intermediate",
    },
    # Advanced
    {
        "id": 8,
        "question": "Что такое эффект сложного процента?",
        "options": [
            "Простое начисление процентов",
            "Начисление процентов на проценты",
            "Вычет налогов с процентов",
            "Ежемесячная выплата процентов",
        ],
        "correct": 1,
        "explanation": "Сложный процент - это начисление процентов не только на основную сумму, но и на уже начисленные проценты.",
        "difficulty": "advanced",
    },
    {
        "id": 9,
        "question": "Что означает валютное хеджирование?",
        "options": [
            "Покупка только рублёвых активов",
            "Защита от валютных рисков",
            "Инвестирование в криптовалюту",
            "Обмен валют каждый день",
        ],
        "correct": 1,
        "explanation": "Валютное хеджирование позволяет защитить портфель от неблагоприятных изменений курсов валют.",
        "difficulty": "advanced",
    },
    {
        "id": 10,
        "question": "Какой показатель лучше всего отражает реальную доходность с учётом инфляции?",
        "options": [
            "Номинальная доходность",
            "Реальная доходность",
            "Средняя доходность",
            "Максимальная доходность",
        ],
        "correct": 1,
        "explanation": "Реальная доходность учитывает влияние инфляции и показывает фактический рост покупательной способности.",
        "difficulty": "advanced",
    },
]

QUIZ_QUESTIONS = tuple(QuizQuestion(**q) for q in _QUESTIONS)

DIFFICULTY_LABELS = {
    "beginner": "Начальный",
    "intermediate": "Средний",
    "advanced": "Продвинутый",
}

TIPS = (
    Tip(
        id=1,
        title="Правило 50/30/20",
        body="Распределяйте доход: 50% на необходимые расходы, 30% на желания, 20% на сбережения.",
        tag="Базовое планирование",
        icon="PieChart",
    ),
    Tip(
        id=2,
        title="Экстренный фонд",
        body="Создайте резерв на 3-6 месяцев расходов для непредвиденных ситуаций.",
        tag="Финансовая защита",
        icon="Shield",
    ),
    Tip(
        id=3,
        title="Автоматизация",
        body="Настройте автоматические переводы на сберегательные счета.",
        tag="Эффективность",
        icon="Repeat",
    ),
    Tip(
        id=4,
        title="Контроль долгов",
        body="Погашайте долги с высокими процентами в первую очередь.",
        tag="Оптимизация",
        icon="TrendingDown",
    ),
    Tip(
        id=5,
        title="Правило 24 часов",
        body="Подождите сутки перед крупными покупками, чтобы избежать импульсивных трат.",
        tag="Осознанность",
        icon="Clock",
    ),
    Tip(
        id=6,
        title="Инвестиции в себя",
        body="Инвестируйте в образование и навыки — это лучший способ увеличить доход.",
        tag="Развитие",
        icon="GraduationCap",
    ),
)

CATEGORY_LABELS = {
    "housing": "Жильё",
    "food": "Питание",
    "transport": "Транспорт",
    "entertainment": "Развлечения",
    "savings": "Сбережения",
}

BUDGET_ADVICE_MESSAGES = {
    "low_savings": "Увеличьте долю сбережений до 10-20%",
    "high_housing": "Расходы на жильё превышают рекомендуемые 30%",
    "over_budget": "Сократите расходы или увеличьте доход",
    "good_balance": "Отличный баланс! Рассмотрите инвестирование",
}

INVESTMENT_ADVICE_MESSAGES = {
    "seek_higher_yield": "Рассмотрите более доходные инструменты (ETF, акции)",
    "add_contributions": "Регулярные взносы увеличат итоговую сумму",
    "go_longer_term": "Долгосрочные инвестиции более эффективны",
    "excellent_strategy": "Отличная стратегия долгосрочного накопления!",
}

RESULT_MESSAGES = {
    "high": "Отлично! Вы показали высокий уровень финансовой грамотности!",
    "medium": "Хороший результат! Есть ещё возможности для улучшения.",
    "low": "Рекомендуем изучить больше материалов по финансовому планированию.",
}
