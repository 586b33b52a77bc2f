"""
Настройки проекта Unit Price OCR.

Все значения можно переопределить через переменные окружения.
"""

import os
from pathlib import Path

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent

# Директория с конфигурациями локалей (<locale>/price_labels.yaml)
LOCALES_DIR = Path(
    os.getenv(
        "UNIT_PRICE_LOCALES_DIR",
        str(PROJECT_ROOT / "unit_price" / "locales")
    )
)

# =============================================================================
# НАСТРОЙКИ ЛОКАЛИ
# =============================================================================
# Локаль ценников по умолчанию
DEFAULT_LOCALE = os.getenv("UNIT_PRICE_LOCALE", "ru_RU")

# Фолбэк-локаль: используется если запрошенная локаль недоступна
FALLBACK_LOCALE = "ru_RU"

# Имя файла конфигурации внутри директории локали
LABELS_FILE_NAME = "price_labels.yaml"

# =============================================================================
# НАСТРОЙКИ ИЗВЛЕЧЕНИЯ
# =============================================================================
# Количество знаков после запятой в канонической цене
RESULT_DECIMAL_PLACES = 2

# Множитель перевода г -> кг и мл -> л
SMALL_TO_LARGE_UNIT_FACTOR = 1000

# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================
LOG_LEVEL = os.getenv("UNIT_PRICE_LOG_LEVEL", "INFO")
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | <level>{message}</level>"
)


# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config():
    """Проверяет корректность конфигурации."""
    errors = []

    if not LOCALES_DIR.is_dir():
        errors.append(f"Директория локалей не найдена: {LOCALES_DIR}")
    elif not (LOCALES_DIR / DEFAULT_LOCALE / LABELS_FILE_NAME).exists():
        errors.append(
            f"Конфиг локали по умолчанию не найден: "
            f"{LOCALES_DIR / DEFAULT_LOCALE / LABELS_FILE_NAME}"
        )

    if RESULT_DECIMAL_PLACES < 0:
        errors.append(f"RESULT_DECIMAL_PLACES должен быть >= 0, получено: {RESULT_DECIMAL_PLACES}")

    if errors:
        raise ValueError("\n".join(errors))

    return True
