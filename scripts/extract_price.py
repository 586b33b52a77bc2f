#!/usr/bin/env python3
"""
Извлечение цены за кг/литр из распознанного текста ценника.

Использование:
    # Текст прямо в аргументе
    python scripts/extract_price.py --text "Молоко 70р за 940мл"

    # Текстовый файл (весь файл = один кадр)
    python scripts/extract_price.py path/to/label.txt

    # Каждая строка файла = отдельный кадр
    python scripts/extract_price.py path/to/frames.txt --per-line

    # Результат OCR в формате raw_ocr_results.json (поле full_text)
    python scripts/extract_price.py path/to/raw_ocr_results.json

    # Из stdin
    echo "250р/кг" | python scripts/extract_price.py

Коды выхода: 0 - цена найдена, 1 - не найдена, 2 - ошибка ввода/конфигурации.
"""

import sys
import argparse
import json
from pathlib import Path
from typing import List, Optional

from loguru import logger

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config import settings
from contracts.recognized_text_dto import RecognizedText
from unit_price.application.factory import PriceComponentFactory
from unit_price.domain.exceptions import PriceConfigurationError

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def load_frames(path: Optional[Path], text: Optional[str], per_line: bool) -> List[RecognizedText]:
    """
    Собирает кадры из аргумента, файла или stdin.

    Raises:
        OSError: файл не читается
        ValueError: некорректный JSON
    """
    source = str(path) if path else "stdin"

    if text is not None:
        raw = text
        source = "--text"
    elif path is not None:
        if path.suffix.lower() == ".json":
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            items = data if isinstance(data, list) else [data]
            if not all(isinstance(item, dict) for item in items):
                raise ValueError(f"Ожидался объект raw_ocr или список объектов: {path}")
            return [RecognizedText.from_raw_ocr(item, frame_index=i) for i, item in enumerate(items)]
        raw = path.read_text(encoding='utf-8')
    else:
        raw = sys.stdin.read()

    if per_line:
        return [
            RecognizedText(text=line, frame_index=i, source=source)
            for i, line in enumerate(raw.splitlines())
            if line.strip()
        ]
    return [RecognizedText(text=raw, source=source)]


def setup_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        format=settings.LOG_FORMAT,
        level="DEBUG" if verbose else settings.LOG_LEVEL
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Главная функция. Возвращает код выхода."""
    parser = argparse.ArgumentParser(description="Цена за кг/литр из текста ценника")
    parser.add_argument("path", nargs="?", help="Текстовый файл или raw_ocr_results.json (по умолчанию stdin)")
    parser.add_argument("--text", help="Текст ценника")
    parser.add_argument("--per-line", action="store_true", help="Каждая строка - отдельный кадр")
    parser.add_argument("--locale", default=None, help=f"Код локали (по умолчанию {settings.DEFAULT_LOCALE})")
    parser.add_argument("--verbose", "-v", action="store_true", help="Подробный лог")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    path = Path(args.path) if args.path else None
    if path is not None and not path.is_file():
        logger.error(f"[extract_price] Файл не найден: {path}")
        return EXIT_ERROR

    try:
        scanner = PriceComponentFactory(locale_code=args.locale).create_scanner()
    except PriceConfigurationError as e:
        logger.error(f"[extract_price] {e}")
        return EXIT_ERROR

    try:
        frames = load_frames(path, args.text, args.per_line)
    except (OSError, ValueError) as e:
        logger.error(f"[extract_price] Не удалось прочитать ввод: {e}")
        return EXIT_ERROR

    found = 0
    for outcome in scanner.scan(frames):
        print(outcome.display)
        if outcome.result.is_found:
            found += 1

    logger.debug(f"[extract_price] Найдено цен: {found}/{len(frames)}")
    return EXIT_FOUND if found else EXIT_NOT_FOUND


if __name__ == "__main__":
    sys.exit(main())
