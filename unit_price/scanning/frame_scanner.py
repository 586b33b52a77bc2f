"""
Frame Scanner - покадровая обработка распознанного текста.

ЦКП: Строка для дисплея на каждый кадр с текстом.

Кадр без текста (распознавание упало на стороне OCR) логируется и
пропускается; последний показанный результат при этом не меняется.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from loguru import logger

from contracts.price_result_dto import ParseResult
from contracts.recognized_text_dto import RecognizedText
from ..domain.interfaces import IPriceExtractor, IResultFormatter

FrameInput = Union[RecognizedText, str, None]


@dataclass(frozen=True)
class FrameOutcome:
    """Результат обработки одного кадра."""
    frame_index: int
    result: ParseResult
    display: str


class FrameScanner:
    """
    Связка extractor + formatter для потока кадров одной сессии.

    Хранит только последнюю строку дисплея (last-result-wins).
    """

    def __init__(self, extractor: IPriceExtractor, formatter: IResultFormatter):
        self.extractor = extractor
        self.formatter = formatter
        self.last_display: Optional[str] = None
        self.frames_processed = 0
        self.frames_failed = 0

    def process(self, frame: FrameInput, frame_index: int = 0) -> Optional[FrameOutcome]:
        """
        Обрабатывает один кадр.

        Returns:
            FrameOutcome или None, если у кадра нет распознанного текста
        """
        if isinstance(frame, RecognizedText):
            frame_index = frame.frame_index
            text = frame.text
        else:
            text = frame

        if text is None:
            self.frames_failed += 1
            logger.error(f"[FrameScanner] Кадр {frame_index}: распознавание текста не удалось")
            return None

        result = self.extractor.extract(text)
        display = self.formatter.format(result)

        self.frames_processed += 1
        self.last_display = display
        return FrameOutcome(frame_index=frame_index, result=result, display=display)

    def scan(self, frames: Iterable[FrameInput]) -> Iterator[FrameOutcome]:
        """Обрабатывает поток кадров, пропуская кадры без текста."""
        for index, frame in enumerate(frames):
            outcome = self.process(frame, frame_index=index)
            if outcome is not None:
                yield outcome

        logger.debug(
            f"[FrameScanner] Обработано кадров: {self.frames_processed}, "
            f"без текста: {self.frames_failed}"
        )
