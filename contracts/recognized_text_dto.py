"""
DTO контракт: распознавание текста (OCR) -> PriceExtractor.

Текст одного проанализированного кадра. Поддерживает формат raw_ocr_results.json,
в котором полный текст лежит в поле full_text.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class RecognizedText(BaseModel):
    """Распознанный текст одного кадра."""

    text: str = Field("", description="Полный распознанный текст кадра")
    frame_index: int = Field(0, ge=0, description="Порядковый номер кадра")
    source: Optional[str] = Field(None, description="Источник (имя файла, камера)")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_raw_ocr(cls, data: Dict[str, Any], frame_index: int = 0) -> "RecognizedText":
        """
        Создаёт из словаря формата raw_ocr_results.json.

        Args:
            data: Словарь с ключом full_text (и опционально metadata.source_file)
            frame_index: Номер кадра
        """
        metadata = data.get("metadata") or {}
        return cls(
            text=data.get("full_text") or "",
            frame_index=frame_index,
            source=metadata.get("source_file"),
        )
