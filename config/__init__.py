"""Настройки проекта Unit Price OCR."""
