"""
Исключения для извлечения цены за единицу.

Ошибки извлечения (MalformedQuantityError, NumericParseError) поднимаются
внутри правил и гасятся в PriceExtractor.extract() -> NOT_FOUND.
Ошибки конфигурации пробрасываются наружу при создании компонентов.
"""


class PriceExtractionError(Exception):
    """Базовое исключение для ошибок извлечения цены."""

    def __init__(self, message: str, component: str = None, original_error: Exception = None):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Price Extraction Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


class MalformedQuantityError(PriceExtractionError):
    """Количество в ценнике отсутствует или равно нулю (например, "25р за 0г")."""
    pass


class NumericParseError(PriceExtractionError):
    """Захваченная строка не является числом после нормализации."""
    pass


class PriceConfigurationError(PriceExtractionError):
    """Ошибка конфигурации локали ценников."""
    pass
