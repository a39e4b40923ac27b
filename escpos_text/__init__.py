"""
Пакет ESC/POS Styled Text
=========================

Рендеринг форматированного текста в поток команд ESC/POS для чековых
принтеров Bixolon SRP-350plus и совместимых.

Этот пакет предоставляет:
    - Неизменяемый набор атрибутов стиля (StyleSet)
    - Дерево форматированного текста с вложенными областями стиля
    - Минимальные переходы между стилями (только изменившиеся атрибуты)
    - Буферизованный вывод на принтер (синхронный и asyncio)

Пример базового использования:
    >>> from escpos_text import Printer, text, get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> with Printer.open("/dev/usb/lp0") as printer:
    ...     printer.initialize()
    ...     printer.println(text("ЧЕК").bold())
    ...     printer.println(text("Итого").bold().append("   $25.00"))

Рендеринг без принтера:
    >>> from escpos_text import text
    >>> text("A").bold().append(text("B").underlined()).render()
    b'\\x1bE\\x01A\\x1bE\\x00\\x1b-\\x01B\\x1b-\\x00'

Управление конфигурацией:
    >>> import os
    >>> os.environ['ESCPOS_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from escpos_text import load_config
    >>> config = load_config()
    >>> print(config['default_device'])
    /dev/usb/lp0

Версия: 0.1.0
Лицензия: MIT
Python: 3.11+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "ESC/POS Styled Text Development Team"
__description__ = "Styled text rendering for ESC/POS receipt printers"
__license__ = "MIT"
__python_requires__ = ">=3.11"

# Компоненты семантической версии
VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# =============================================================================
# ПРОВЕРКА ВЕРСИИ PYTHON
# =============================================================================

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"ESC/POS Styled Text требует Python 3.11 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

_LOGGER_NAMESPACE = "escpos_text"
_CONSOLE_HANDLER_NAME = "escpos_text.console"
_FILE_HANDLER_NAME = "escpos_text.file"


def _setup_logging() -> None:
    """
    Инициализировать общепакетную конфигурацию логирования.

    Настраивает логгер пакета с:
    - Консольным обработчиком (stderr) для WARNING и выше
    - Ротирующим файловым обработчиком, если задана переменная
      окружения ESCPOS_LOG_FILE
    - Форматом: временная метка, уровень, модуль, сообщение

    Уровень логирования задаётся переменной окружения ESCPOS_LOG_LEVEL.
    Допустимые значения: DEBUG, INFO, WARNING, ERROR, CRITICAL

    Функция идемпотентна - повторные вызовы не имеют эффекта. Учитываются
    только собственные (именованные) обработчики пакета: обработчики,
    добавленные приложением, настройку не блокируют.
    """
    log_level_str = os.environ.get("ESCPOS_LOG_LEVEL", "INFO").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    # Избегаем дублирования конфигурации
    root_logger = logging.getLogger(_LOGGER_NAMESPACE)
    if any(handler.get_name() == _CONSOLE_HANDLER_NAME for handler in root_logger.handlers):
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Консольный обработчик (stderr) - WARNING и выше
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(_CONSOLE_HANDLER_NAME)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Файловый обработчик (ротирующий) - только по запросу
    log_file = os.environ.get("ESCPOS_LOG_FILE")
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_path,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.set_name(_FILE_HANDLER_NAME)
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                "Не удалось инициализировать файловое логирование: %s. " "Используется только консоль.",
                e,
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер пакета для указанного модуля.

    Логгеры именуются как 'escpos_text.<module_name>' и наследуют
    обработчики логгера пакета.

    Аргументы:
        module_name: Имя модуля, обычно `__name__`.

    Возвращает:
        Экземпляр logging.Logger.

    Пример:
        >>> logger = get_logger("receipts")
        >>> logger.name
        'escpos_text.receipts'
    """
    if module_name == _LOGGER_NAMESPACE or module_name.startswith(_LOGGER_NAMESPACE + "."):
        full_name = module_name
    elif module_name == "__main__":
        full_name = f"{_LOGGER_NAMESPACE}.main"
    else:
        # Удаляем ведущие точки из относительных импортов
        clean_name = module_name.lstrip(".")
        full_name = f"{_LOGGER_NAMESPACE}.{clean_name}"

    return logging.getLogger(full_name)


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "default_device": "/dev/usb/lp0",
    "text_encoding": "utf-8",
    "write_buffer_size": 4096,
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить конфигурацию из escpos_text.json или использовать
    настройки по умолчанию.

    Если файл не существует или содержит недопустимый JSON,
    возвращается конфигурация по умолчанию с предупреждением в логе.

    Ключи конфигурации:
        - default_device: str - Путь к устройству принтера
        - text_encoding: str - Кодировка текста (например, cp866)
        - write_buffer_size: int - Размер буфера записи в байтах

    Аргументы:
        config_path: Путь к файлу конфигурации.
                    Если None, ищет 'escpos_text.json' в текущем каталоге.

    Возвращает:
        Словарь со всеми ключами по умолчанию, переопределёнными
        пользовательскими значениями.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path("escpos_text.json")

    config = _DEFAULT_CONFIG.copy()

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                raise ValueError(
                    f"Файл конфигурации должен содержать JSON-объект, " f"получен {type(user_config).__name__}"
                )

            config.update(user_config)

            logger.info("Конфигурация загружена из %s", config_path)
            logger.debug("Конфигурация: %s", config)

        except json.JSONDecodeError as e:
            logger.warning(
                "Не удалось разобрать %s: недопустимый JSON в строке %d, столбце %d. "
                "Используется конфигурация по умолчанию.",
                config_path,
                e.lineno,
                e.colno,
            )
        except OSError as e:
            logger.warning(
                "Не удалось прочитать %s: %s. Используется конфигурация по умолчанию.",
                config_path,
                e,
            )
        except ValueError as e:
            logger.warning(
                "Недопустимый формат конфигурации: %s. Используется конфигурация по умолчанию.",
                e,
            )
    else:
        logger.debug("Файл конфигурации %s не найден. Используется конфигурация по умолчанию.", config_path)

    return config


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

# Импорты размещены после утилит, чтобы логирование было настроено первым.

from escpos_text.escpos.renderer import StyledTextRenderer, render, render_line  # noqa: E402
from escpos_text.escpos.transitions import encode_transition, style_transition_commands  # noqa: E402
from escpos_text.exceptions import PrinterClosedError, PrinterError, PrinterIOError  # noqa: E402
from escpos_text.model.enums import CANONICAL_ATTRIBUTE_ORDER, StyleAttribute, Underline  # noqa: E402
from escpos_text.model.style import StyleSet  # noqa: E402
from escpos_text.model.styled_text import Group, StyledNode, Text, as_node, sequence, styled, text  # noqa: E402
from escpos_text.printer import AsyncPrinter, Printer  # noqa: E402

__all__ = [
    # Метаданные версии
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Утилиты
    "get_logger",
    "load_config",
    # Модель стиля
    "StyleSet",
    "StyleAttribute",
    "Underline",
    "CANONICAL_ATTRIBUTE_ORDER",
    # Дерево текста
    "StyledNode",
    "Text",
    "Group",
    "text",
    "styled",
    "as_node",
    "sequence",
    # Рендеринг
    "StyledTextRenderer",
    "render",
    "render_line",
    "style_transition_commands",
    "encode_transition",
    # Принтер
    "Printer",
    "AsyncPrinter",
    # Исключения
    "PrinterError",
    "PrinterIOError",
    "PrinterClosedError",
]

# =============================================================================
# ИНИЦИАЛИЗАЦИЯ ПАКЕТА
# =============================================================================

_setup_logging()

_logger = get_logger(__name__)
_logger.debug("ESC/POS Styled Text v%s инициализирован", __version__)
