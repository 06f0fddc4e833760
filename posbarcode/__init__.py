"""
Пакет posbarcode
================

Генератор линейных штрихкодов для кассовых чеков и товарных этикеток.

Этот пакет предоставляет:
    - Code 39 и Code 128 (набор C) с точными таблицами символов
    - Санитизацию входных данных без исключений (резервные значения "0000" / "0")
    - Вывод в виде самодостаточной SVG-разметки (детерминированный)
    - Растровый предпросмотр через Pillow
    - Именованные пресеты (чек продажи, товарная этикетка)

Пример базового использования:
    >>> from posbarcode import generate_code39, generate_code128c
    >>> svg = generate_code39("A1-2")
    >>> ticket = generate_code128c("000123", {"height": 30, "module_width": 2})

Пресеты и конфигурация:
    >>> from posbarcode import get_preset, generate
    >>> symbology, options = get_preset("sale_ticket")
    >>> svg = generate("000123", symbology, options)

Логирование:
    >>> import os
    >>> os.environ["POSBARCODE_LOG_LEVEL"] = "DEBUG"
    >>> from posbarcode import setup_logging, get_logger
    >>> setup_logging()
    >>> get_logger(__name__).debug("Отладочное логирование включено")

Автор: posbarcode Development Team
Версия: 0.1.0
Лицензия: MIT
Python: 3.11+
"""

import copy
import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "posbarcode Development Team"
__description__ = "Code 39 / Code 128-C barcode SVG generator for POS tickets and labels"
__license__ = "MIT"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

LOGGER_NAMESPACE = "posbarcode"
LOG_LEVEL_ENV = "POSBARCODE_LOG_LEVEL"
DEFAULT_CONFIG_FILE = "posbarcode.json"

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s"


def setup_logging(
    level: Optional[Union[str, int]] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Настроить логгер пакета ``posbarcode``.

    Добавляет консольный обработчик (stderr) и, если указан ``log_file``,
    ротирующий файловый обработчик. Уровень берётся из аргумента, затем из
    переменной окружения POSBARCODE_LOG_LEVEL, по умолчанию INFO.

    Функция идемпотентна: если обработчики уже есть, меняется только уровень.
    При импорте пакета не вызывается (генерация не пишет файлов).

    Returns:
        Корневой логгер пакета.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = _LOG_LEVELS.get(level.strip().upper(), logging.INFO)

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    root_logger.setLevel(level)
    if root_logger.handlers:
        return root_logger

    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                "Не удалось инициализировать файловое логирование: %s. "
                "Используется только консоль.",
                e,
            )

    root_logger.propagate = False
    return root_logger


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён ``posbarcode``.

    >>> get_logger("labels").name
    'posbarcode.labels'
    >>> get_logger("__main__").name
    'posbarcode.main'
    """
    if module_name.startswith(LOGGER_NAMESPACE):
        full_name = module_name
    elif module_name == "__main__":
        full_name = f"{LOGGER_NAMESPACE}.main"
    else:
        full_name = f"{LOGGER_NAMESPACE}.{module_name.lstrip('.')}"
    return logging.getLogger(full_name)


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    # Переопределения опций по умолчанию для каждой символики
    "code39": {},
    "code128c": {},
    "presets": {
        # Номер продажи на термочеке 80 мм
        "sale_ticket": {
            "symbology": "code128c",
            "height": 30,
            "module_width": 2,
            "include_text": True,
            "include_text_font_size": 12,
            "quiet_zone_modules": 10,
        },
        "product_label": {
            "symbology": "code39",
            "height": 48,
            "narrow_width": 1.5,
            "wide_width": 3.5,
            "include_text": True,
            "include_text_font_size": 5,
        },
    },
}


def _deep_merge(
    base: Dict[str, Any], override: Mapping[str, Any], path: str = ""
) -> Dict[str, Any]:
    """
    Слить ``override`` в ``base`` на месте.

    Значения, тип которых не совпадает с умолчанием (объект вместо скаляра или
    наоборот), пропускаются с предупреждением.
    """
    for key, value in override.items():
        current = base.get(key)
        if isinstance(current, dict):
            if not isinstance(value, Mapping):
                get_logger(__name__).warning(
                    "Ключ конфигурации %s%s должен быть объектом, получен %s; игнорируется.",
                    path,
                    key,
                    type(value).__name__,
                )
                continue
            base[key] = _deep_merge(current, value, f"{path}{key}.")
        elif key in base and isinstance(value, Mapping):
            get_logger(__name__).warning(
                "Ключ конфигурации %s%s не может быть объектом; игнорируется.", path, key
            )
        else:
            base[key] = value
    return base


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить конфигурацию из JSON-файла или вернуть значения по умолчанию.

    Ключи конфигурации:
        - log_level: str - уровень логирования для setup_logging
        - code39: dict - опции Code 39 по умолчанию
        - code128c: dict - опции Code 128-C по умолчанию
        - presets: dict - именованные пресеты {"symbology": ..., опции...}

    Пользовательские значения глубоко сливаются с настройками по умолчанию.
    Отсутствующий файл, недопустимый JSON или JSON не-объект приводят к
    предупреждению в логе и конфигурации по умолчанию.

    Аргументы:
        config_path: путь к файлу; по умолчанию 'posbarcode.json' в текущем каталоге.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILE)

    config = copy.deepcopy(_DEFAULT_CONFIG)

    if not config_path.exists():
        logger.info("Файл конфигурации %s не найден. Используется конфигурация по умолчанию.", config_path)
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)
        if not isinstance(user_config, dict):
            raise ValueError(
                f"Файл конфигурации должен содержать JSON-объект, "
                f"получен {type(user_config).__name__}"
            )
        _deep_merge(config, user_config)
        logger.info("Конфигурация загружена из %s", config_path)
    except json.JSONDecodeError as e:
        logger.warning(
            "Не удалось разобрать %s: недопустимый JSON в строке %s, столбце %s. "
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
        logger.warning("Недопустимый формат конфигурации: %s. Используется конфигурация по умолчанию.", e)

    return config


def check_dependencies() -> Dict[str, bool]:
    """Проверить доступность библиотек рендеринга (Pillow) и эталонного кодера (python-barcode)."""
    dependencies: Dict[str, bool] = {}

    try:
        import PIL  # noqa: F401

        dependencies["pillow"] = True
    except ImportError:
        dependencies["pillow"] = False

    try:
        import barcode  # noqa: F401

        dependencies["python-barcode"] = True
    except ImportError:
        dependencies["python-barcode"] = False

    return dependencies


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

from posbarcode.barcodegen import (  # noqa: E402
    BarcodeGenerator,
    BarcodeGenError,
    encode_code39,
    encode_code128c,
    generate,
    generate_code39,
    generate_code128c,
    render_image,
    render_png,
    render_svg,
    sanitize,
)
from posbarcode.model import (  # noqa: E402
    Code39Options,
    Code128Options,
    EncodedSymbol,
    Segment,
    Symbology,
    resolve_options,
)


def get_preset(
    name: str, config: Optional[Mapping[str, Any]] = None
) -> Tuple[Symbology, Dict[str, Any]]:
    """
    Вернуть (символика, опции) именованного пресета.

    Опции пресета накладываются поверх умолчаний символики из конфигурации
    ("code39" / "code128c").

    Raises:
        BarcodeGenError: неизвестный пресет, символика или пресет не объект.
    """
    cfg = config if config is not None else _DEFAULT_CONFIG
    presets = cfg.get("presets") or {}
    if not isinstance(presets, Mapping):
        raise BarcodeGenError("Configuration key 'presets' must be an object")
    if name not in presets:
        raise BarcodeGenError(
            f"Unknown preset {name!r}; available: {', '.join(sorted(presets)) or 'none'}"
        )
    if not isinstance(presets[name], Mapping):
        raise BarcodeGenError(f"Preset {name!r} must be an object")
    preset = dict(presets[name])
    try:
        symbology = Symbology.parse(preset.pop("symbology", Symbology.CODE39.value))
    except (TypeError, ValueError) as e:
        raise BarcodeGenError(f"Preset {name!r} has an invalid symbology") from e
    defaults = cfg.get(symbology.value) or {}
    if not isinstance(defaults, Mapping):
        raise BarcodeGenError(f"Configuration key {symbology.value!r} must be an object")
    options: Dict[str, Any] = dict(defaults)
    options.update(preset)
    return symbology, options


__all__ = [
    # Метаданные
    "__version__",
    "__author__",
    # Утилиты
    "setup_logging",
    "get_logger",
    "load_config",
    "check_dependencies",
    "get_preset",
    # Генерация
    "generate",
    "generate_code39",
    "generate_code128c",
    "BarcodeGenerator",
    "BarcodeGenError",
    # Конвейер
    "sanitize",
    "encode_code39",
    "encode_code128c",
    "render_svg",
    "render_image",
    "render_png",
    # Модель
    "Symbology",
    "Code39Options",
    "Code128Options",
    "resolve_options",
    "EncodedSymbol",
    "Segment",
]
