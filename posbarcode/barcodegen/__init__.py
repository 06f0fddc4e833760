"""
barcodegen

Модуль для генерации линейных штрихкодов для чеков и этикеток (SVG и растр).

- Code 39 (буквенно-цифровой, стартовый/стоповый символ "*").
- Code 128, набор C (пары цифр, контрольная сумма по модулю 103).
- Санитизация входных данных без исключений: неверные символы отбрасываются,
  пустой результат заменяется на "0000" / "0".

Public API:
    - BarcodeGenerator: универсальный генератор (class)
    - BarcodeGenError: исключение для ошибок опций/пресетов/растеризации
    - generate, generate_code39, generate_code128c: SVG в одну строку
    - sanitize, encode_code39, encode_code128c, render_svg: шаги конвейера

Примеры:
    >>> from posbarcode.barcodegen import generate_code128c
    >>> svg = generate_code128c("12345", {"height": 30, "module_width": 2})
    >>> img = BarcodeGenerator("code39", "A1-2").render_image()

Зависимости:
    Pillow
"""

from posbarcode.barcodegen.barcode_generator import (
    BarcodeGenerator,
    BarcodeGenError,
    generate,
    generate_code39,
    generate_code128c,
)
from posbarcode.barcodegen.code39 import encode_code39
from posbarcode.barcodegen.code128 import checksum, codeword_sequence, encode_code128c
from posbarcode.barcodegen.renderer import render, render_image, render_png, render_svg
from posbarcode.barcodegen.sanitizer import sanitize

__all__ = [
    "BarcodeGenerator",
    "BarcodeGenError",
    "generate",
    "generate_code39",
    "generate_code128c",
    "sanitize",
    "encode_code39",
    "encode_code128c",
    "checksum",
    "codeword_sequence",
    "render",
    "render_svg",
    "render_image",
    "render_png",
]
