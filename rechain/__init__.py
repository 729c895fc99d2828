"""rechain - фильтрация текста файла или URL цепочкой регулярных выражений."""

__version__ = "0.1.0"
