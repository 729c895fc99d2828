"""Настройки проекта rechain."""
