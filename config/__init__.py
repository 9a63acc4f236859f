"""Настройки проекта linesort."""
