"""Подсистема настроек хранилища."""
