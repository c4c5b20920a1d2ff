#!/usr/bin/env python3
# /settings_manager.py
import json
import os
from typing import Any, Dict, Optional


class SettingsManager:
    """Управляет настройками валидатора и логирования."""

    def __init__(self, path: str = "settings.json") -> None:
        self.path = path
        self.settings = self._load()

    def _default(self) -> Dict[str, Any]:
        return {
            "validation": self._validation_defaults(),
            "logging": self._logging_defaults(),
        }

    @staticmethod
    def _validation_defaults() -> Dict[str, Any]:
        return {
            "default_type": "any",
            "rules_file": None,
        }

    @staticmethod
    def _logging_defaults() -> Dict[str, Any]:
        return {
            "level": "INFO",
            "file": "data/grn.log",
            "max_bytes": 1048576,
            "backup_count": 5,
        }

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            defaults = self._default()
            self._save(defaults)
            return defaults
        with open(self.path, "r", encoding="utf-8") as f:
            return self._upgrade(json.load(f))

    def _upgrade(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Обновляет существующие настройки, добавляя недостающие поля."""

        if not isinstance(data, dict):
            raise ValueError(f"Файл настроек {self.path} должен содержать объект JSON")

        changed = False
        if self._fill_section_defaults(data, "validation", self._validation_defaults()):
            changed = True

        if self._fill_section_defaults(data, "logging", self._logging_defaults()):
            changed = True

        if changed:
            self._save(data)
        return data

    @staticmethod
    def _fill_section_defaults(data: Dict[str, Any], section: str, defaults: Dict[str, Any]) -> bool:
        if not isinstance(data.get(section), dict):
            data[section] = dict(defaults)
            return True

        changed = False
        current = data[section]
        for key, value in defaults.items():
            if key not in current:
                # Сохраняем только отсутствующие ключи, не перезаписывая пользовательские значения.
                current[key] = value
                changed = True
        return changed

    def _save(self, data: Dict[str, Any]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def get_default_type(self) -> str:
        validation = self.settings.get("validation", {})
        return str(validation.get("default_type") or "any")

    def save_default_type(self, grn_type: str) -> None:
        validation = self.settings.get("validation", {})
        validation["default_type"] = str(grn_type)
        self.settings["validation"] = validation
        self._save(self.settings)

    def get_rules_file(self) -> Optional[str]:
        validation = self.settings.get("validation", {})
        return validation.get("rules_file") or None

    def save_rules_file(self, path: Optional[str]) -> None:
        validation = self.settings.get("validation", {})
        validation["rules_file"] = path
        self.settings["validation"] = validation
        self._save(self.settings)

    def get_logging_config(self) -> Dict[str, Any]:
        return self.settings.get("logging", {})

    def refresh(self) -> None:
        self.settings = self._load()
