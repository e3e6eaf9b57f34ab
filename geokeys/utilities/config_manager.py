# geokeys/utilities/config_manager.py
import copy
import json
import logging

from geokeys.config import DEFAULT_SCHEME, PathConfig, get_scheme
from geokeys.indexing.tokenizer import TransliterationTable

logger = logging.getLogger(__name__)


class ConfigManager:
    DEFAULT_SETTINGS = {
        'scheme_version': DEFAULT_SCHEME.version,
        'transliteration_overrides': {},
    }

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Forget the loaded settings so the next instance reloads them."""
        cls._instance = None

    def load(self):
        self.config_path = PathConfig.get_config_path()
        self._table = None
        self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
        if not self.config_path.exists():
            return
        try:
            with open(self.config_path, 'r') as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read settings from {self.config_path}, using defaults: {e}")
            return
        if not isinstance(loaded, dict):
            logger.warning(f"Ignoring settings in {self.config_path}: expected a JSON object")
            return

        # Only known keys override the defaults
        for key, value in loaded.items():
            if key in self.DEFAULT_SETTINGS:
                self.settings[key] = value
            else:
                logger.warning(f"Ignoring unknown setting '{key}'")
        logger.info(f"Loaded settings from {self.config_path}")

    def save(self):
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w') as f:
            json.dump(self.settings, f, indent=2)

    def get(self, key, default=None):
        return self.settings.get(key, default)

    def set(self, key, value):
        self.settings[key] = value
        self._table = None
        self.save()

    def get_scheme(self):
        return get_scheme(self.get('scheme_version'))

    def set_scheme_version(self, version):
        get_scheme(version)  # Raises for unknown versions
        self.set('scheme_version', version)

    def get_transliteration_table(self):
        """Build the transliteration table once and reuse it."""
        if self._table is None:
            overrides = self.get('transliteration_overrides') or {}
            if not isinstance(overrides, dict):
                raise ValueError("transliteration_overrides must be a JSON object")
            self._table = TransliterationTable(overrides)
        return self._table
