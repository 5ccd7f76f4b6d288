import os
import sys
import configparser
from typing import Optional
import logging
from logging.handlers import RotatingFileHandler

DEFAULT_CONFIG_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "matcher.conf")


class ConfigError(Exception):
    """Base exception for configuration-related errors."""
    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""
    pass


class ConfigFileError(ConfigError):
    """Raised when there are issues with the configuration file."""
    pass


class Config:
    """Manages matcher configuration and logging setup.

    Reads settings from an INI file, validates them, and initializes a logger
    with both console and file handlers (if specified).

    Attributes:
        input_file (str): Path to the ``text|pattern|expected`` case file.
        search_algorithm (str): Algorithm used for search.
        verify (bool): Whether results are compared with the expected offsets.
        show_timing (bool): Whether execution times are reported.
        debug (bool): Debug mode flag.
        log_level (str): Logging level (e.g., "INFO", "DEBUG").
        log_file (Optional[str]): Path to log file (if specified).
        logger (Optional[logging.Logger]): Configured logger instance.
    """

    VALID_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
    VALID_ALGORITHMS = {'kmp', 'naive'}
    LOGGER_NAME = "KMPMatcher"

    def __init__(self, config_file: str = DEFAULT_CONFIG_FILE) -> None:
        """Initializes the configuration from a file.

        Args:
            config_file: Path to the configuration INI file.

        Raises:
            ConfigFileError: If the config file does not exist or cannot be read.
            ConfigValidationError: If required settings are missing or invalid.
        """
        self.config_file = config_file
        self.config = configparser.ConfigParser()
        self.logger: Optional[logging.Logger] = None

        try:
            self._load_config_file()
            self._parse_configuration()
            self._validate_config()
            self._initiate_logger()
        except (ConfigFileError, ConfigValidationError):
            raise
        except Exception as e:
            raise ConfigError(f"Unexpected error during configuration initialization: {e}") from e

    def _load_config_file(self) -> None:
        """Loads and parses the configuration file.

        Raises:
            ConfigFileError: If file doesn't exist, can't be read, or has parsing errors.
        """
        if not os.path.exists(self.config_file):
            raise ConfigFileError(f"Configuration file '{self.config_file}' not found")

        if not os.access(self.config_file, os.R_OK):
            raise ConfigFileError(f"Configuration file '{self.config_file}' is not readable")

        try:
            self.config.read(self.config_file, encoding="utf-8")
        except configparser.Error as e:
            raise ConfigFileError(f"Failed to parse configuration file '{self.config_file}': {e}") from e

        required_sections = ['SEARCH', 'REPORT', 'LOGGING']
        missing_sections = [section for section in required_sections if section not in self.config]
        if missing_sections:
            raise ConfigFileError(f"Missing required sections in config file: {missing_sections}")

    def _get_required_value(self, section: str, key: str) -> str:
        if key not in self.config[section]:
            raise ConfigValidationError(f"Required configuration '{section}.{key}' not found")

        value = self.config[section].get(key)
        if not value or not value.strip():
            raise ConfigValidationError(f"Required configuration '{section}.{key}' is empty")
        return value

    def _get_required_bool(self, section: str, key: str) -> bool:
        """Retrieves a required boolean value from config.

        Raises:
            ConfigValidationError: If value is missing or cannot be converted to bool.
        """
        value = self._get_required_value(section, key)
        try:
            return self.config[section].getboolean(key)
        except ValueError as e:
            raise ConfigValidationError(
                f"Invalid boolean value for '{section}.{key}': '{value}'. Use true/false, yes/no, or 1/0"
            ) from e

    def _get_required_str(self, section: str, key: str) -> str:
        return self._get_required_value(section, key).strip()

    def _get_optional_str(self, section: str, key: str) -> Optional[str]:
        """Retrieves an optional string value, or None if absent or empty."""
        value = self.config[section].get(key)
        if not value or not value.strip():
            return None
        return value.strip()

    def _get_optional_bool(self, section: str, key: str, default: bool = False) -> bool:
        if self._get_optional_str(section, key) is None:
            return default
        return self._get_required_bool(section, key)

    def _parse_configuration(self) -> None:
        """Parses all configuration values with strict validation."""
        self.input_file = self._get_required_str("SEARCH", "INPUT_FILE")
        self.search_algorithm = self._get_required_str("SEARCH", "ALGORITHM").lower()
        self.verify = self._get_required_bool("SEARCH", "VERIFY")

        self.show_timing = self._get_required_bool("REPORT", "SHOW_TIMING")

        self.log_level = self._get_required_str("LOGGING", "LEVEL")
        self.log_file = self._get_optional_str("LOGGING", "FILE")
        self.debug = self._get_optional_bool("LOGGING", "DEBUG")

    def _validate_config(self) -> None:
        """Validates all configuration settings strictly.

        The input file is not checked here; reading it reports its own errors.

        Raises:
            ConfigValidationError: If any settings are invalid.
        """
        if self.search_algorithm not in self.VALID_ALGORITHMS:
            raise ConfigValidationError(
                f"Invalid search algorithm '{self.search_algorithm}'. "
                f"Valid options: {', '.join(sorted(self.VALID_ALGORITHMS))}"
            )

        if self.log_level.upper() not in self.VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"Invalid log level '{self.log_level}'. "
                f"Valid options: {', '.join(sorted(self.VALID_LOG_LEVELS))}"
            )

        if self.log_file:
            log_dir = os.path.dirname(self.log_file)
            if log_dir and not os.path.exists(log_dir):
                parent_dir = os.path.dirname(log_dir)
                if parent_dir and not os.path.exists(parent_dir):
                    raise ConfigValidationError(f"Log file parent directory does not exist: '{parent_dir}'")

    def _create_log_file(self, log_path: str) -> None:
        """Creates a log file and its directory if needed.

        Raises:
            ConfigError: If log file or directory cannot be created.
        """
        try:
            directory = os.path.dirname(log_path)
            if directory:
                if not os.path.exists(directory):
                    os.makedirs(directory, mode=0o755)
                elif not os.access(directory, os.W_OK):
                    raise ConfigError(f"Log directory '{directory}' is not writable")

            if os.path.exists(log_path) and not os.access(log_path, os.W_OK):
                raise ConfigError(f"Log file '{log_path}' is not writable")
        except OSError as e:
            raise ConfigError(f"Failed to create log file or directory for '{log_path}': {e}") from e

    def _initiate_logger(self) -> None:
        """Initializes the logger with console and file handlers.

        Sets up:
            - Logging format.
            - Console handler (stderr).
            - File handler (if `log_file` is specified).
            - Log rotation (10MB per file, max 3 backups).

        Raises:
            ConfigError: If logger setup fails.
        """
        log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        formatter = logging.Formatter(log_format)
        log_level = getattr(logging, self.log_level.upper())

        self.logger = logging.getLogger(self.LOGGER_NAME)
        self.logger.setLevel(log_level)

        # Clear existing handlers to avoid duplicates
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(log_level)
        self.logger.addHandler(console_handler)

        if self.log_file:
            try:
                self._create_log_file(self.log_file)
                file_handler = RotatingFileHandler(
                    self.log_file,
                    maxBytes=10 * 1024 * 1024,  # 10MB
                    backupCount=3,
                    encoding="utf-8",
                )
                file_handler.setFormatter(formatter)
                file_handler.setLevel(log_level)
                self.logger.addHandler(file_handler)
            except Exception as e:
                raise ConfigError(f"Failed to initialize file logging for '{self.log_file}': {e}") from e

    def __str__(self) -> str:
        return (
            f"Config(input_file='{self.input_file}', "
            f"algorithm='{self.search_algorithm}', verify={self.verify}, "
            f"show_timing={self.show_timing}, debug={self.debug})"
        )
