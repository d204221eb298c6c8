import logging
import os
import re
from pathlib import Path
from typing import Optional, Any

import yaml
from dotenv import load_dotenv

from webform_bot.domain.config import Config, DriverConfig, FormConfig, Backend, Browser

CONFIG_FILENAME = "config.yaml"

_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0", ""}

logger = logging.getLogger(__name__)


def find_config_path() -> str | None:
    """Find the most appropriate config.yaml path.

    Order of precedence:
    1. CONFIG_PATH environment variable (must point at an existing file)
    2. ./config.yaml in current working directory
    3. Search upward from current working directory for config.yaml
    4. config.yaml next to the installed package (fallback when running from source tree)

    Returns None when no config file is found.
    """

    # 1. Environment variable
    env_config_path = os.getenv("CONFIG_PATH")
    if env_config_path:
        path = Path(env_config_path)
        if path.is_file():
            return str(path)
        raise FileNotFoundError(f"CONFIG_PATH is set but file not found: {env_config_path}")

    # 2. cwd/CONFIG_FILENAME
    cwd_config = Path.cwd() / CONFIG_FILENAME
    if cwd_config.is_file():
        return str(cwd_config)

    # 3. Walk upward from CWD to root
    p = Path.cwd()
    for parent in p.parents:
        candidate = parent / CONFIG_FILENAME
        if candidate.is_file():
            return str(candidate)

    # 4. Package-relative (when running from source tree)
    package_config = Path(__file__).resolve().parents[2] / CONFIG_FILENAME
    if package_config.is_file():
        return str(package_config)

    return None


def load(config_path: Optional[str] = None) -> Config:
    file = _find_config(config_path)
    if file is None:
        logger.debug(f"No {CONFIG_FILENAME} found, using built-in defaults")
        return Config()

    data = _read_config(file)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Parsed config file {file} does not contain a mapping")

    return _map_to_domain(data)


def _read_config(file: Path) -> Any:
    content = file.read_text()

    def replace_env_var(match: re.Match) -> str:
        var_name = match.group(1)
        return os.getenv(var_name, match.group(0))

    content = re.sub(r'\$\{(\w+)}', replace_env_var, content)

    return yaml.safe_load(content)


def _find_config(config_path: str | None) -> Path | None:
    load_dotenv()

    if config_path:
        path = Path(config_path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return path

    found = find_config_path()
    return Path(found) if found else None


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"'{key}' must be a boolean, got: {value!r}")


def _section(data: dict, key: str) -> dict:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{key}' section must be a mapping, got: {section!r}")
    return section


def _map_to_domain(data: dict) -> Config:
    defaults = Config()
    driver_defaults = defaults.driver_config
    form_defaults = defaults.form_config

    driver_data = _section(data, 'driver')
    driver_config = DriverConfig(
        backend=Backend(driver_data.get('backend', driver_defaults.backend.value)),
        browser=Browser(driver_data.get('browser', driver_defaults.browser.value)),
        headless=_as_bool(driver_data.get('headless', driver_defaults.headless), 'driver.headless'),
        implicit_wait_ms=int(driver_data.get('implicit_wait_ms', driver_defaults.implicit_wait_ms)),
        use_webdriver_manager=_as_bool(
            driver_data.get('use_webdriver_manager', driver_defaults.use_webdriver_manager),
            'driver.use_webdriver_manager',
        ),
    )

    form_data = _section(data, 'form')
    expected_message = form_data.get('expected_message', form_defaults.expected_message)
    form_config = FormConfig(
        url=str(form_data.get('url', form_defaults.url)),
        text_field_name=str(form_data.get('text_field_name', form_defaults.text_field_name)),
        text=str(form_data.get('text', form_defaults.text)),
        submit_selector=str(form_data.get('submit_selector', form_defaults.submit_selector)),
        message_id=str(form_data.get('message_id', form_defaults.message_id)),
        expected_message=str(expected_message) if expected_message is not None else None,
    )

    return Config(
        log_level=str(data.get('log_level', defaults.log_level)),
        driver_config=driver_config,
        form_config=form_config,
    )
