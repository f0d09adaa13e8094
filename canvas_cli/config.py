"User configuration, stored in `~/.config/canvas-cli/config.toml`"

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, MutableMapping, Optional

import toml

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CANVAS_CLI_CONFIG"
CONFIG_DIRNAME = "canvas-cli"
CONFIG_FILENAME = "config.toml"
BACKUP_SUFFIX = ".bk"

EDIT_PROMPT = "Do you want to edit it? This will remove all comments. (y/n)"
OVERWRITE_PROMPT = "Do you want to overwrite this value? (y/n)"
URL_PROMPT = (
    "Enter your Canvas domain name "
    "(for example, canvas.instructure.com or umich.instructure.com):"
)
KEY_PROMPT = (
    "Enter your access token. You can generate an access token in Canvas by "
    'going to Account > Settings, then scroll down to find "+ New Access Token". '
    "Paste it here."
)


@dataclass
class Config:
    "The `[api]` section of the config file"
    domain: str
    token: str

    def api_url(self) -> str:
        return f"https://{self.domain}/api/v1"

    def key(self) -> str:
        return self.token


def config_path() -> Path:
    "Location of the config file"
    if os.environ.get(CONFIG_ENV_VAR):
        return Path(os.environ[CONFIG_ENV_VAR]).expanduser()
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home().joinpath(".config")
    return Path(base, CONFIG_DIRNAME, CONFIG_FILENAME)


def read_document(path: Path) -> Optional[Dict[str, Any]]:
    "Parsed TOML document, `None` if the file doesn't exist"
    try:
        with path.open() as file:
            return toml.load(file)
    except FileNotFoundError:
        return None
    except (OSError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Cannot parse config ({error})") from error


def load_config(path: Optional[Path] = None) -> Config:
    "Loads the config used to make requests"
    path = path or config_path()
    document = read_document(path)
    if document is None:
        raise ConfigError(
            "Config file doesn't appear to exist, try running `canvas config`"
        )
    logger.debug("Loaded config from %s", path)

    api = document.get("api")
    if not isinstance(api, dict):
        raise ConfigError(f"Cannot parse config (no [api] section in {path})")
    for name in ("url", "key"):
        if not isinstance(api.get(name), str):
            raise ConfigError(f"Cannot parse config (api.{name} should be a string)")

    return Config(domain=api["url"], token=api["key"])


def write_document(document: MutableMapping[str, Any], path: Path) -> None:
    "Writes the document, moving the previous file to `config.toml.bk`"
    backup = path.with_name(path.name + BACKUP_SUFFIX)
    try:
        if path.exists():
            path.replace(backup)
            logger.debug("Old config moved to %s", backup)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w") as file:
            toml.dump(document, file)
    except OSError as error:
        raise ConfigError(f"Error writing new file ({error})") from error


Ask = Callable[[str], str]
Say = Callable[[str], None]


class ConfigEditor:
    "Interactive editor of the config file"

    def __init__(
        self,
        path: Optional[Path] = None,
        *,
        ask: Optional[Ask] = None,
        say: Optional[Say] = None,
    ):
        self.path = path or config_path()
        self._ask = ask or input
        self._say = say or print

    def _answer(self, prompt: str) -> str:
        self._say(prompt)
        try:
            return self._ask("").strip()
        except EOFError as error:
            raise ConfigError("Config not saved (no more input)") from error

    def confirm(self, prompt: str) -> bool:
        "Asks until the answer is yes or no"
        while True:
            answer = self._answer(prompt).lower()
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False

    def value(self, prompt: str) -> str:
        "Asks until the answer is not empty"
        answer = ""
        while not answer:
            answer = self._answer(prompt)
        return answer

    def _review(self, api: Dict[str, Any], name: str, prompt: str) -> str:
        current = api.get(name)
        if current is None:
            self._say(f"api.{name} is not set")
            return self.value(prompt)
        if not isinstance(current, str):
            self._say(f"api.{name} has an invalid type, it is: {current!r}")
            return self.value(prompt)
        self._say(f'api.{name} is set to "{current}"')
        if self.confirm(OVERWRITE_PROMPT):
            return self.value(prompt)
        return current

    def run(self) -> bool:
        "Edits the file, returns `False` if the user kept the old one"
        try:
            document = read_document(self.path)
        except ConfigError as error:
            raise ConfigError(
                "A config file already exists, but can't be parsed. You should "
                "fix it by hand, or rename it so a new config file can be "
                f"generated. ({error})"
            ) from error

        if document is None:
            document = {}
            url = self.value(URL_PROMPT)
            key = self.value(KEY_PROMPT)
        else:
            self._say("A config file already exists")
            if not self.confirm(EDIT_PROMPT):
                return False
            api = document.get("api")
            if isinstance(api, dict):
                url = self._review(api, "url", URL_PROMPT)
                key = self._review(api, "key", KEY_PROMPT)
            else:
                self._say("Warning: No [api] section found")
                url = self.value(URL_PROMPT)
                key = self.value(KEY_PROMPT)

        api = document.get("api")
        if not isinstance(api, dict):
            api = document["api"] = {}
        api.update(url=url, key=key)
        write_document(document, self.path)
        self._say(f"Config saved to {self.path}")
        return True
