# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from lifegrid import configuration
from lifegrid.repository.configuration import CONFIGURATION_REPO
from lifegrid.template.configuration import get_configuration_template
from lifegrid.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = get_configuration_template()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))
