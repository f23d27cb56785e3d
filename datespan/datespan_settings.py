"""
datespan package settings.

The package settings are the composition of a set of default settings
(hard-coded in this module) and settings (optionally) specified in a
YAML file whose path is the value of the `DATESPAN_SETTINGS_FILE`
environment variable. The settings are:

    period_end_shift
        the number of seconds by which `DateRange.period` extends the
        finish of a range of `datetime` objects before stepping, so
        that the finish itself is included. Must be positive.
        Default 1.

    date_standards
        a mapping from date standard names to regular expressions.
        The standards are added to the built-in ones of the
        `datespan.util.date_standard_checker` module. Default empty.

The settings are loaded on first use and cached thereafter.
"""


from datetime import timedelta as TimeDelta
import logging

from environs import Env

from datespan.util.settings import Settings
from datespan.util.settings_type import SettingsType
import datespan.util.yaml_utils as yaml_utils


_logger = logging.getLogger(__name__)


SETTINGS_FILE_ENV_VAR_NAME = 'DATESPAN_SETTINGS_FILE'


_DEFAULT_SETTINGS = Settings.create_from_yaml('''
period_end_shift: 1
date_standards: {}
''')


_SCHEMA = yaml_utils.load('''
type: object
properties:
    period_end_shift:
        type: number
        exclusiveMinimum: 0
    date_standards:
        type: object
        additionalProperties:
            type: string
additionalProperties: false
''')


_SETTINGS_TYPE = SettingsType('datespan Settings', _DEFAULT_SETTINGS, _SCHEMA)


_settings = None


def get_settings():
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def set_settings(settings):

    """
    Sets the package settings.

    This is mainly for testing. A value of `None` causes the settings
    to be reloaded on next use.
    """

    global _settings
    _settings = settings


def load_settings():

    """
    Loads the package settings.

    :Raises ValueError:
        if the settings file named by the `DATESPAN_SETTINGS_FILE`
        environment variable does not exist or contains bad settings.
    """

    env = Env()
    file_path = env.path(SETTINGS_FILE_ENV_VAR_NAME, None)

    if file_path is None:
        # no settings file specified

        return _SETTINGS_TYPE.defaults

    elif not file_path.exists():
        raise ValueError(f'Settings file "{file_path}" does not exist.')

    else:
        # settings file exists

        try:
            settings = _SETTINGS_TYPE.create_settings_from_yaml_file(
                file_path)

        except Exception as e:
            raise ValueError(
                f'Load failed for settings file "{file_path}". '
                f'Error message was: {str(e)}')

        _logger.info(f'Loaded {_SETTINGS_TYPE.name} from "{file_path}".')

        return settings


def create_settings_from_yaml(s):
    return _SETTINGS_TYPE.create_settings_from_yaml(s)


def get_period_end_shift():
    seconds = get_settings().period_end_shift
    return TimeDelta(seconds=seconds)


def get_date_standards():
    return dict(get_settings().date_standards.items())
