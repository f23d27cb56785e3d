"""Module containing class `Settings`."""


import jsonschema

from datespan.util.bunch import Bunch
import datespan.util.os_utils as os_utils
import datespan.util.yaml_utils as yaml_utils


class Settings(Bunch):

    """
    Collection of software configuration settings.

    A *setting* has a *name* and a *value*. The value must be `None`
    or a boolean, integer, float, string, list, or `Settings` object.
    Dictionaries nested in the data become `Settings` objects.
    A setting contained in a `Settings` object is accessed as an
    attribute of the object. For example, a setting `x` of a settings
    object `s` is accessed as `s.x`. Settings whose names are not
    Python identifiers (for example names containing hyphens) are
    accessed with `getattr`.

    Each of the `create_from_...` methods accepts an optional JSON
    schema (a dictionary) against which the settings data are checked
    before the settings object is created.
    """

    @staticmethod
    def create_from_dict(d, schema=None):

        """Creates a settings object from a dictionary."""

        if not isinstance(d, dict):
            raise TypeError(
                f'Settings data must be a dictionary, not a '
                f'{d.__class__.__name__}.')

        if schema is not None:
            _check_against_schema(d, schema)

        d = dict(
            (k, Settings.create_from_dict(v) if isinstance(v, dict) else v)
            for k, v in d.items())

        return Settings(**d)


    @staticmethod
    def create_from_yaml(s, schema=None):

        """Creates a settings object from a YAML string."""

        try:
            d = yaml_utils.load(s)

        except Exception as e:
            raise ValueError(
                f'YAML parse failed. Error message was:\n{str(e)}')

        if d is None:
            d = dict()

        elif not isinstance(d, dict):
            raise ValueError('Settings must be a YAML mapping.')

        return Settings.create_from_dict(d, schema)


    @staticmethod
    def create_from_yaml_file(file_path, schema=None):

        """Creates a settings object from a YAML file."""

        s = os_utils.read_file(file_path)
        return Settings.create_from_yaml(s, schema)


def _check_against_schema(d, schema):
    try:
        jsonschema.validate(d, schema)
    except jsonschema.exceptions.ValidationError as e:
        raise ValueError(f'Bad settings: {e.message}')
