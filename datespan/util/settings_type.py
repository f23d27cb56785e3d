"""Module containing class `SettingsType`."""


from datespan.util.settings import Settings


class SettingsType:

    """
    The type of a software configuration settings object.

    A `SettingsType` has a *name* (a string), a collection of default
    settings (a `Settings` object), and an optional JSON *schema* (a
    dictionary). The type can create a `Settings` object of its type
    from a YAML string or a YAML file. The data are checked against the
    schema, if there is one, and the created settings comprise the
    defaults updated with the settings specified in the data source.
    """


    def __init__(self, name, defaults, schema=None):
        self.name = name
        self.defaults = defaults
        self.schema = schema


    def create_settings_from_yaml(self, s):
        settings = Settings.create_from_yaml(s, self.schema)
        return Settings(self.defaults, settings)


    def create_settings_from_yaml_file(self, file_path):
        settings = Settings.create_from_yaml_file(file_path, self.schema)
        return Settings(self.defaults, settings)
