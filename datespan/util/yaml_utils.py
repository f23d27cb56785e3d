"""YAML utility functions."""


from ruamel.yaml import YAML


def load(source):
    yaml = _create_yaml()
    return yaml.load(source)


def _create_yaml():

    # We use the default 'rt' type, which is safe, with the pure-Python
    # implementation, which is slower than the C implementation but
    # less quirky.
    return YAML(pure=True)
