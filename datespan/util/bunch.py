"""Module containing class `Bunch`."""


class Bunch:

    """
    Collection of named values accessed as attributes.

    The initializer accepts any number of positional `Bunch` arguments,
    whose attributes are copied into the new bunch in order, followed
    by keyword arguments, which are also copied. Later values override
    earlier ones with the same name.
    """


    def __init__(self, *args, **kwargs):

        for arg in args:
            self.__dict__.update(arg.__dict__)

        self.__dict__.update(kwargs)


    def __eq__(self, other):
        if not isinstance(other, Bunch):
            return False
        else:
            return self.__dict__ == other.__dict__


    def __repr__(self):
        items = ', '.join(f'{k}={v!r}' for k, v in self.__dict__.items())
        return f'{self.__class__.__name__}({items})'


    def items(self):
        return self.__dict__.items()
