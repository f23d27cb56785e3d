"""Operating system utility functions."""


def read_file(path):

    path = str(path)

    try:
        with open(path, 'r') as file_:
            return file_.read()

    except Exception as e:
        raise OSError(
            f'Could not read file "{path}". Error message was: {str(e)}')
