"""
setup.py for datespan pip package.


Creating a datespan Development Conda Environment
------------------------------------------------

To create a Conda environment for datespan development, from the
directory containing this file:

    conda create -n datespan-dev python=3.11
    conda activate datespan-dev
    pip install -e .


Running datespan Unit Tests
---------------------------

To run the unit tests, from the directory containing this file:

    conda activate datespan-dev
    python -m unittest discover -s datespan -t .

To run the unit tests for just one subpackage of the `datespan` package:

    python -m unittest discover -s datespan/<subpackage> -t .


Building and Uploading the datespan Package
-------------------------------------------

The package build and upload commands below should be issued from within
the directory containing this file.

To build the datespan package:

    conda activate datespan-dev
    pip install build twine
    python -m build

The build process will write package `.tar.gz` and `.whl` files to the
`dist` subdirectory of the directory containing this file.

To upload a built package to the real Python package index:

    python -m twine upload dist/*
"""


from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from setuptools import find_packages, setup


def load_version_module(package_name):
    module_name = f'{package_name}.version'
    file_path = Path(__file__).parent / package_name / 'version.py'
    spec = spec_from_file_location(module_name, file_path)
    module = module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


version = load_version_module('datespan')


setup(

    name='datespan',
    version=version.__version__,
    description=(
        'Immutable date ranges with containment, ordering, and collision '
        'tests and stepped materialization.'),
    license='MIT',

    packages=find_packages(

        # We exclude the unit test packages from distributions.
        exclude=['tests', 'tests.*', '*.tests.*', '*.tests']

    ),

    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],

    python_requires='>=3.9',

    install_requires=[
        'environs',
        'jsonschema',
        'ruamel.yaml',
        'tzdata',                  # time zone data for `zoneinfo`
    ],

    include_package_data=True,
    zip_safe=False

)
