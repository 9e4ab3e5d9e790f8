#!/usr/bin/env python
"""
Setup script for newtonls

This uses setuptools, the standard Python mechanism for installing packages.
For the easiest installation just type::

    pip install .

In addition, there are some other commands::

python setup.py clean - Clean all trash (*.pyc, emacs backups, etc.)

The test suite runs with pytest after installing the test extra::

    pip install -e .[test]
    pytest tests

"""


import os
from setuptools import setup, find_packages
from setuptools import Command

MAJOR = 0
MINOR = 1
MICRO = 0
__version__ = '%d.%d.%d' % (MAJOR, MINOR, MICRO)


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


class clean(Command):
    description = 'Remove build and trash files'
    user_options = [("all", "a", "the same")]

    def initialize_options(self):
        self.all = None

    def finalize_options(self):
        pass

    def run(self):
        os.system(
            "rm -fr ./*.pyc ./*~ ./*/*.pyc ./*/*~ ./*/*/*.pyc ./*/*/*~ "
            "./*/__pycache__ ./*/*/__pycache__ ./.pytest_cache")
        os.system("rm -fr build")
        os.system("rm -fr dist")


setup(
    name="newtonls",
    version=__version__,
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        "numpy>=1.6"
    ],
    extras_require={
        'test': ['pytest', 'scipy>=1.0,<2.0'],
    },
    cmdclass={
        'clean': clean
    },
    description="Backtracking line searches for Newton-type iterations",
    long_description=read('README.rst'),
    license="BSD",
    keywords="optimization, line search, Newton method, Armijo rule, Wolfe conditions",
    platforms=["any"],
    python_requires='>=3.6',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Topic :: Scientific/Engineering",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Education",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
