#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JSONTAPOSE_PATH = HERE / "jsontapose"


def get_version(path):
    "Read __version__ from a version file without importing the package."
    match = re.search(r'^__version__ = "([^"]+)"', path.read_text(), re.M)
    return match.group(1)


VERSION = get_version(JSONTAPOSE_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='jsontapose',
      version=VERSION,
      description='Side-by-side structural diffs of JSON and YAML documents',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      packages=find_packages(include=['jsontapose', 'jsontapose.*']),
      package_data={
          'jsontapose.webapp': ['templates/*.html'],
          'jsontapose.tests': ['files/*'],
      },
      python_requires='>=3.8',
      install_requires=[
          'colorama',
          'jinja2>=2.9',
          'PyYAML>=5.1',
          'tornado>=6.1',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'pytest>=6.0',
          ],
      },
      entry_points={
          'console_scripts': [
              'jsontapose = jsontapose.__main__:main_dispatch',
              'jsondiff = jsontapose.diffapp:main',
              'jsonshow = jsontapose.showapp:main',
              'jsonformat = jsontapose.formatapp:main',
              'jsondiff-web = jsontapose.webapp.diffweb:main',
          ],
      },
      )
