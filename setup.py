#!/usr/bin/env python
import os
from setuptools import setup

_here = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(_here, "README.md"), "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open(os.path.join(_here, "VERSION"), "r", encoding="utf-8") as fh:
    version = fh.read().strip()

setup(name='gplite',
      version=version,
      author='Emmanuel Vazquez',
      author_email='emmanuel.vazquez@centralesupelec.fr',
      description='gplite: Gaussian process regression with compiled models',
      long_description=long_description,
      long_description_content_type="text/markdown",
      classifiers=[
          "Programming Language :: Python :: 3",
          "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
          "Operating System :: OS Independent",
      ],
      packages=['gplite', 'gplite.num', 'gplite.kernel', 'gplite.core'],
      license='GPLv3',
      install_requires=[
             "numpy",
             "scipy>=1.8.0",
         ],
      extras_require={
          "test": ["pytest"],
      },
      python_requires=">=3.8",
      )
