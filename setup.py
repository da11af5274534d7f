#!/usr/bin/env python3
from setuptools import setup

setup(
    name='graphemachine',
    version='1.0.0',
    license='GNU Affero GPL v3',
    author='Florian Leitner',
    author_email='florian.leitner@gmail.com',
    url='https://github.com/fnl/graphemachine',
    description='streaming Unicode grapheme cluster segmentation',
    long_description=open('README.rst', encoding='utf-8').read(),
    install_requires=[
        'regex >= 2024.9.11',
    ],
    packages=[
        'graphemachine',
    ],
    package_dir={'': 'src'},
    scripts=[
        'scripts/graphemes.py',
    ],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
        'Topic :: Text Processing :: Linguistic',
    ],
)
