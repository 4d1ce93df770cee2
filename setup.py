#!/usr/bin/env python
from setuptools import setup
import os


def get_version():
    curdir = os.path.dirname(__file__)
    filename = os.path.join(curdir, 'src', 'fontharvest', 'version.py')
    with open(filename, 'rb') as fp:
        return fp.read().decode('utf8').split('=')[1].strip(" \n'")


def readme():
    with open('README.rst') as f:
        return f.read()


setup(
    name='fontharvest',
    version=get_version(),
    description='Recover font families and typography values from decoded '
                'Transit token data',
    long_description=readme(),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Multimedia :: Graphics',
        'Topic :: Text Processing :: Fonts',
    ],
    keywords='fonts typography design-tokens transit',
    license='MIT License',
    package_dir={'': 'src'},
    packages=[
        'fontharvest',
        'fontharvest.core',
        'fontharvest.tools',
    ],
    python_requires='>=3.10',
    install_requires=[],
    extras_require={
        'test': [
            'pytest'],
    },
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'fontharvest=fontharvest.__main__:main',
            'generate-font-catalog=fontharvest.tools.generate_font_catalog:main',
        ]
    },
    )
