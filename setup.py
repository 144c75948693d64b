#!/usr/bin/env python
# -*- coding: utf-8 -*-
import os
import re
from io import open

from setuptools import (
    Command,
    setup,
)

readme = open('README.rst', encoding='utf8').read()


def read_reqs(name):
    with open(os.path.join(os.path.dirname(__file__), name), encoding='utf8') as f:
        return [line for line in f.read().split('\n') if line and not line.strip().startswith('#')]


def read_version():
    with open(os.path.join('formwork', '__init__.py'), encoding='utf8') as f:
        m = re.search(r'''__version__\s*=\s*['"]([^'"]*)['"]''', f.read())
        if m:
            return m.group(1)
        raise ValueError("couldn't find version")


class Tag(Command):
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        from subprocess import call

        version = read_version()
        errno = call(['git', 'tag', '--annotate', version, '--message', 'Version %s' % version])
        if errno == 0:
            print("Added tag for version %s" % version)
        raise SystemExit(errno)


setup(
    name='formwork',
    version=read_version(),
    description='formwork declares forms as fields, a layout and a chain of submit processors, built on django',
    long_description=readme,
    long_description_content_type='text/x-rst',
    packages=['formwork'],
    include_package_data=True,
    install_requires=['Django >= 3.2'] + read_reqs('requirements.txt'),
    extras_require={
        'test': read_reqs('test_requirements.txt'),
    },
    license="BSD",
    zip_safe=False,
    keywords='formwork',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Framework :: Django',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    cmdclass={'tag': Tag},
)
