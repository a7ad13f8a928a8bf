from pathlib import Path
from typing import Any, Dict

from setuptools import setup

meta: Dict[str, Any] = {}

exec(Path('pycolor/_metadata.py').read_text(), meta)

with open('requirements.txt', encoding='utf-8') as fh:
    reqs = fh.readlines()

with open('requirements-dev.txt', encoding='utf-8') as fh:
    reqs_dev = fh.readlines()

with open('README.md', encoding='utf-8') as fh:
    long_description = fh.read()

setup(
    name='pycolor',
    author=meta['__author__'],
    description='A colour value library: RGBA colours converted between hex, RGB, CMYK, HSL and HSV, '
                'with lighten/darken/saturate manipulations and channel arithmetic.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    version=meta['__version__'],
    packages=['pycolor'],
    package_data={
        'pycolor': ['py.typed'],
    },
    python_requires='>=3.9',
    install_requires=reqs,
    extras_require={'dev': reqs_dev},
    keywords='color colour rgb rgba hex cmyk hsl hsv',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)',
    ],
    license='GNU LGPL 3.0 or later',
)
