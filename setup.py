import re
import os.path
from setuptools import setup


ROOT = os.path.dirname(__file__)
with open(os.path.join(ROOT, 'cssast', 'version.py')) as fd:
    VERSION = re.search("VERSION = '([^']+)'", fd.read()).group(1)

with open(os.path.join(ROOT, 'README.rst'), 'rb') as fd:
    README = fd.read().decode('utf8')


setup(
    name='cssast',
    version=VERSION,
    license='BSD',
    author='Simon Sapin',
    author_email='simon.sapin@exyr.org',
    description='cssast parses CSS stylesheets into a JSON-ready syntax tree.',
    long_description=README,
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python :: 3',
    ],
    packages=['cssast', 'cssast.tests'],
    python_requires='>=3.7',
    extras_require={
        'test': ['pytest'],
    },
)
