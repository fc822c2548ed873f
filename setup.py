import os

from setuptools import setup

# fullsplit and packages calculation inspired by django setup.py

def fullsplit(path):
    result = []
    while path:
        path, tail = os.path.split(path)
        result.append(tail)
    result.reverse()
    return result

here = os.path.dirname(os.path.abspath(__file__))
srcdir = os.path.join(here, 'src')

packages = []
for path, dirs, files in os.walk(srcdir):
    dirs[:] = [d for d in dirs if not d.startswith('.') and d != '__pycache__']
    if '__init__.py' in files:
        packages.append('.'.join(fullsplit(os.path.relpath(path, srcdir))))

setup(
    name='xmlarray',
    version='0.2.0',
    description='Convert nested Python data to XML and back, and upsert XML nodes by XPath',
    author='Emory University Libraries',
    author_email='libsysdev-l@listserv.cc.emory.edu',
    license='Apache License, Version 2.0',
    package_dir={'': 'src'},
    packages=packages,
    python_requires='>=3.7',
    install_requires=[
        'lxml',
        'ply',
    ],
    extras_require={
        'test': [
            'unittest-xml-reporting',
            'pytest',
        ],
        'doc': [
            'sphinx',
        ],
    },
)
