from setuptools import setup, find_packages
from toolchains import VERSION

with open('README.md') as fd:
    read_me = fd.read()

setup(
    name='toolchains-corretto',
    version=VERSION,
    description='Java toolchain resolver for Amazon Corretto JDKs',
    long_description=read_me,
    long_description_content_type='text/markdown',
    license='Apache 2.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    install_requires=[
        'click', 'PyYAML', 'stringcase'
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.7.0',
    entry_points='''
        [console_scripts]
        toolchains=toolchains.main:cli
    ''',
)
