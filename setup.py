from setuptools import setup, find_packages

setup(
    name='transfer-view',
    version='0.1',
    description=(
        'Table view of the transfers recorded by a Fuel indexer, '
        'fetched from its GraphQL API'
    ),
    license='APL 2.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.8',
    install_requires=[
        'requests >= 2.20.0',
    ],
    extras_require={
        'test': ['pytest >= 7', 'pytest-asyncio'],
    },
    tests_require=['pytest >= 7', 'pytest-asyncio'],
    zip_safe=False
)
