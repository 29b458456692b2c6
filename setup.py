from setuptools import setup, find_packages

setup(
    name='NamePy',
    version='1.0',
    packages=find_packages(include=['NamePy', 'NamePy.*']),
    install_requires=[
        'typeguard>=4.0',
        'typing_extensions'
    ],
    extras_require={
        'dev': ['mypy', 'pytest'],
    },
    package_data={
        'NamePy': ['py.typed']
    },
    zip_safe=False,  # Required for packages with type hints
)
