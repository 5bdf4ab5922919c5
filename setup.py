from setuptools import setup, find_packages

setup(
    name='dotdata',
    version='0.1.0',
    description='Read and write nested dicts with dot or slash paths like "a.b.c".',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    install_requires=[
        'click',
        'platformdirs',
        'pydantic>=2',
        'pyyaml',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        "console_scripts": [
            # 'dotdata' command will call the main() group in dotdata/cli.py
            "dotdata = dotdata.cli:main",
        ],
    },
    classifiers=[
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.10',
)
