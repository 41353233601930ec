from setuptools import setup


setup(
    name='hrpn',
    version='0.1.0',
    description='RPN calculator over hybrid rational numbers',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['hrpn'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'hypothesis',
            'flake8',
            'bandit',
            'mypy',
            'safety',
        ],
    },
    entry_points={
        'console_scripts': [
            'hrpn = hrpn.cli:main',
        ],
    },
    license='ISC',
)
