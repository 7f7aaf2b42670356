from setuptools import setup, find_packages

setup(
    name='quickadd-tmdb',
    version='0.1.0',
    author='Jakub Sarnowski',
    description='Quick capture of movie and TV series metadata from TMDB into note template variables',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    install_requires=[
        'requests',      # For API calls
        'python-dotenv', # For environment configuration
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'quickadd-tmdb=quickadd_tmdb.ui.cli:main',
        ],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
