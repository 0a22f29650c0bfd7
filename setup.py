import setuptools

setuptools.setup(
    name='patterndate',
    packages=setuptools.find_packages(exclude=['tests']),
    version='0.0.1',
    author='voussoir',
    author_email='pypi@voussoir.net',
    description='Format dates with token patterns and pluggable languages',
    long_description=open('README.md', 'r', encoding='utf-8').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/voussoir/patterndate',
    install_requires=[
        'pyperclip',
        'voussoirkit',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'patterndate=patterndate.dateformat:main_cli',
        ],
    },
)
