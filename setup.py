from setuptools import setup, find_packages

setup(
    name='chronoformat',
    version='0.1.0',
    author='chronoformat contributors',
    packages=find_packages(exclude=('tests', 'tests.*')),
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'pydantic>=2',
        'abnf>=2,<2.9',
    ],
    extras_require={
        'test': [
            'pytest',
            'python-dateutil',
        ],
    },
    license='MIT',
    description='Parse and format dates and times with format descriptions, '
                'RFC 3339, RFC 2822 and ISO 8601.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
