import os
import codecs
from setuptools import setup

readme_path = os.path.join(os.path.dirname(__file__), 'README.rst')
with codecs.open(readme_path, encoding='utf8') as f:
    readme = f.read()

setup(
    name='uniseq',
    description='Uniform functional operations over persistent lists, vectors, strings and lazy streams',
    long_description=readme,
    long_description_content_type='text/x-rst',
    license='MIT',
    py_modules=['_uniseq_version'],
    version='0.1.0',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: PyPy',
    ],
    test_suite='tests',
    extras_require={'test': ['pytest', 'hypothesis', 'typing_extensions']},
    packages=['uniseq'],
    package_data={'uniseq': ['py.typed', '__init__.pyi']},
    python_requires='>=3.7',
)
