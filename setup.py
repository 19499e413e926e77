"""
Serves a filesystem tree as a read-only Linked Data Platform server.
"""
from setuptools import find_packages, setup
from static_ldp.version import __version__

dependencies = ['click',
                'flask',
                'rdflib>=6.0',
                'pyyaml',
                'werkzeug']

test_dependencies = ['pytest',
                     'flake8']

setup(
    name='static-ldp',
    version=__version__,
    license='Apache',
    description='Serves a filesystem tree as a read-only Linked Data '
                'Platform server.',
    long_description=__doc__,
    packages=find_packages(exclude=['tests']),
    include_package_data=True,
    zip_safe=False,
    platforms='any',
    python_requires='>=3.8',
    install_requires=dependencies,
    extras_require={
        'test': test_dependencies,
    },
    entry_points={
        'console_scripts': [
            'static-ldp = static_ldp.cli:main',
        ],
    },
    classifiers=[
        # As from http://pypi.python.org/pypi?%3Aaction=list_classifiers
        # 'Development Status :: 1 - Planning',
        # 'Development Status :: 2 - Pre-Alpha',
        'Development Status :: 3 - Alpha',
        # 'Development Status :: 4 - Beta',
        # 'Development Status :: 5 - Production/Stable',
        'Environment :: Web Environment',
        'Framework :: Flask',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP :: WSGI :: Application',
    ]
)
