from setuptools import setup, find_packages

from revisionable import __version__
from revisionable import __description__
from revisionable import __doc__ as __long_description__

setup(
    name = 'revisionable',
    version = __version__,
    packages = find_packages(),
    install_requires = [
        'SQLAlchemy>=2.0',
        'pydantic-settings>=2.0',
        ],
    extras_require = {
        'test': ['pytest'],
        },

    # metadata for upload to PyPI
    author = "The revisionable developers",
    description = __description__,
    long_description = __long_description__,
    license = "MIT",
    keywords = "revisions history audit sqlalchemy orm",
    zip_safe = False,
    classifiers = [
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Database',
        'Topic :: Software Development :: Libraries :: Python Modules'],
)
