"""Install the Riot middleware service."""

from setuptools import setup, find_packages

setup(
    name='riot-middleware',
    version='1.0.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    py_modules=['wsgi'],
    install_requires=[
        "flask",
        "werkzeug",
        "requests",
        "python-json-logger",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    zip_safe=False
)
