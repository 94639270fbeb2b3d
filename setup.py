"""setup.py for packaging cloudimg"""
from setuptools import setup, find_packages
from cloudimg.version import get_version


REQUIREMENTS_PATH = 'cloudimg/requirements.txt'


def read_requirements(path):
    """Read requirements.txt and return a list of requirements."""
    with open(path, 'r') as file:
        reqs = file.read().splitlines()
    return reqs

def read_long_description():
    """Read a file written about long description of the package."""
    with open("README.md", "r") as file:
        long_description = file.read()
    return long_description


def find_cloudimg_packages():
    """Find cloudimg package."""
    return find_packages(
        exclude=["tests", "cloudimg.tests",]
    )

setup(
    name="cloudimg",
    version=get_version(),
    author="RainLab",
    author_email="info@rainlab.co.jp",
    description="A thin client for rotating snappy images in an OpenStack image registry",
    keywords=['openstack', 'cloud images', 'system tools'],
    long_description=read_long_description(),
    long_description_content_type="text/markdown",

    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: System Administrators",
        "Topic :: System :: Systems Administration",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: OS Independent",
    ],

    install_requires=read_requirements(REQUIREMENTS_PATH),
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.6',

    packages=find_cloudimg_packages(),
    package_data={'cloudimg': ['requirements.txt']},
    entry_points={
        "console_scripts": [
            "cloudimg = cloudimg.__main__:main",
        ]
    },
)
