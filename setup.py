"""Package build script"""
import re
import setuptools

ver_file = 'VERSION'

# Pull package version number from VERSION
with open(ver_file, 'r') as f:
    verstr = re.match(r'^\s*v?(\d+\.\d+\.\d+(?:\.[a-zA-Z0-9]+)?)\s*$', f.read())

if verstr is None:
    raise EnvironmentError(f'Could not find valid version number in {ver_file}; aborting setup')

__version__ = verstr.group(1)

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="geocart",
    version=__version__,
    author="Carl Best",
    author_email="",
    description="Exact conversions between WGS84 geodetic and geocentric Cartesian coordinates.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('geocart*', ),
        exclude=('*tests', 'tests*')
    ),
    package_data={"geocart": ["py.typed"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1',
    ],
    extras_require={
        'test': [
            'pytest',
            'pyproj',
        ],
    },
)
