import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open('requirements.txt') as f:
    requirements = f.read().splitlines()

with open('dev-requirements.txt') as f:
    dev_requirements = f.read().splitlines()

setuptools.setup(
    name="ladybug-wbgt",
    version="0.1.0",
    author="Ladybug Tools",
    author_email="info@ladybug.tools",
    description="Ladybug WBGT is a Python library that computes globe temperature "
    "and Wet Bulb Globe Temperature (WBGT) for fields of weather data.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/ladybug-tools/ladybug-wbgt",
    packages=setuptools.find_packages(exclude=['tests']),
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        'test': dev_requirements
    },
    entry_points={
        "console_scripts": ["ladybug-wbgt = ladybug_wbgt.cli:wbgt"]
    },
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent"
    ],
    license="AGPL-3.0"
)
