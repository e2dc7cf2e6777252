from setuptools import setup

VERSION = "0.1"

setup(
    name="influxreporter",
    version=VERSION,
    license="GPL v3",
    description=("Periodic reporter of in-process metrics to InfluxDB"),
    long_description=(""),
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Topic :: System :: Monitoring",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    keywords=["metrics", "influxdb", "reporter", "time-series"],
    zip_safe=False,
    platforms="any",
    python_requires=">=3.12",
    packages=[
        "influxreporter", "influxreporter.metrics", "influxreporter.reporter",
        "influxreporter.writer", "influxreporter.utils"
    ],
    install_requires=[
        "aiohttp>=3.9.0", "async_timeout>=4.0.3"
    ],
    extras_require={
        "test": [
            "pytest>=8.0", "pytest-asyncio>=0.23", "pytest-aiohttp>=1.0.5"
        ]
    },
    include_package_data=True)
