from setuptools import setup

setup(
    name="tgraph",
    version="0.1.0",
    description="Generic directed graph with a trivial graph format file codec",
    license="MIT",
    packages=["tgraph"],
    python_requires=">=3.8",
    install_requires=[
        "Jinja2>=3,<4",
        "PyYAML>=5.1",
        "watchdog>=2",
    ],
    extras_require={"test": ["pytest>=7"]},
    package_data={"tgraph": ["templates/*.jinja"]},
    entry_points={"console_scripts": ["tgraph = tgraph.cli:main"]},
)
