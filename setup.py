from setuptools import setup

setup(
    name="adjgraph",
    version="0.1.0",
    description="Generic directed graphs stored as adjacency lists",
    license="MIT",
    packages=["adjgraph", "adjgraph.templates"],
    python_requires=">=3.8",
    install_requires=["Jinja2>=3", "PyYAML>=5.1", "watchdog>=3"],
    extras_require={"test": ["pytest>=7"]},
    package_data={"adjgraph.templates": ["*.jinja"]},
    entry_points={"console_scripts": ["adjgraph = adjgraph.cli:main"]},
)
