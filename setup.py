from pathlib import Path  # isort: skip

from setuptools import find_packages, setup  # isort: skip


HERE = Path(__file__).resolve().parent


def get_long_description():
    readme = HERE / "README.md"
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="diagtrace",
    version="0.1.0",
    description="Configure which diagnostic listeners feed the tracing span pipeline",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests*", "benchmarks*", "scripts*"]),
    package_data={
        "diagtrace": ["py.typed"],
    },
    python_requires=">=3.8",
    zip_safe=False,
    install_requires=[
        "attrs>=20",
        "envier>=0.5,<1",
        "opentelemetry-api>=1.0.0",
    ],
    extras_require={
        "tests": [
            "opentelemetry-sdk>=1.0.0",
            "pytest",
            "pytest-cov",
        ],
    },
)
