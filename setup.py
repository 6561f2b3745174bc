from pathlib import Path

from setuptools import find_packages, setup

BASE_DIR = Path(__file__).parent
README = (BASE_DIR / "README.md").read_text(encoding="utf-8")

setup(
    name="hostenv",
    version="0.1.0",
    description="Bind dataclass fields from environment variables and report host identity.",
    long_description=README,
    long_description_content_type="text/markdown",
    author="hostenv maintainers",
    packages=find_packages(include=["hostenv", "hostenv.*"]),
    python_requires=">=3.9",
    include_package_data=True,
    install_requires=[
        "psutil>=5.9.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "hostenv=hostenv.main:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
