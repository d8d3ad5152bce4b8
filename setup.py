"""Setup configuration for prreadme"""

from setuptools import setup, find_packages

setup(
    name="pr-readme-generator",
    version="0.1.0",
    description=(
        "Batch job that renders a README open pull request badge and "
        "contribution gallery from a user's GitHub pull request history."
    ),
    author="PR README Generator Contributors",
    author_email="",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "requests>=2.28.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "black>=22.0",
            "flake8>=4.0",
            "mypy>=0.950",
        ],
    },
    entry_points={
        "console_scripts": [
            "pr-readme-generator=prreadme.main:main",
        ],
    },
)
