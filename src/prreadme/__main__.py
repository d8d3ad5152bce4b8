"""Run the README generator with ``python -m prreadme``."""

from .main import main

main()
