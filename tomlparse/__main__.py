"""Allow running as: python -m tomlparse"""

from .cli import main

main()
