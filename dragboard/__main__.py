"""Allow running with: python -m dragboard"""

from .cli.main import main

main()
