"""
Allow running the pypie demo as a module:

    python -m pypie [options]

Delegates to pypie.cli:main().
"""
import sys
from .cli import main

sys.exit(main())
