"""
Run with: python -m chaosgame
"""
import sys

from chaosgame.main import main

if __name__ == "__main__":
    sys.exit(main())
