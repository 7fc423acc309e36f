import sys

from exprlex.cli import main

if __name__ == "__main__":
    sys.exit(main())
