import sys

from dict_fixer.cli import main

if __name__ == "__main__":
    sys.exit(main())
