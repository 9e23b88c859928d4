import sys

from pugaipadam.app import main

if __name__ == "__main__":
    sys.exit(main())
