import sys

from sfxgen.tools.generate_sounds import main

if __name__ == "__main__":
    sys.exit(main())
