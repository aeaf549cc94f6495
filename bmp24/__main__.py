import sys

from bmp24.cli import main

sys.exit(main())
