import sys

from apkmanifest.cli import main

sys.exit(main())
