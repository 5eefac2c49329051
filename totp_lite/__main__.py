import sys

from totp_lite.cli import main

sys.exit(main())
