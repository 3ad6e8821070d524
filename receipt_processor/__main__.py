import sys

from receipt_processor.server import main

sys.exit(main())
