import sys

from edtf_parsing.cli import main

sys.exit(main())
