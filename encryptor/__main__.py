import sys

from encryptor.cli import main

sys.exit(main())
