import sys

from table_reader.main import main

sys.exit(main())
