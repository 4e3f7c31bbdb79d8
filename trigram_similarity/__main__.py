import sys

from trigram_similarity.cli import main

sys.exit(main())
