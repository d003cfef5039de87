"""Allow running godirs with ``python -m godirs``."""

from godirs import main

main()
