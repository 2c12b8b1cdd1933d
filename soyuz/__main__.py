"""Allow ``python -m soyuz``."""
from soyuz.pipeline.cli import main

if __name__ == "__main__":
    main()
