"""Allow ``python -m works_on_work``."""

from works_on_work.cli import main

if __name__ == "__main__":
    main()
