"""Allow ``python -m i18n_keysort``."""

from i18n_keysort.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
