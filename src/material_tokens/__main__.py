"""Allow ``python -m material_tokens``."""

from material_tokens.cli import main

if __name__ == "__main__":
    main()
