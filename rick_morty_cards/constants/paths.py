"""File and directory path constants."""

from pathlib import Path

# Package root (rick_morty_cards/)
PACKAGE_DIR = Path(__file__).parent.parent

# Directory paths
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

# Template names (relative to TEMPLATES_DIR)
INDEX_TEMPLATE = "index.html"
CARD_TEMPLATE = "card.html"
MODAL_TEMPLATE = "modal.html"
