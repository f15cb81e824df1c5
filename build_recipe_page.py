#!/usr/bin/env python3
"""Build a static snapshot of the recipe browser page.

Usage:
    # All recipes, catalog order
    python build_recipe_page.py

    # Hard recipes sorted by name
    python build_recipe_page.py --filter hard --sort name

    # Use a JSON catalog instead of the built-in one
    python build_recipe_page.py --data recipes.json --output out.html

    # Dry run (print the page instead of saving)
    python build_recipe_page.py --dry-run
"""

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from lib.recipe_browser import FILTER_GROUP, SORT_GROUP, RecipeBrowser, SelectionEvent
from lib.recipe_catalog import get_recipes
from templates.recipe_page_template import format_browser_page

load_dotenv()

DEFAULT_OUTPUT = Path("recipes.html")


def build_page(recipes, filter_key: str = None, sort_key: str = None) -> tuple[str, list[str]]:
    """Render the page for one filter/sort selection.

    Returns:
        Tuple of (HTML document, list of warnings)
    """
    browser = RecipeBrowser(recipes)
    browser.start()

    warnings = []
    if filter_key:
        warnings.extend(browser.dispatch(SelectionEvent(FILTER_GROUP, filter_key)))
    if sort_key:
        warnings.extend(browser.dispatch(SelectionEvent(SORT_GROUP, sort_key)))

    return format_browser_page(browser, warnings), warnings


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Render the recipe browser page to a static HTML file"
    )
    parser.add_argument("--filter", help="all, easy, medium, hard or quick")
    parser.add_argument("--sort", help="none, name or time")
    parser.add_argument(
        "--data",
        default=os.getenv("RECIPE_DATA_PATH"),
        help="JSON recipe catalog. Defaults to RECIPE_DATA_PATH or the built-in recipes.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Where to write the page (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the page instead of saving it",
    )
    args = parser.parse_args(argv)

    try:
        recipes = get_recipes(args.data)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1

    page, warnings = build_page(recipes, args.filter, args.sort)

    for warning in warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    if args.dry_run:
        print("\n--- Preview ---")
        print(page)
        print("--- End Preview ---\n")
        return 0

    args.output.write_text(page, encoding="utf-8")
    print(f"Saved to: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
