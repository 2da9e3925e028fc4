"""Command line entrypoint for rendering a menu definition to HTML."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv
from pydantic import ValidationError

from navmenu import Menu, MenuError, MenuSettings, RequestContext, UrlGenerator, configure_logging, load_menu_settings
from navmenu.loader import build_menu, load_definition

_RENDERERS = {"ul": Menu.as_ul, "ol": Menu.as_ol, "div": Menu.as_div}


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a navigation menu definition as HTML")
    parser.add_argument("definition", type=Path, help="YAML or JSON file describing the menu items.")
    parser.add_argument("--config", type=Path, help="JSON settings file (base URL, routes, class names).")
    parser.add_argument("--base-url", help="Root URL relative links are resolved against.")
    parser.add_argument(
        "--request-url",
        help="URL of the current request; matching items are marked active.",
    )
    parser.add_argument(
        "--list-type",
        choices=sorted(_RENDERERS),
        default="ul",
        help="Markup used for the menu (default: ul).",
    )
    parser.add_argument(
        "--class",
        dest="css_class",
        help="Class attribute for the outermost list element.",
    )
    parser.add_argument("--log-level", help="Python logging level (default: from settings or INFO)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    logger = logging.getLogger("navmenu.cli")
    try:
        settings = load_menu_settings(args.config)
        if args.base_url:
            settings = MenuSettings.model_validate({**settings.model_dump(), "base_url": args.base_url})
    except ValidationError as exc:
        configure_logging(args.log_level)
        logger.error("Invalid menu settings: %s", exc)
        return 1
    configure_logging(args.log_level or settings.log_level)

    generator = UrlGenerator(settings.base_url, routes=settings.routes, actions=settings.actions)
    request = RequestContext.from_url(args.request_url) if args.request_url else None
    menu = Menu(generator, request, settings=settings)

    try:
        build_menu(menu, load_definition(args.definition))
        html = _RENDERERS[args.list_type](menu, {"class": args.css_class})
    except MenuError as exc:
        logger.error("Unable to render %s: %s", args.definition, exc)
        return 1

    sys.stdout.write(html + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
