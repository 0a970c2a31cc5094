#!/usr/bin/env python3
"""
Command line access to the Tebex Headless API.

Credentials come from --config (YAML) or from TEBEX_* environment variables
(a .env file in the working directory is loaded first).

Examples:
    tebex-headless webstore
    tebex-headless categories --include-packages
    tebex-headless create-basket --complete-url https://shop/ok --cancel-url https://shop/cancel
    tebex-headless apply <basket> coupons SUMMER10
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, List, Optional

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from tebex_headless.clients.headless import TebexHeadless
from tebex_headless.contracts.codes import APPLY_TYPES, parse_code
from tebex_headless.contracts.models import PackageType
from tebex_headless.errors import HeadlessError, describe_error
from tebex_headless.utils.config_loader import HeadlessConfig, headless_config_from_env, load_headless_config

logger = logging.getLogger(__name__)

CODE_FIELDS = {
    "coupons": "coupon_code",
    "giftcards": "card_number",
    "creator-codes": "creator_code",
}


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tebex-headless", description="Query and drive a Tebex Headless webstore.")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file (default: TEBEX_* env vars)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("webstore", help="Show webstore metadata")
    sub.add_parser("pages", help="List webstore pages")

    def scoped(p: argparse.ArgumentParser) -> argparse.ArgumentParser:
        p.add_argument("--basket", default=None, help="Scope pricing to this basket")
        p.add_argument("--ip", default=None, help="Evaluate geolocation pricing for this IP")
        return p

    p = scoped(sub.add_parser("categories", help="List categories"))
    p.add_argument("--include-packages", action="store_true")
    p = scoped(sub.add_parser("category", help="Show one category"))
    p.add_argument("category_id", type=int)
    p.add_argument("--include-packages", action="store_true")

    scoped(sub.add_parser("packages", help="List packages"))
    p = scoped(sub.add_parser("package", help="Show one package"))
    p.add_argument("package_id", type=int)

    p = sub.add_parser("basket", help="Show a basket")
    p.add_argument("basket_ident")

    p = sub.add_parser("create-basket", help="Create a basket")
    p.add_argument("--complete-url", required=True)
    p.add_argument("--cancel-url", required=True)
    p.add_argument("--username", default=None, help="Create a Minecraft basket for this username")
    p.add_argument("--custom", type=json.loads, default=None, help="JSON object stored on the basket")
    p.add_argument("--auto-redirect", action="store_true", default=None)
    p.add_argument("--ip", default=None)

    p = sub.add_parser("auth-url", help="List login URLs for a basket")
    p.add_argument("basket_ident")
    p.add_argument("return_url")

    p = sub.add_parser("add-package", help="Add a package to a basket")
    p.add_argument("basket_ident")
    p.add_argument("package_id", type=int)
    p.add_argument("--quantity", type=int, default=1)
    p.add_argument("--type", choices=[t.value for t in PackageType], default=PackageType.SINGLE.value)

    p = sub.add_parser("remove-package", help="Remove a package from a basket")
    p.add_argument("basket_ident")
    p.add_argument("package_id", type=int)

    p = sub.add_parser("quantity", help="Set the quantity of a basket package")
    p.add_argument("basket_ident")
    p.add_argument("package_id", type=int)
    p.add_argument("quantity", type=int)

    for name, help_text in (("apply", "Apply a code to a basket"), ("remove-code", "Remove a code from a basket")):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("basket_ident")
        p.add_argument("kind", choices=APPLY_TYPES)
        p.add_argument("code")

    return parser


def load_config(path: Optional[Path]) -> HeadlessConfig:
    if path is not None:
        return load_headless_config(path)
    return headless_config_from_env()


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [_to_jsonable(v) for v in value]
    return value


async def run_command(args: argparse.Namespace, headless: TebexHeadless) -> Any:
    cmd = args.command
    if cmd == "webstore":
        return await headless.get_webstore()
    if cmd == "pages":
        return await headless.get_pages()
    if cmd == "categories":
        return await headless.get_categories(args.include_packages or None, args.basket, args.ip)
    if cmd == "category":
        return await headless.get_category(args.category_id, args.include_packages or None, args.basket, args.ip)
    if cmd == "packages":
        return await headless.get_packages(args.basket, args.ip)
    if cmd == "package":
        return await headless.get_package(args.package_id, args.basket, args.ip)
    if cmd == "basket":
        return await headless.get_basket(args.basket_ident)
    if cmd == "create-basket":
        if args.username:
            return await headless.create_minecraft_basket(
                args.username, args.complete_url, args.cancel_url, args.custom, args.auto_redirect, args.ip
            )
        return await headless.create_basket(args.complete_url, args.cancel_url, args.custom, args.auto_redirect, args.ip)
    if cmd == "auth-url":
        return await headless.get_basket_auth_url(args.basket_ident, args.return_url)
    if cmd == "add-package":
        return await headless.add_package_to_basket(args.basket_ident, args.package_id, args.quantity, args.type)
    if cmd == "remove-package":
        return await headless.remove_package(args.basket_ident, args.package_id)
    if cmd == "quantity":
        return await headless.update_quantity(args.basket_ident, args.package_id, args.quantity)
    if cmd in ("apply", "remove-code"):
        code = parse_code(args.kind, {CODE_FIELDS[args.kind]: args.code})
        if cmd == "apply":
            return await headless.apply(args.basket_ident, code)
        return await headless.remove(args.basket_ident, code)
    raise ValueError(f"Unknown command: {cmd}")


def main(
    argv: Optional[List[str]] = None,
    client_factory: Callable[[HeadlessConfig], TebexHeadless] = TebexHeadless.from_config,
) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValidationError) as e:
        print(json.dumps(describe_error(e)), file=sys.stderr)
        return 1

    headless = client_factory(config)
    try:
        result = asyncio.run(run_command(args, headless))
    except (HeadlessError, ValidationError, httpx.RequestError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(json.dumps(describe_error(e), default=str), file=sys.stderr)
        return 1

    print(json.dumps(_to_jsonable(result), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
