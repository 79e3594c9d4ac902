from typing import List, Optional
import argparse
import asyncio
import json
import logging
import os
import sys
from logging.config import dictConfig

import aiohttp
import sentry_sdk

from social.athost.identity.config import Settings
from social.athost.identity.did import DID
from social.athost.identity.errors import DIDError
from social.athost.identity.handle import ResolvedSubject, resolve_subject

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging_config_file = os.getenv("LOGGING_CONFIG_FILE", "")

    if len(logging_config_file) > 0:
        with open(logging_config_file) as fl:
            dictConfig(json.load(fl))
        return

    logging.basicConfig()
    logging.getLogger().setLevel(logging.DEBUG if settings.debug else logging.INFO)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="athost-resolve", description="Resolve DIDs to handles"
    )
    parser.add_argument("did", nargs="+", help="The DID(s) to resolve.")
    parser.add_argument(
        "--plc-hostname",
        default=settings.plc_hostname,
        help="The PLC hostname to use for resolving did-method-plc DIDs.",
    )
    parser.add_argument(
        "--verify-id",
        action="store_true",
        default=settings.verify_document_id,
        help="Reject DID documents whose id is not the requested DID.",
    )
    parser.add_argument(
        "--uri",
        action="store_true",
        help="Print the at:// URI of each DID without resolving it.",
    )
    return parser


async def resolve_one(
    session: aiohttp.ClientSession, plc_hostname: str, verify_id: bool, value: str
) -> Optional[ResolvedSubject]:
    try:
        did = DID.parse(value)
        return await resolve_subject(session, did, plc_hostname, verify_id)
    except DIDError as e:
        logger.error("Unable to resolve %s: %s", value, e)
        sentry_sdk.capture_exception(e)
        return None


async def realMain(argv: Optional[List[str]] = None) -> int:
    settings = Settings()
    configure_logging(settings)
    if settings.sentry_dsn:
        sentry_sdk.init(dsn=settings.sentry_dsn)

    args = vars(build_parser(settings).parse_args(argv))
    values: List[str] = args.get("did", [])

    if args.get("uri"):
        failed = False
        for value in values:
            try:
                print(DID.parse(value).protocol_uri())
            except DIDError as e:
                logger.error("Unable to parse %s: %s", value, e)
                failed = True
        return 1 if failed else 0

    timeout = aiohttp.ClientTimeout(total=settings.http_timeout)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        async with asyncio.TaskGroup() as tg:
            tasks = [
                tg.create_task(
                    resolve_one(
                        session, args["plc_hostname"], args["verify_id"], value
                    )
                )
                for value in values
            ]

    results = [task.result() for task in tasks]
    for resolved in results:
        if resolved is not None:
            print(f"{resolved.did} {resolved.handle} {resolved.pds or '-'}")
    return 0 if all(resolved is not None for resolved in results) else 1


def main() -> None:
    sys.exit(asyncio.run(realMain()))


if __name__ == "__main__":
    main()
