"""KNX DPT Codec — command line entry point.

Encodes and decodes datapoint values from the shell and can serve the
reference API:

    dptcodec encode 9.001 21.5        # → 0c33
    dptcodec decode 9.001 0c33        # → 21.50 °C
    dptcodec info 5.001
    dptcodec list
    dptcodec serve

Configuration comes from the environment:
  - DPTCODEC_CATALOG    catalog YAML file or directory (default: packaged)
  - DPTCODEC_API_PORT   port for ``serve`` (default 9090)
  - DPTCODEC_LOG_LEVEL  logging level (default INFO)
"""

import argparse
import json
import logging
import os
import sys

logger = logging.getLogger("dptcodec")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


def load_config(environ=None) -> dict:
    """Read process settings from environment variables."""
    if environ is None:
        environ = os.environ
    return {
        "catalog": environ.get("DPTCODEC_CATALOG") or None,
        "api_port": int(environ.get("DPTCODEC_API_PORT", "9090")),
        "log_level": environ.get("DPTCODEC_LOG_LEVEL", "INFO").upper(),
    }


def _parse_value(text: str):
    """Parse a command line value: true/false/on/off or a number."""
    lowered = text.lower()
    if lowered in ("true", "on", "yes"):
        return True
    if lowered in ("false", "off", "no"):
        return False
    return float(text)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_encode(args) -> int:
    from dpt import DPTCodec

    payload = DPTCodec.encode(args.dpt, _parse_value(args.value))
    print(payload.hex())
    return 0


def cmd_decode(args) -> int:
    from dpt import DatapointValue

    value = DatapointValue.unpack(args.dpt, bytes.fromhex(args.payload))
    print(str(value))
    return 0


def cmd_info(args) -> int:
    from dpt import DPTCodec

    print(json.dumps(DPTCodec.get_type(args.dpt).to_dict(), ensure_ascii=False))
    return 0


def cmd_list(args) -> int:
    from dpt import DPTCodec

    for info in DPTCodec.list_dpts():
        unit = f" [{info['unit']}]" if info["unit"] else ""
        print(f"{info['id']:<8} {info['name']}{unit}")
    return 0


def cmd_serve(args, config: dict) -> int:
    import uvicorn

    from api.app import create_app

    port = args.port or config["api_port"]
    logger.info("Reference API: http://0.0.0.0:%d/api/v1/dpts", port)
    uvicorn.run(create_app(), host=args.host, port=port, access_log=False)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dptcodec", description="KNX datapoint type encoder/decoder"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("encode", help="Encode a value to hex wire bytes")
    p.add_argument("dpt")
    p.add_argument("value")

    p = sub.add_parser("decode", help="Decode hex wire bytes to a display string")
    p.add_argument("dpt")
    p.add_argument("payload")

    p = sub.add_parser("info", help="Show DPT metadata as JSON")
    p.add_argument("dpt")

    sub.add_parser("list", help="List registered DPTs")

    p = sub.add_parser("serve", help="Run the reference API")
    p.add_argument("--host", default="0.0.0.0")
    p.add_argument("--port", type=int, default=None)
    return parser


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()

    logging.basicConfig(
        level=config["log_level"],
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )

    from catalog import CatalogError, load_catalog
    from dpt import DPTError

    try:
        load_catalog(config["catalog"])
    except CatalogError as e:
        logger.error("%s", e)
        return 1

    commands = {
        "encode": cmd_encode,
        "decode": cmd_decode,
        "info": cmd_info,
        "list": cmd_list,
    }
    if args.command == "serve":
        return cmd_serve(args, config)

    try:
        return commands[args.command](args)
    except DPTError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"error: invalid input: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
