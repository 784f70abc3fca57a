"""
명령행 진입점: snarkjs 아티팩트 → circom-pairing input.json

사용 예시:
    $ circom-input --build-dir ./build --output ./input.json
    $ python -m circom_input.cli --vkey vk.json --proof proof.json --public public.json
"""

import argparse
import logging
import sys

from circom_input.assembler import convert
from circom_input.config import (
    BN254,
    DEFAULT_BUILD_DIR,
    DEFAULT_OUTPUT,
    ConverterOptions,
    default_paths,
)
from circom_input.errors import ConversionError

logger = logging.getLogger("circom_input")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="circom-input",
        description="Convert a snarkjs Groth16 proof to circom-pairing verifier input.",
    )
    parser.add_argument("--build-dir", default=DEFAULT_BUILD_DIR,
                        help="directory holding vkey_raw.json, proof_raw.json, public_raw.json")
    parser.add_argument("--vkey", help="verification key JSON (overrides --build-dir)")
    parser.add_argument("--proof", help="proof JSON (overrides --build-dir)")
    parser.add_argument("--public", help="public signals JSON (overrides --build-dir)")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="output path")
    parser.add_argument("--allow-placeholder", action="store_true",
                        help="embed zero limbs when e(-alpha1, beta2) fails instead of aborting")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    vkey_path, proof_path, public_path = default_paths(args.build_dir)
    options = ConverterOptions(strict_pairing=not args.allow_placeholder)

    try:
        convert(
            args.vkey or vkey_path,
            args.proof or proof_path,
            args.public or public_path,
            args.output,
            BN254,
            options,
        )
    except ConversionError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
