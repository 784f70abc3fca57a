"""
circom-pairing 변환 Flask Blueprint
====================================

엔드포인트:
  GET  /circom/params   limb / 곡선 설정값
  POST /circom/convert  {vkey, proof, public, allow_placeholder} → verifier input
"""

import logging

from flask import Blueprint, jsonify, request

from circom_input.assembler import assemble_verifier_input, describe_shapes
from circom_input.config import BN254, ConverterOptions
from circom_input.errors import ConversionError, MalformedJSON
from circom_input.pairing import curve_context

logger = logging.getLogger(__name__)

circom_bp = Blueprint('circom', __name__, url_prefix='/circom')

# app.py에서 주입
CONFIG = BN254


def init_circom_bp(config):
    """app.py에서 LimbConfig를 주입받는다."""
    global CONFIG
    CONFIG = config


def error_response(exc, status=400):
    return jsonify({"error": type(exc).__name__, "message": str(exc)}), status


@circom_bp.route("/params")
def params():
    """현재 limb 설정."""
    return jsonify({
        "n_limbs": CONFIG.n_limbs,
        "limb_bits": CONFIG.limb_bits,
        "prime": str(CONFIG.prime),
    })


@circom_bp.route("/convert", methods=["POST"])
def convert():
    """요청 본문의 vkey / proof / public을 verifier 입력으로 변환한다."""
    body = request.get_json(silent=True)
    try:
        if not isinstance(body, dict):
            raise MalformedJSON("요청 본문은 JSON 객체여야 합니다")
        for key in ("vkey", "proof", "public"):
            if key not in body:
                raise MalformedJSON(f"요청 본문에 '{key}' 필드가 없습니다")

        allow_placeholder = body.get("allow_placeholder", False)
        if not isinstance(allow_placeholder, bool):
            raise MalformedJSON(
                f"allow_placeholder는 true/false 여야 합니다: {allow_placeholder!r}")

        options = ConverterOptions(strict_pairing=not allow_placeholder)
        with curve_context(CONFIG) as context:
            verifier_input = assemble_verifier_input(
                body["vkey"], body["proof"], body["public"], context, CONFIG, options)
    except ConversionError as exc:
        logger.warning("conversion rejected: %s", exc)
        return error_response(exc)

    logger.info("converted: %s", dict(describe_shapes(verifier_input)))
    return jsonify(verifier_input)
