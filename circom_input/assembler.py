"""
Verifier 입력 조립기 (Verifier Input Assembler)
================================================

snarkjs가 만든 세 아티팩트를 읽어 circom-pairing Groth16 verifier 회로의
input.json 한 개로 조립한다.

  vkey_raw.json   : vk_alpha_1, vk_beta_2, vk_gamma_2, vk_delta_2, IC[]
  proof_raw.json  : pi_a, pi_b, pi_c
  public_raw.json : 공개 입력 (10진 문자열 리스트)

**처리 순서** (고정):
  1. gamma2  ← vk_gamma_2
  2. delta2  ← vk_delta_2
  3. IC[i]   ← vkey.IC[i]   (배열 순서대로)
  4. negalfa1xbeta2 ← e(-vk_alpha_1, vk_beta_2)
  5. negpa   ← -pi_a
  6. pb      ← pi_b
  7. pc      ← pi_c
  8. pubInput ← public signals (그대로)

치명적 오류(파일 없음, JSON 파싱 실패, 좌표 형식 오류, 범위 초과)가 나면
출력 파일은 쓰지 않는다.
"""

import json
import logging
import os
import tempfile
from collections import OrderedDict

from circom_input.config import BN254, DEFAULT_OPTIONS, SUPPORTED_CURVES
from circom_input.encoder import encode_g1, encode_g2
from circom_input.errors import InputNotFound, MalformedJSON, PairingComputationFailed
from circom_input.field import negate_g1
from circom_input.pairing import PairingResult, curve_context, evaluate_pairing
from circom_input.points import parse_g1, parse_g2

logger = logging.getLogger(__name__)

OUTPUT_KEYS = ("negalfa1xbeta2", "gamma2", "delta2", "IC", "negpa", "pb", "pc", "pubInput")


# ─────────────────────────────────────────────────────────────────────
# 입력 읽기
# ─────────────────────────────────────────────────────────────────────

def load_json(path):
    """JSON 파일을 읽는다. 없으면 InputNotFound, 파싱 실패면 MalformedJSON."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as exc:
        raise InputNotFound(f"입력 파일이 없습니다: {path}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedJSON(f"JSON 파싱 실패: {path}: {exc}") from exc


def load_artifacts(vkey_path, proof_path, public_path):
    """(vkey, proof, public_signals) 세 문서를 모두 읽는다."""
    logger.info("Loading verification key and proof")
    vkey = load_json(vkey_path)
    proof = load_json(proof_path)
    public_signals = load_json(public_path)
    logger.info("Data loaded")
    return vkey, proof, public_signals


def _require(doc, key, name):
    if not isinstance(doc, dict):
        raise MalformedJSON(f"{name}는 JSON 객체여야 합니다")
    if key not in doc:
        raise MalformedJSON(f"{name}에 '{key}' 필드가 없습니다")
    return doc[key]


def check_vkey_metadata(vkey, public_signals):
    """vkey의 curve / nPublic 메타데이터와 IC 길이를 확인한다."""
    logger.debug("vkey protocol=%s curve=%s nPublic=%s",
                 vkey.get("protocol"), vkey.get("curve"), vkey.get("nPublic"))

    curve = vkey.get("curve")
    if curve is not None and str(curve).lower() not in SUPPORTED_CURVES:
        raise MalformedJSON(f"지원하지 않는 곡선입니다: {curve}")

    ic = vkey["IC"]
    n_public = vkey.get("nPublic")
    if n_public is not None:
        try:
            n_public = int(n_public)
        except (TypeError, ValueError) as exc:
            raise MalformedJSON(f"nPublic 값이 정수가 아닙니다: {n_public!r}") from exc
        if len(ic) != n_public + 1:
            raise MalformedJSON(
                f"IC 길이({len(ic)})가 nPublic + 1({n_public + 1})과 다릅니다")

    if len(ic) != len(public_signals) + 1:
        logger.warning("IC has %d points but %d public signals were given",
                       len(ic), len(public_signals))


# ─────────────────────────────────────────────────────────────────────
# 조립
# ─────────────────────────────────────────────────────────────────────

def resolve_pairing(result, options=DEFAULT_OPTIONS, config=BN254):
    """PairingResult → limb 배열. 실패 시 정책에 따라 에러 또는 placeholder."""
    if result.ok:
        return result.value
    if options.strict_pairing:
        raise PairingComputationFailed(
            f"e(-alpha1, beta2) 계산 실패: {result.error}") from result.error
    logger.warning("Using zero placeholder for negalfa1xbeta2")
    return PairingResult.placeholder(config)


def assemble_verifier_input(vkey, proof, public_signals, context,
                            config=BN254, options=DEFAULT_OPTIONS):
    """세 문서를 verifier 입력 OrderedDict로 변환한다.

    Args:
        vkey: verification key dict
        proof: proof dict
        public_signals: 공개 입력 리스트
        context: 열려 있는 CurveContext
        config: LimbConfig
        options: ConverterOptions

    Returns:
        OrderedDict: OUTPUT_KEYS 순서의 verifier 입력
    """
    vk_alpha_1 = _require(vkey, "vk_alpha_1", "verification key")
    vk_beta_2 = _require(vkey, "vk_beta_2", "verification key")
    vk_gamma_2 = _require(vkey, "vk_gamma_2", "verification key")
    vk_delta_2 = _require(vkey, "vk_delta_2", "verification key")
    ic_points = _require(vkey, "IC", "verification key")
    pi_a = _require(proof, "pi_a", "proof")
    pi_b = _require(proof, "pi_b", "proof")
    pi_c = _require(proof, "pi_c", "proof")
    if not isinstance(ic_points, list):
        raise MalformedJSON("verification key의 IC는 배열이어야 합니다")
    if not isinstance(public_signals, list):
        raise MalformedJSON("public signals는 배열이어야 합니다")

    check_vkey_metadata(vkey, public_signals)

    logger.info("Converting verification key")
    logger.info("Converting gamma2")
    gamma2 = encode_g2(parse_g2(vk_gamma_2, config), config)

    logger.info("Converting delta2")
    delta2 = encode_g2(parse_g2(vk_delta_2, config), config)

    logger.info("Converting IC points")
    ic = []
    for idx, point in enumerate(ic_points):
        logger.debug("IC[%d]", idx)
        ic.append(encode_g1(parse_g1(point, config), config))

    logger.info("Computing negalfa1xbeta2 = e(-alpha1, beta2)")
    neg_alpha1 = negate_g1(parse_g1(vk_alpha_1, config), config)
    beta2 = parse_g2(vk_beta_2, config)
    negalfa1xbeta2 = resolve_pairing(
        evaluate_pairing(neg_alpha1, beta2, context, config), options, config)

    logger.info("Converting proof")
    negpa = encode_g1(negate_g1(parse_g1(pi_a, config), config), config)
    pb = encode_g2(parse_g2(pi_b, config), config)
    pc = encode_g1(parse_g1(pi_c, config), config)

    return OrderedDict([
        ("negalfa1xbeta2", negalfa1xbeta2),
        ("gamma2", gamma2),
        ("delta2", delta2),
        ("IC", ic),
        ("negpa", negpa),
        ("pb", pb),
        ("pc", pc),
        ("pubInput", public_signals),
    ])


def _shape(value):
    dims = []
    while isinstance(value, list):
        dims.append(len(value))
        if not value:
            break
        value = value[0]
    return "".join(f"[{d}]" for d in dims)


def describe_shapes(verifier_input):
    """각 필드의 배열 모양 문자열. 예: {"gamma2": "[2][2][6]", ...}"""
    return OrderedDict((key, _shape(verifier_input[key])) for key in OUTPUT_KEYS)


# ─────────────────────────────────────────────────────────────────────
# 출력
# ─────────────────────────────────────────────────────────────────────

def dump_verifier_input(verifier_input):
    """2칸 들여쓰기 JSON 문자열. 키 순서는 OUTPUT_KEYS 그대로 유지한다."""
    return json.dumps(verifier_input, indent=2) + "\n"


def write_verifier_input(verifier_input, path):
    """임시 파일에 쓴 뒤 os.replace로 교체한다. 실패 시 부분 출력이 남지 않는다."""
    text = dump_verifier_input(verifier_input)
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(prefix=".input-", suffix=".json", dir=directory)
    try:
        try:
            f = os.fdopen(fd, "w", encoding="utf-8")
        except BaseException:
            os.close(fd)
            raise
        with f:
            f.write(text)
        os.replace(tmp_path, path)
    except BaseException:
        os.unlink(tmp_path)
        raise


def convert(vkey_path, proof_path, public_path, output_path,
            config=BN254, options=DEFAULT_OPTIONS):
    """파일 세 개를 읽어 verifier 입력을 output_path에 쓴다.

    Returns:
        OrderedDict: 기록한 verifier 입력
    """
    vkey, proof, public_signals = load_artifacts(vkey_path, proof_path, public_path)

    with curve_context(config) as context:
        verifier_input = assemble_verifier_input(
            vkey, proof, public_signals, context, config, options)

    write_verifier_input(verifier_input, output_path)

    logger.info("Conversion complete, wrote %s", output_path)
    for key, shape in describe_shapes(verifier_input).items():
        logger.info("  %s: %s", key, shape)
    return verifier_input
