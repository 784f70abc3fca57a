"""
점 인코더: BN254 점 / 확대체 원소 → limb 배열
===============================================

circom-pairing 회로가 요구하는 배열 형태:

  G1   → [2][K]          [x_limbs, y_limbs]
  G2   → [2][2][K]       [[x.c0, x.c1], [y.c0, y.c1]]
  Fp2  → [2][K]          [c0_limbs, c1_limbs]
  Fp12 → [6][2][K]       Fp2 계수 6개

무한원점은 같은 모양의 0 배열로 직렬화한다. 이 sentinel은 도메인 관례일 뿐이며
회로 쪽에서 일관되게 해석해야 한다. 인코더는 점이 곡선 위에 있는지 검사하지 않는다.

모든 leaf 값은 JSON 출력용 10진 문자열이다.
"""

import logging

from circom_input.config import BN254
from circom_input.limbs import (
    encode_limbs,
    decode_limbs,
    zero_limbs,
    limbs_to_strings,
    limbs_from_strings,
)
from circom_input.points import Fp2, G1Affine, G2Affine, INFINITY, is_infinity

logger = logging.getLogger(__name__)


def _zero_vector(config):
    return limbs_to_strings(zero_limbs(config))


def encode_field(value, config=BN254):
    """Fp 원소 → K개의 10진 문자열 limb"""
    return limbs_to_strings(encode_limbs(value, config))


def encode_fp2(element, config=BN254):
    """Fp2 → [c0_limbs, c1_limbs]"""
    return [encode_field(element.c0, config), encode_field(element.c1, config)]


def encode_g1(point, config=BN254):
    """G1 점 → [2][K] 배열. 무한원점이면 0 배열."""
    if is_infinity(point):
        logger.warning("G1 point at infinity, emitting zero limbs")
        return [_zero_vector(config), _zero_vector(config)]
    return [encode_field(point.x, config), encode_field(point.y, config)]


def encode_g2(point, config=BN254):
    """G2 점 → [2][2][K] 배열. 무한원점이면 0 배열."""
    if is_infinity(point):
        logger.warning("G2 point at infinity, emitting zero limbs")
        return [
            [_zero_vector(config), _zero_vector(config)],
            [_zero_vector(config), _zero_vector(config)],
        ]
    return [encode_fp2(point.x, config), encode_fp2(point.y, config)]


def encode_fp12(coeffs, config=BN254):
    """Fp2 계수 6개 → [6][2][K] 배열"""
    if len(coeffs) != 6:
        raise ValueError(f"Fp12 원소는 Fp2 계수 6개로 구성됩니다: {len(coeffs)}")
    return [encode_fp2(c, config) for c in coeffs]


def zero_fp12(config=BN254):
    """[6][2][K] 0 배열 (페어링 placeholder)."""
    return [[_zero_vector(config), _zero_vector(config)] for _ in range(6)]


# ─── 역변환 ───

def decode_field(limbs, config=BN254):
    return decode_limbs(limbs_from_strings(limbs), config)


def decode_fp2(data, config=BN254):
    return Fp2(decode_field(data[0], config), decode_field(data[1], config))


def decode_g1(data, config=BN254):
    """[2][K] → G1Affine. 전부 0이면 INFINITY."""
    x = decode_field(data[0], config)
    y = decode_field(data[1], config)
    if x == 0 and y == 0:
        return INFINITY
    return G1Affine(x, y)


def decode_g2(data, config=BN254):
    """[2][2][K] → G2Affine. 전부 0이면 INFINITY."""
    x = decode_fp2(data[0], config)
    y = decode_fp2(data[1], config)
    if x.is_zero() and y.is_zero():
        return INFINITY
    return G2Affine(x, y)


def decode_fp12(data, config=BN254):
    """[6][2][K] → list[Fp2]"""
    return [decode_fp2(c, config) for c in data]
