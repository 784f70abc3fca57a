"""
circom-pairing 입력 변환 설정값
================================

모든 컴포넌트가 공유하는 limb / 곡선 상수와 기본 파일 경로를 정의한다.

**LimbConfig**:
  circom-pairing 회로는 254비트 필드 원소를 그대로 받지 못하므로
  K개의 limb (각 LIMB_BITS 비트, little-endian)로 쪼개서 입력한다.
  BN254 기준 K=6, LIMB_BITS=43 → 최대 2^258 미만의 값을 표현할 수 있다.

사용 예시:
    >>> from circom_input.config import BN254
    >>> BN254.n_limbs, BN254.limb_bits
    (6, 43)
    >>> BN254.capacity == 2 ** 258
    True
"""

import os
from collections import namedtuple

from py_ecc import bn128


class LimbConfig(namedtuple("LimbConfig", ["n_limbs", "limb_bits", "prime"])):
    """limb 개수, limb 비트 폭, 기저체 소수 p를 묶은 불변 설정값.

    속성:
        n_limbs: limb 개수 K
        limb_bits: limb 하나의 비트 수
        prime: 곡선 기저체(base field)의 소수 p
    """
    __slots__ = ()

    @property
    def limb_size(self):
        """limb 하나가 표현할 수 있는 값의 개수 (2^limb_bits)."""
        return 1 << self.limb_bits

    @property
    def capacity(self):
        """limb 벡터로 표현 가능한 값의 상한 (2^(K·limb_bits), 미포함)."""
        return 1 << (self.n_limbs * self.limb_bits)


# ─────────────────────────────────────────────────────────────────────
# BN254 (bn128) 상수
# ─────────────────────────────────────────────────────────────────────

K = 6
LIMB_BITS = 43

# 기저체 소수 p (스칼라 필드 위수 curve_order가 아님)
FIELD_MODULUS = bn128.field_modulus

BN254 = LimbConfig(K, LIMB_BITS, FIELD_MODULUS)

# verification key의 "curve" 필드로 허용되는 이름
SUPPORTED_CURVES = ("bn128", "bn254")


# ─────────────────────────────────────────────────────────────────────
# 기본 파일 경로
# ─────────────────────────────────────────────────────────────────────

DEFAULT_BUILD_DIR = "./build"
VKEY_FILE = "vkey_raw.json"
PROOF_FILE = "proof_raw.json"
PUBLIC_FILE = "public_raw.json"
DEFAULT_OUTPUT = "./input.json"


def default_paths(build_dir=DEFAULT_BUILD_DIR):
    """build 디렉토리 기준의 (vkey, proof, public) 경로를 반환한다."""
    return (
        os.path.join(build_dir, VKEY_FILE),
        os.path.join(build_dir, PROOF_FILE),
        os.path.join(build_dir, PUBLIC_FILE),
    )


class ConverterOptions(namedtuple("ConverterOptions", ["strict_pairing"])):
    """변환 실행 정책.

    strict_pairing이 True면 페어링 실패 시 PairingComputationFailed를 던지고,
    False면 경고를 남기고 0으로 채운 placeholder를 넣는다.
    """
    __slots__ = ()

    def __new__(cls, strict_pairing=True):
        return super().__new__(cls, strict_pairing)


DEFAULT_OPTIONS = ConverterOptions()
