"""
페어링 평가기 (Pairing Evaluator)
==================================

외부 곡선 연산 라이브러리(py_ecc.bn128)로 e(P, Q)를 계산하고,
결과 Fp12 원소를 circom-pairing 회로의 [6][2][K] limb 배열로 바꾼다.

**Fp12 기저 변환**:
  py_ecc의 FQ12는 FQ[w] / (w^12 - 18·w^6 + 82) 위의 원소로, 계수 12개를 가진다.
  circom-pairing은 Fp2[w] / (w^6 - (9 + u)) 를 사용한다.
  w^6 = 9 + u 이므로

      Σ_{i<12} a_i·w^i = Σ_{i<6} (a_i + a_{i+6}·(9 + u))·w^i

  즉 i번째 Fp2 계수는 c_i = (a_i + 9·a_{i+6}) + a_{i+6}·u 이다.

**실패 처리**:
  evaluate_pairing은 라이브러리 오류를 던지지 않고 PairingResult로 돌려준다.
  실패를 에러로 올릴지 0 placeholder로 대체할지는 호출자(assembler)가 정한다.

**자원 관리**:
  곡선 컨텍스트는 curve_context()로 한 번 획득하고, with 블록을 벗어나면
  성공/실패와 관계없이 해제된다.

사용 예시:
    >>> with curve_context() as curve:
    ...     result = evaluate_pairing(neg_alpha, beta, curve)
    >>> result.ok
    True
"""

import logging
from contextlib import contextmanager

from py_ecc import bn128
from py_ecc.fields import bn128_FQ as FQ
from py_ecc.fields import bn128_FQ2 as FQ2

from circom_input.config import BN254
from circom_input.encoder import encode_fp12, zero_fp12
from circom_input.points import Fp2, is_infinity

logger = logging.getLogger(__name__)

# Fp12 = Fp2[w] / (w^6 - XI), XI = 9 + u
XI_C0 = 9


def to_py_ecc_g1(point):
    """G1Affine / INFINITY → py_ecc G1 점 (무한원점은 None)"""
    if is_infinity(point):
        return None
    return (FQ(point.x), FQ(point.y))


def to_py_ecc_g2(point):
    """G2Affine / INFINITY → py_ecc G2 점 (무한원점은 None)"""
    if is_infinity(point):
        return None
    return (
        FQ2([point.x.c0, point.x.c1]),
        FQ2([point.y.c0, point.y.c1]),
    )


def fp12_to_fp2_coeffs(fq12, prime=BN254.prime):
    """py_ecc FQ12 → circom-pairing 기저의 Fp2 계수 6개"""
    a = [int(c) for c in fq12.coeffs]
    return [
        Fp2((a[i] + XI_C0 * a[i + 6]) % prime, a[i + 6])
        for i in range(6)
    ]


class CurveContext:
    """외부 곡선 연산 백엔드 핸들.

    open() ~ close() 사이에서만 pairing을 호출할 수 있다.
    직접 쓰기보다 curve_context()를 사용한다.
    """

    def __init__(self, config=BN254):
        if config.prime != bn128.field_modulus:
            raise ValueError("BN254 기저체 소수가 아닌 설정으로는 페어링을 계산할 수 없습니다")
        self.config = config
        self._backend = None

    @property
    def is_open(self):
        return self._backend is not None

    def open(self):
        logger.info("Loading BN254 curve backend (py_ecc.bn128)")
        self._backend = bn128
        return self

    def close(self):
        if self._backend is not None:
            logger.info("Releasing BN254 curve backend")
        self._backend = None

    def pairing(self, g1_point, g2_point):
        """e(P, Q), P ∈ G1, Q ∈ G2 → py_ecc FQ12

        주의:
            py_ecc.bn128.pairing의 인자 순서는 (G2, G1)이다.
        """
        if self._backend is None:
            raise RuntimeError("curve context is closed")
        return self._backend.pairing(to_py_ecc_g2(g2_point), to_py_ecc_g1(g1_point))


@contextmanager
def curve_context(config=BN254):
    """CurveContext를 열고, 블록이 끝나면 반드시 닫는다."""
    context = CurveContext(config).open()
    try:
        yield context
    finally:
        context.close()


class PairingResult:
    """페어링 평가 결과.

    속성:
        ok: 성공 여부
        value: 성공 시 [6][2][K] limb 배열, 실패 시 None
        error: 실패 시 원인 예외, 성공 시 None
    """

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error is None

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, error):
        return cls(error=error)

    @staticmethod
    def placeholder(config=BN254):
        """실패 시 대체용 [6][2][K] 0 배열."""
        return zero_fp12(config)

    def __repr__(self):
        if self.ok:
            return "PairingResult(ok)"
        return f"PairingResult(error={self.error!r})"


def evaluate_pairing(g1_point, g2_point, context, config=None):
    """e(g1_point, g2_point)를 계산해 [6][2][K] limb 배열로 인코딩한다.

    Args:
        g1_point: G1Affine 또는 INFINITY
        g2_point: G2Affine 또는 INFINITY
        context: 열려 있는 CurveContext
        config: LimbConfig (생략 시 context.config)

    Returns:
        PairingResult: 라이브러리 오류는 던지지 않고 failure로 담아 반환한다.

    Raises:
        RuntimeError: context가 이미 닫혀 있을 때
    """
    if config is None:
        config = context.config
    if not context.is_open:
        raise RuntimeError("curve context is closed")

    logger.info("Computing pairing e(G1, G2)")
    try:
        fq12 = context.pairing(g1_point, g2_point)
    except Exception as exc:
        logger.warning("Pairing computation failed: %s", exc)
        return PairingResult.failure(exc)

    value = encode_fp12(fp12_to_fp2_coeffs(fq12, config.prime), config)
    logger.info("Pairing computed")
    return PairingResult.success(value)
