"""
기저체 부호 반전 (Field Negator)
=================================

short Weierstrass 곡선에서 점 P = (x, y)의 역원은 -P = (x, -y)이다.
따라서 y 좌표만 p - y 로 바꾸면 된다 (y = 0 이면 0 그대로).

주의:
    여기서 p는 기저체(base field) 소수 bn128.field_modulus 이다.
    스칼라 필드 위수 bn128.curve_order 와 혼동하지 않는다.

사용 예시:
    >>> from circom_input.config import FIELD_MODULUS
    >>> negate(7, FIELD_MODULUS) == FIELD_MODULUS - 7
    True
    >>> negate(0, FIELD_MODULUS)
    0
"""

from circom_input.config import BN254
from circom_input.errors import ValueOutOfRange
from circom_input.points import G1Affine, is_infinity


def negate(value, prime):
    """필드 원소의 덧셈 역원: value ≠ 0 이면 prime - value, 아니면 0.

    Raises:
        ValueOutOfRange: value가 [0, prime) 범위 밖일 때
    """
    if value < 0 or value >= prime:
        raise ValueOutOfRange(f"필드 원소가 [0, p) 범위를 벗어났습니다: {value}")
    if value == 0:
        return 0
    return prime - value


def negate_g1(point, config=BN254):
    """G1 점의 역원 -P. x는 그대로, y만 반전한다. 무한원점은 그대로 반환."""
    if is_infinity(point):
        return point
    return G1Affine(point.x, negate(point.y, config.prime))
