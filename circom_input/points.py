"""
BN254 점 모델과 snarkjs JSON 파싱
==================================

snarkjs는 점을 동차(homogeneous) 좌표로 내보낸다.

  G1: ["x", "y", "z"]                       z = "1" (affine) / "0" (무한원점)
  G2: [["x0","x1"], ["y0","y1"], ["z0","z1"]] z = ["1","0"] / ["0","0"]

여기서는 z를 파서에서만 소비하고, 내부에서는 tagged variant로 다룬다.

  - G1Affine(x, y)          : x, y ∈ Fp
  - G2Affine(x, y)          : x, y ∈ Fp2
  - INFINITY                : 무한원점 (G1/G2 공통)

"값이 0인 좌표"와 "무한원점"은 서로 다른 것으로 취급되며, 0 limb sentinel로
바뀌는 것은 직렬화(encoder) 단계에서뿐이다.
"""

from collections import namedtuple

from circom_input.config import BN254
from circom_input.errors import InvalidCoordinateFormat, ValueOutOfRange
from circom_input.limbs import decode_limbs, limbs_from_strings


class Fp2(namedtuple("Fp2", ["c0", "c1"])):
    """이차 확대체 원소 c0 + c1·u (u² = -1)."""
    __slots__ = ()

    def is_zero(self):
        return self.c0 == 0 and self.c1 == 0


class G1Affine(namedtuple("G1Affine", ["x", "y"])):
    """G1 affine 점 (x, y ∈ Fp)."""
    __slots__ = ()


class G2Affine(namedtuple("G2Affine", ["x", "y"])):
    """G2 affine 점 (x, y ∈ Fp2)."""
    __slots__ = ()


class Infinity:
    """무한원점 (항등원). INFINITY 싱글톤만 사용한다."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "INFINITY"


INFINITY = Infinity()


def is_infinity(point):
    return point is INFINITY


# ─────────────────────────────────────────────────────────────────────
# 좌표 파싱
# ─────────────────────────────────────────────────────────────────────

def parse_coordinate(raw, config=BN254):
    """좌표 하나를 정수로 변환한다.

    허용 형식:
        - 10진 숫자 문자열: "123..."
        - 이미 인코딩된 limb 배열: 길이 K의 10진 문자열(또는 정수) 리스트

    Raises:
        InvalidCoordinateFormat: 위 두 형식이 아닐 때
        ValueOutOfRange: limb 용량(2^(K·limb_bits))을 넘는 값
    """
    if isinstance(raw, str):
        if not (raw.isascii() and raw.isdigit()):
            raise InvalidCoordinateFormat(f"좌표가 10진 문자열이 아닙니다: {raw!r}")
        value = int(raw)
        if value >= config.capacity:
            raise ValueOutOfRange(
                f"좌표 값이 {config.n_limbs}x{config.limb_bits}비트 limb 용량을 넘습니다: {raw}")
        return value
    if isinstance(raw, list):
        return decode_limbs(limbs_from_strings(raw), config)
    raise InvalidCoordinateFormat(f"지원하지 않는 좌표 형식: {raw!r}")


def parse_fp2(raw, config=BN254):
    """["c0", "c1"] → Fp2"""
    if not isinstance(raw, list) or len(raw) != 2:
        raise InvalidCoordinateFormat(f"Fp2 원소는 [c0, c1] 형식이어야 합니다: {raw!r}")
    return Fp2(parse_coordinate(raw[0], config), parse_coordinate(raw[1], config))


def parse_g1(raw, config=BN254):
    """snarkjs G1 [x, y, z] → G1Affine 또는 INFINITY

    z = 0 이면 무한원점, z = 1 이면 affine 점이다. 그 외의 z는 거부한다.
    """
    if not isinstance(raw, list) or len(raw) != 3:
        raise InvalidCoordinateFormat(f"G1 점은 [x, y, z] 형식이어야 합니다: {raw!r}")
    z = parse_coordinate(raw[2], config)
    if z == 0:
        return INFINITY
    if z != 1:
        raise InvalidCoordinateFormat(f"G1 점의 z 좌표는 0 또는 1이어야 합니다: {raw[2]!r}")
    return G1Affine(parse_coordinate(raw[0], config), parse_coordinate(raw[1], config))


def parse_g2(raw, config=BN254):
    """snarkjs G2 [[x0,x1],[y0,y1],[z0,z1]] → G2Affine 또는 INFINITY"""
    if not isinstance(raw, list) or len(raw) != 3:
        raise InvalidCoordinateFormat(
            f"G2 점은 [[x0,x1],[y0,y1],[z0,z1]] 형식이어야 합니다: {raw!r}")
    z = parse_fp2(raw[2], config)
    if z.is_zero():
        return INFINITY
    if z != Fp2(1, 0):
        raise InvalidCoordinateFormat(f"G2 점의 z 좌표는 [0,0] 또는 [1,0]이어야 합니다: {raw[2]!r}")
    return G2Affine(parse_fp2(raw[0], config), parse_fp2(raw[1], config))


# ─── snarkjs 형식으로 되돌리기 ───

def g1_to_snarkjs(point):
    """G1Affine / INFINITY → ["x", "y", "z"]"""
    if is_infinity(point):
        return ["0", "1", "0"]
    return [str(point.x), str(point.y), "1"]


def g2_to_snarkjs(point):
    """G2Affine / INFINITY → [["x0","x1"],["y0","y1"],["z0","z1"]]"""
    if is_infinity(point):
        return [["0", "0"], ["1", "0"], ["0", "0"]]
    return [
        [str(point.x.c0), str(point.x.c1)],
        [str(point.y.c0), str(point.y.c1)],
        ["1", "0"],
    ]
