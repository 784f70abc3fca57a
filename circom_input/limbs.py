"""
Limb 코덱: 정수 ↔ 고정 길이 little-endian limb 벡터
=====================================================

circom-pairing 회로는 필드 원소를 K개의 limb로 나누어 받는다.

  value = limb[0] + limb[1]·2^43 + limb[2]·2^86 + ... + limb[5]·2^215

**인코딩 규칙**:
  - 정확히 K번 `value mod 2^43`을 떼어내고 2^43으로 나눈다.
  - 0 ≤ value < 2^(K·43) 가 아니면 ValueOutOfRange. 상위 비트를 버리지 않는다.

사용 예시:
    >>> from circom_input.limbs import encode_limbs, decode_limbs
    >>> encode_limbs(2 ** 43 + 5)
    [5, 1, 0, 0, 0, 0]
    >>> decode_limbs([5, 1, 0, 0, 0, 0])
    8796093022213
"""

from circom_input.config import BN254
from circom_input.errors import InvalidCoordinateFormat, ValueOutOfRange


def _require_int(value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidCoordinateFormat(
            f"정수가 아닌 값은 limb로 인코딩할 수 없습니다: {value!r}")


def encode_limbs(value, config=BN254):
    """정수를 K개의 limb 리스트로 변환한다 (little-endian).

    Args:
        value: 0 이상 2^(K·limb_bits) 미만의 정수
        config: LimbConfig

    Returns:
        list[int]: 길이 K의 limb 리스트, 각 limb는 [0, 2^limb_bits)

    Raises:
        ValueOutOfRange: value가 음수이거나 용량을 넘을 때
        InvalidCoordinateFormat: value가 정수가 아닐 때
    """
    _require_int(value)
    if value < 0 or value >= config.capacity:
        raise ValueOutOfRange(
            f"{config.n_limbs}x{config.limb_bits}비트 limb로 표현할 수 없는 값: {value}")

    limbs = []
    v = value
    for _ in range(config.n_limbs):
        limbs.append(v % config.limb_size)
        v //= config.limb_size
    return limbs


def decode_limbs(limbs, config=BN254):
    """limb 리스트를 정수로 복원한다: Σ limb[i]·2^(limb_bits·i).

    Raises:
        InvalidCoordinateFormat: 길이가 K가 아니거나 limb가 정수가 아닐 때
        ValueOutOfRange: limb가 [0, 2^limb_bits) 범위를 벗어날 때
    """
    if len(limbs) != config.n_limbs:
        raise InvalidCoordinateFormat(
            f"limb 벡터 길이는 {config.n_limbs}이어야 합니다: {len(limbs)}")

    value = 0
    for i, limb in enumerate(limbs):
        _require_int(limb)
        if limb < 0 or limb >= config.limb_size:
            raise ValueOutOfRange(f"limb[{i}] = {limb} 가 2^{config.limb_bits} 범위를 벗어남")
        value += limb << (config.limb_bits * i)
    return value


def zero_limbs(config=BN254):
    """무한원점 sentinel 등에 쓰이는 0 벡터."""
    return [0] * config.n_limbs


def limbs_to_strings(limbs):
    """list[int] → list[str] (JSON 출력용)"""
    return [str(limb) for limb in limbs]


def limbs_from_strings(strings):
    """list[str | int] → list[int]

    JSON에서 읽은 limb 배열을 정수로 바꾼다. 10진 숫자 문자열과 정수만 허용한다.
    """
    limbs = []
    for s in strings:
        if isinstance(s, str):
            if not (s.isascii() and s.isdigit()):
                raise InvalidCoordinateFormat(f"limb가 10진 문자열이 아닙니다: {s!r}")
            limbs.append(int(s))
        elif isinstance(s, int) and not isinstance(s, bool):
            limbs.append(s)
        else:
            raise InvalidCoordinateFormat(f"limb 형식이 올바르지 않습니다: {s!r}")
    return limbs
