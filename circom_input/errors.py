"""
변환 과정에서 발생하는 예외 정의.

PairingComputationFailed를 제외한 모든 예외는 변환 전체를 중단시키며,
출력 파일은 쓰이지 않는다.
"""


class ConversionError(Exception):
    """모든 변환 오류의 기반 클래스."""


class InputNotFound(ConversionError, FileNotFoundError):
    """입력 아티팩트(vkey / proof / public) 파일이 없음."""


class MalformedJSON(ConversionError, ValueError):
    """JSON 파싱 실패 또는 필수 필드 누락."""


class InvalidCoordinateFormat(ConversionError, ValueError):
    """좌표가 10진 문자열도, 이미 인코딩된 limb 배열도 아님."""


class ValueOutOfRange(ConversionError, ValueError):
    """값이 limb 벡터 용량(또는 필드 범위)을 벗어남. 잘라내지 않고 실패한다."""


class PairingComputationFailed(ConversionError):
    """외부 페어링 연산 실패. strict 모드에서만 전파된다."""
